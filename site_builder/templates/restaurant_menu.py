"""
Template "restaurant-menu" — bistro : hero, carte par catégories, horaires, réservation.
"""
from ..core.tokens import Token as T
from ..fields.values import FieldValues
from .base import TemplateDefinition

FIELDS = {
    "restaurant_name": {"type": "text", "label": "Restaurant Name", "default": "Le Petit Bistro", "required": True},
    "tagline": {"type": "text", "label": "Tagline", "default": "Seasonal cooking, natural wines"},
    "hero_image": {"type": "image", "label": "Hero Image", "default": "", "optional": True, "accept": "image/*"},
    "about": {
        "type": "textarea",
        "label": "About",
        "rows": 4,
        "default": "A neighbourhood bistro serving honest food made from local produce since 2009.",
    },
    "currency": {"type": "select", "label": "Currency", "options": ["€", "$", "£"], "default": "€"},
    "menu_items": {
        "type": "group",
        "label": "Menu",
        "item_label": "Dish",
        "min": 1,
        "max": 24,
        "fields": {
            "category": {"type": "text", "label": "Category", "default": "Mains"},
            "name": {"type": "text", "label": "Dish", "default": ""},
            "description": {"type": "textarea", "label": "Description", "default": ""},
            "price": {"type": "text", "label": "Price", "default": ""},
        },
        "default": [
            {"category": "Starters", "name": "French Onion Soup", "description": "Gruyère crouton, slow-cooked onions", "price": "9"},
            {"category": "Starters", "name": "Burrata", "description": "Heirloom tomatoes, basil oil", "price": "12"},
            {"category": "Mains", "name": "Steak Frites", "description": "Hanger steak, herb butter, hand-cut fries", "price": "26"},
            {"category": "Mains", "name": "Roasted Cod", "description": "Beurre blanc, spring vegetables", "price": "24"},
            {"category": "Desserts", "name": "Crème Brûlée", "description": "Tahitian vanilla", "price": "8"},
        ],
    },
    "hours": {
        "type": "repeatable",
        "label": "Opening Hours",
        "item_label": "Line",
        "max": 7,
        "default": ["Tue – Fri · 12:00 – 22:00", "Sat – Sun · 11:00 – 23:00", "Mon · Closed"],
    },
    "address": {"type": "text", "label": "Address", "default": "12 Rue des Martyrs, Paris"},
    "phone": {"type": "tel", "label": "Phone", "default": "+33 1 23 45 67 89"},
    "reservation_url": {"type": "url", "label": "Reservation Link", "default": "#contact", "optional": True},
    "theme": {"type": "theme-selector", "label": "Design Style"},
}

CSS = f"""
.rm-hero {{ padding: {T.SPACE_XXL.var} 0 {T.SPACE_XL.var}; text-align: center; background: {T.COLOR_SURFACE.var}; background-size: cover; background-position: center; }}
.rm-hero h1 {{ font-size: {T.TEXT_HERO.var}; line-height: 1.05; animation: {T.ANIM_FADE_IN.var}; }}
.rm-hero p {{ color: {T.COLOR_TEXT_SECONDARY.var}; font-size: {T.TEXT_BODY.var}; margin: {T.SPACE_SM.var} 0 {T.SPACE_MD.var}; }}
.rm-about {{ padding: {T.SPACE_LG.var} 0; text-align: center; max-width: 680px; margin: 0 auto; color: {T.COLOR_TEXT_SECONDARY.var}; }}
.rm-menu {{ padding: {T.SPACE_LG.var} 0; }}
.rm-category {{ margin-bottom: {T.SPACE_LG.var}; }}
.rm-category h2 {{ font-size: {T.TEXT_H2.var}; text-align: center; margin-bottom: {T.SPACE_MD.var}; }}
.rm-dish {{ display: flex; justify-content: space-between; gap: {T.SPACE_SM.var}; padding: {T.SPACE_SM.var} 0; border-bottom: 1px dashed {T.COLOR_BORDER.var}; }}
.rm-dish h3 {{ font-size: {T.TEXT_BODY.var}; }}
.rm-dish p {{ color: {T.COLOR_TEXT_SECONDARY.var}; font-size: {T.TEXT_SMALL.var}; }}
.rm-price {{ font-family: {T.FONT_MONO.var}; color: {T.COLOR_ACCENT.var}; white-space: nowrap; }}
.rm-info {{ padding: {T.SPACE_LG.var} 0; background: {T.COLOR_SURFACE_ALT.var}; }}
.rm-info__grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: {T.SPACE_MD.var}; }}
.rm-info h3 {{ font-size: {T.TEXT_H3.var}; margin-bottom: {T.SPACE_XS.var}; }}
.rm-info ul {{ list-style: none; color: {T.COLOR_TEXT_SECONDARY.var}; }}
"""


def structure(values: FieldValues, theme, color_mode: str) -> str:
    currency = values.text("currency")

    # Regroupement par catégorie, dans l'ordre de première apparition
    categories: dict[str, list[dict]] = {}
    for dish in values.items("menu_items"):
        if dish["name"]:
            categories.setdefault(dish["category"] or "Menu", []).append(dish)

    menu = ""
    for category, dishes in categories.items():
        rows = "".join(
            f'<div class="rm-dish"><div><h3>{d["name"]}</h3><p>{d["description"]}</p></div>'
            f'<span class="rm-price">{d["price"] and currency + d["price"]}</span></div>'
            for d in dishes
        )
        menu += f'\n      <div class="rm-category"><h2>{category}</h2>{rows}</div>'

    hero_style = ""
    if values.has("hero_image"):
        hero_style = f' style="background-image: url(\'{values.url("hero_image")}\');"'

    reservation = ""
    if values.has("reservation_url"):
        reservation = f'<a class="btn" href="{values.url("reservation_url")}">Book a table</a>'

    hours = "".join(f"<li>{line}</li>" for line in values.strings("hours"))
    phone = values.text("phone")

    return f"""<header class="rm-hero"{hero_style}>
  <div class="container">
    <h1>{values.text("restaurant_name")}</h1>
    <p>{values.text("tagline")}</p>
    {reservation}
  </div>
</header>
<main>
  <section class="rm-about"><p>{values.text("about")}</p></section>
  <section class="rm-menu">
    <div class="container">{menu}
    </div>
  </section>
  <section class="rm-info" id="contact">
    <div class="container rm-info__grid">
      <div><h3>Hours</h3><ul>{hours}</ul></div>
      <div><h3>Find us</h3><ul><li>{values.text("address")}</li><li><a href="tel:{"".join(phone.split())}">{phone}</a></li></ul></div>
    </div>
  </section>
</main>"""


TEMPLATE = TemplateDefinition(
    id="restaurant-menu",
    name="Restaurant Menu",
    description="Casual bistro page with a categorised menu and opening hours",
    category="food",
    default_theme="elegant",
    fields=FIELDS,
    structure=structure,
    css=CSS,
    title_field="restaurant_name",
)
