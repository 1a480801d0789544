"""
Template "small-business" — site multi-page : index.html, about.html, contact.html.

Chaque page est rendue en document complet ; la navigation relie les fichiers
par chemins relatifs pour rester consultable hors ligne une fois exporté.
"""
from ..core.tokens import Token as T
from ..fields.values import FieldValues
from .base import TemplateDefinition

FIELDS = {
    "business_name": {"type": "text", "label": "Business Name", "default": "Brightside Cleaning", "required": True},
    "tagline": {"type": "text", "label": "Tagline", "default": "Spotless homes, happy weekends"},
    "hero_text": {
        "type": "textarea",
        "label": "Intro",
        "rows": 3,
        "default": "Reliable, eco-friendly cleaning for homes and small offices across the city.",
    },
    "logo": {"type": "image", "label": "Logo", "default": "", "optional": True, "accept": "image/*"},
    "services": {
        "type": "group",
        "label": "Services",
        "item_label": "Service",
        "min": 1,
        "max": 6,
        "fields": {
            "name": {"type": "text", "label": "Service", "default": ""},
            "description": {"type": "textarea", "label": "Description", "default": ""},
            "price": {"type": "text", "label": "Starting Price", "default": ""},
        },
        "default": [
            {"name": "Home Cleaning", "description": "Weekly or one-off cleaning of every room.", "price": "From $90"},
            {"name": "Deep Cleaning", "description": "Top-to-bottom reset, ovens and windows included.", "price": "From $220"},
            {"name": "Office Cleaning", "description": "Evening service for offices up to 30 desks.", "price": "On quote"},
        ],
    },
    "about_title": {"type": "text", "label": "About Title", "default": "Our story"},
    "about_text": {
        "type": "textarea",
        "label": "About",
        "rows": 6,
        "default": "Founded by two neighbours in 2015, Brightside has grown into a team of twelve "
                   "who still treat every home like their own.",
    },
    "values": {
        "type": "repeatable",
        "label": "Values",
        "item_label": "Value",
        "max": 6,
        "default": ["Eco-friendly products", "Insured and vetted staff", "Satisfaction guaranteed"],
    },
    "email": {"type": "email", "label": "Email", "default": "hello@brightside.example"},
    "phone": {"type": "tel", "label": "Phone", "default": "+1 (555) 010-2030"},
    "address": {"type": "text", "label": "Address", "default": "48 Market Street, Springfield"},
    "hours": {"type": "text", "label": "Hours", "default": "Mon – Sat · 8:00 – 18:00"},
    "theme": {"type": "theme-selector", "label": "Design Style"},
}

CSS = f"""
.sb-nav {{ display: flex; justify-content: space-between; align-items: center; padding: {T.SPACE_SM.var} 0; border-bottom: 1px solid {T.COLOR_BORDER.var}; }}
.sb-brand {{ display: flex; align-items: center; gap: {T.SPACE_XS.var}; font-family: {T.FONT_HEADING.var}; font-weight: 700; color: {T.COLOR_TEXT.var}; text-decoration: none; }}
.sb-brand img {{ height: 36px; width: auto; }}
.sb-nav ul {{ display: flex; gap: {T.SPACE_SM.var}; list-style: none; }}
.sb-nav a {{ color: {T.COLOR_TEXT_SECONDARY.var}; text-decoration: none; }}
.sb-nav a[aria-current="page"] {{ color: {T.COLOR_ACCENT.var}; }}
.sb-hero {{ padding: {T.SPACE_XL.var} 0; animation: {T.ANIM_FADE_IN.var}; }}
.sb-hero h1 {{ font-size: {T.TEXT_H1.var}; max-width: 18ch; margin-bottom: {T.SPACE_SM.var}; }}
.sb-hero p {{ color: {T.COLOR_TEXT_SECONDARY.var}; max-width: 560px; margin-bottom: {T.SPACE_MD.var}; }}
.sb-section {{ padding: {T.SPACE_LG.var} 0; }}
.sb-section h2 {{ font-size: {T.TEXT_H2.var}; margin-bottom: {T.SPACE_MD.var}; }}
.sb-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: {T.SPACE_MD.var}; }}
.sb-service h3 {{ font-size: {T.TEXT_H3.var}; margin-bottom: {T.SPACE_XS.var}; }}
.sb-service p {{ color: {T.COLOR_TEXT_SECONDARY.var}; }}
.sb-price {{ margin-top: {T.SPACE_SM.var}; color: {T.COLOR_ACCENT.var}; font-weight: 600; }}
.sb-prose {{ max-width: 680px; color: {T.COLOR_TEXT_SECONDARY.var}; font-size: {T.TEXT_BODY.var}; }}
.sb-values {{ list-style: none; display: grid; gap: {T.SPACE_XS.var}; margin-top: {T.SPACE_MD.var}; }}
.sb-values li::before {{ content: "✓ "; color: {T.COLOR_ACCENT.var}; }}
.sb-contact dt {{ font-size: {T.TEXT_SMALL.var}; color: {T.COLOR_TEXT_TERTIARY.var}; text-transform: uppercase; letter-spacing: 0.08em; }}
.sb-contact dd {{ margin-bottom: {T.SPACE_SM.var}; }}
.sb-footer {{ padding: {T.SPACE_MD.var} 0; border-top: 1px solid {T.COLOR_BORDER.var}; color: {T.COLOR_TEXT_TERTIARY.var}; font-size: {T.TEXT_SMALL.var}; }}
"""

_NAV = (("index.html", "Home"), ("about.html", "About"), ("contact.html", "Contact"))


def _chrome(values: FieldValues, current: str, body: str) -> str:
    name = values.text("business_name")
    logo = f'<img src="{values.url("logo")}" alt="">' if values.has("logo") else ""
    links = ""
    for href, label in _NAV:
        current_attr = ' aria-current="page"' if href == current else ""
        links += f'<li><a href="./{href}"{current_attr}>{label}</a></li>'
    return f"""<header class="container sb-nav">
  <a class="sb-brand" href="./index.html">{logo}{name}</a>
  <ul>{links}</ul>
</header>
<main>{body}
</main>
<footer class="sb-footer"><div class="container">&copy; {name} · {values.text("address")}</div></footer>"""


def structure(values: FieldValues, theme, color_mode: str) -> str:
    services = "".join(
        f'<article class="card sb-service"><h3>{s["name"]}</h3><p>{s["description"]}</p>'
        + (f'<div class="sb-price">{s["price"]}</div>' if s["price"] else "")
        + "</article>"
        for s in values.items("services")
        if s["name"]
    )
    body = f"""
  <section class="sb-hero">
    <div class="container">
      <h1>{values.text("tagline")}</h1>
      <p>{values.text("hero_text")}</p>
      <a class="btn" href="./contact.html">Get a quote</a>
    </div>
  </section>
  <section class="sb-section">
    <div class="container"><h2>Services</h2><div class="sb-grid">{services}</div></div>
  </section>"""
    return _chrome(values, "index.html", body)


def about_page(values: FieldValues, theme, color_mode: str) -> str:
    items = "".join(f"<li>{v}</li>" for v in values.strings("values"))
    body = f"""
  <section class="sb-section">
    <div class="container">
      <h2>{values.text("about_title")}</h2>
      <p class="sb-prose">{values.text("about_text")}</p>
      <ul class="sb-values">{items}</ul>
    </div>
  </section>"""
    return _chrome(values, "about.html", body)


def contact_page(values: FieldValues, theme, color_mode: str) -> str:
    email = values.text("email")
    phone = values.text("phone")
    body = f"""
  <section class="sb-section">
    <div class="container">
      <h2>Contact</h2>
      <dl class="card sb-contact">
        <dt>Email</dt><dd><a href="mailto:{email}">{email}</a></dd>
        <dt>Phone</dt><dd><a href="tel:{"".join(phone.split())}">{phone}</a></dd>
        <dt>Address</dt><dd>{values.text("address")}</dd>
        <dt>Hours</dt><dd>{values.text("hours")}</dd>
      </dl>
    </div>
  </section>"""
    return _chrome(values, "contact.html", body)


TEMPLATE = TemplateDefinition(
    id="small-business",
    name="Small Business",
    description="Three-page site for a local business (home, about, contact)",
    category="business",
    default_theme="gradient",
    fields=FIELDS,
    structure=structure,
    css=CSS,
    pages={"about.html": about_page, "contact.html": contact_page},
    title_field="business_name",
)
