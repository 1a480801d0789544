"""
Template "business-card" — carte de visite numérique.

Template de référence : montre le contrat complet (schéma, lecture via
FieldValues, Token uniquement, couleurs inline dérivées de l'accent).
"""
from ..core.colors import darken, with_alpha
from ..core.tokens import Token as T
from ..fields.values import FieldValues
from .base import TemplateDefinition

FIELDS = {
    "name": {"type": "text", "label": "Full Name", "default": "Alex Morgan", "required": True},
    "title": {"type": "text", "label": "Job Title", "default": "Product Designer"},
    "company": {"type": "text", "label": "Company", "default": "Creative Studio"},
    "location": {"type": "text", "label": "Location", "default": "San Francisco, CA", "optional": True},
    "avatar": {"type": "image", "label": "Photo", "default": "", "optional": True, "accept": "image/*"},
    "accent_color": {"type": "color", "label": "Accent Color", "default": "#eb1736"},
    "contact_info": {
        "type": "group",
        "label": "Contact Information",
        "item_label": "Contact",
        "min": 1,
        "max": 5,
        "fields": {
            "type": {"type": "select", "label": "Type", "options": ["Email", "Phone", "Website"], "default": "Email"},
            "value": {"type": "text", "label": "Value", "default": ""},
        },
        "default": [
            {"type": "Email", "value": "alex@creativestudio.com"},
            {"type": "Phone", "value": "+1 (555) 123-4567"},
            {"type": "Website", "value": "creativestudio.com"},
        ],
    },
    "theme": {"type": "theme-selector", "label": "Design Style"},
}

_ICONS = {
    "Email": "M3 8l7.89 5.26a2 2 0 002.22 0L21 8M5 19h14a2 2 0 002-2V7a2 2 0 00-2-2H5a2 2 0 00-2 2v10a2 2 0 002 2z",
    "Phone": "M3 5a2 2 0 012-2h3.28a1 1 0 01.948.684l1.498 4.493a1 1 0 01-.502 1.21l-2.257 1.13a11.042 11.042 0 005.516 5.516l1.13-2.257a1 1 0 011.21-.502l4.493 1.498a1 1 0 01.684.949V19a2 2 0 01-2 2h-1C9.716 21 3 14.284 3 6V5z",
    "Website": "M21 12a9 9 0 01-9 9m9-9a9 9 0 00-9-9m9 9H3m9 9a9 9 0 01-9-9m9 9c1.657 0 3-4.03 3-9s-1.343-9-3-9m0 18c-1.657 0-3-4.03-3-9s1.343-9 3-9m-9 9a9 9 0 019-9",
}

CSS = f"""
.bc {{ min-height: 100vh; display: flex; align-items: center; justify-content: center; padding: {T.SPACE_MD.var}; }}
.bc__card {{ background: {T.COLOR_SURFACE.var}; border: 1px solid {T.COLOR_BORDER.var}; border-radius: {T.RADIUS_XL.var}; box-shadow: {T.SHADOW_MD.var}; padding: {T.SPACE_LG.var}; max-width: 900px; width: 100%; display: grid; grid-template-columns: 1fr 1px 1fr; gap: {T.SPACE_LG.var}; animation: {T.ANIM_SLIDE_UP.var}; }}
.bc__divider {{ background: {T.COLOR_BORDER.var}; }}
.bc__identity {{ display: flex; flex-direction: column; gap: {T.SPACE_SM.var}; }}
.bc__avatar {{ width: 80px; height: 80px; border-radius: {T.RADIUS_LG.var}; display: flex; align-items: center; justify-content: center; font-family: {T.FONT_HEADING.var}; font-size: 2rem; font-weight: 700; color: #ffffff; object-fit: cover; }}
.bc__name {{ font-family: {T.FONT_HEADING.var}; font-size: {T.TEXT_H2.var}; color: {T.COLOR_TEXT.var}; letter-spacing: -0.02em; }}
.bc__title {{ font-size: {T.TEXT_BODY.var}; color: {T.COLOR_TEXT_SECONDARY.var}; }}
.bc__meta {{ font-size: {T.TEXT_SMALL.var}; color: {T.COLOR_TEXT_TERTIARY.var}; }}
.bc__contacts {{ display: flex; flex-direction: column; justify-content: center; gap: {T.SPACE_XS.var}; }}
.bc__contact {{ display: flex; align-items: center; gap: {T.SPACE_SM.var}; padding: {T.SPACE_XS.var} {T.SPACE_SM.var}; border-radius: {T.RADIUS_MD.var}; color: {T.COLOR_TEXT.var}; text-decoration: none; border: 1px solid transparent; transition: border-color 0.2s; }}
.bc__contact:hover {{ border-color: {T.COLOR_BORDER_HOVER.var}; }}
.bc__contact svg {{ width: 20px; height: 20px; flex-shrink: 0; }}
@media (max-width: 768px) {{
  .bc__card {{ grid-template-columns: 1fr; padding: {T.SPACE_MD.var}; gap: {T.SPACE_MD.var}; }}
  .bc__divider {{ display: none; }}
}}
"""


def _contact_href(kind: str, value: str) -> str:
    if kind == "Email":
        return f"mailto:{value}"
    if kind == "Phone":
        return "tel:" + "".join(value.split())
    if value.startswith(("http://", "https://")):
        return value
    return f"https://{value}"


def structure(values: FieldValues, theme, color_mode: str) -> str:
    accent = values.color("accent_color")
    name = values.text("name")

    if values.has("avatar"):
        avatar = f'<img class="bc__avatar" src="{values.url("avatar")}" alt="{name}">'
    else:
        initials = "".join(part[0] for part in str(values.raw("name")).split()[:2]).upper()
        avatar = (
            f'<div class="bc__avatar" style="background: linear-gradient(135deg, {accent}, '
            f'{darken(accent, 20)}); box-shadow: 0 4px 16px {with_alpha(accent, 0.19)};">'
            f"{FieldValues.escape(initials)}</div>"
        )

    meta = values.text("company")
    if values.has("location"):
        meta += f" · {values.text('location')}"

    contacts = []
    for contact in values.items("contact_info"):
        if not contact["value"]:
            continue
        kind = contact["type"] if contact["type"] in _ICONS else "Website"
        contacts.append(f"""
      <a class="bc__contact" href="{_contact_href(kind, contact['value'])}">
        <svg fill="none" stroke="{accent}" viewBox="0 0 24 24"><path stroke-linecap="round" stroke-linejoin="round" stroke-width="2" d="{_ICONS[kind]}"/></svg>
        <span>{contact['value']}</span>
      </a>""")

    return f"""<main class="bc">
  <div class="bc__card">
    <div class="bc__identity">
      {avatar}
      <h1 class="bc__name">{name}</h1>
      <p class="bc__title">{values.text("title")}</p>
      <p class="bc__meta">{meta}</p>
    </div>
    <div class="bc__divider"></div>
    <div class="bc__contacts">{"".join(contacts)}
    </div>
  </div>
</main>"""


TEMPLATE = TemplateDefinition(
    id="business-card",
    name="Business Card",
    description="Digital business card with contact details",
    category="personal",
    default_theme="minimal",
    fields=FIELDS,
    structure=structure,
    css=CSS,
    title_field="name",
)
