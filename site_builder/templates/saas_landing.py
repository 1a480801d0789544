"""
Template "saas-landing" — produit SaaS : hero, features, tarifs, FAQ.
"""
from ..core.tokens import Token as T
from ..fields.values import FieldValues
from .base import TemplateDefinition

FIELDS = {
    "product_name": {"type": "text", "label": "Product Name", "default": "Flowbase", "required": True},
    "headline": {"type": "text", "label": "Headline", "default": "Ship your workflows, not your weekends"},
    "subheadline": {
        "type": "textarea",
        "label": "Subheadline",
        "rows": 3,
        "default": "Automate the busywork across your tools in minutes. No code, no glue scripts.",
    },
    "cta_label": {"type": "text", "label": "CTA Label", "default": "Start free trial"},
    "cta_url": {"type": "url", "label": "CTA Link", "default": "#pricing"},
    "screenshot": {"type": "image", "label": "Product Screenshot", "default": "", "optional": True, "accept": "image/*"},
    "features": {
        "type": "group",
        "label": "Features",
        "item_label": "Feature",
        "min": 1,
        "max": 6,
        "fields": {
            "title": {"type": "text", "label": "Title", "default": ""},
            "description": {"type": "textarea", "label": "Description", "default": ""},
        },
        "default": [
            {"title": "Visual builder", "description": "Drag, drop and connect steps without writing code."},
            {"title": "200+ integrations", "description": "Plug into the tools your team already uses."},
            {"title": "Audit trail", "description": "Every run is logged, replayable and searchable."},
        ],
    },
    "pricing_plans": {
        "type": "group",
        "label": "Pricing Plans",
        "item_label": "Plan",
        "min": 1,
        "max": 3,
        "fields": {
            "name": {"type": "text", "label": "Plan Name", "default": ""},
            "price": {"type": "text", "label": "Price", "default": ""},
            "period": {"type": "text", "label": "Period", "default": "/month"},
            "features": {"type": "textarea", "label": "Features (one per line)", "default": ""},
            "highlighted": {"type": "select", "label": "Highlighted", "options": ["No", "Yes"], "default": "No"},
        },
        "default": [
            {"name": "Starter", "price": "$0", "period": "/month", "features": "3 workflows\n1,000 runs", "highlighted": "No"},
            {"name": "Pro", "price": "$29", "period": "/month", "features": "Unlimited workflows\n50,000 runs\nPriority support", "highlighted": "Yes"},
            {"name": "Team", "price": "$99", "period": "/month", "features": "Everything in Pro\nSSO\nShared workspaces", "highlighted": "No"},
        ],
    },
    "faq": {
        "type": "group",
        "label": "FAQ",
        "item_label": "Question",
        "min": 0,
        "max": 8,
        "fields": {
            "question": {"type": "text", "label": "Question", "default": ""},
            "answer": {"type": "textarea", "label": "Answer", "default": ""},
        },
        "default": [
            {"question": "Can I cancel anytime?", "answer": "Yes. Plans are monthly and can be cancelled in one click."},
            {"question": "Is there a free trial?", "answer": "Every paid plan starts with a 14-day trial."},
        ],
    },
    "footer_text": {"type": "text", "label": "Footer Text", "default": "Made for teams who hate busywork."},
    "theme": {"type": "theme-selector", "label": "Design Style"},
}

CSS = f"""
.sl-nav {{ display: flex; justify-content: space-between; align-items: center; padding: {T.SPACE_SM.var} 0; }}
.sl-brand {{ font-family: {T.FONT_HEADING.var}; font-weight: 700; font-size: 1.25rem; }}
.sl-hero {{ padding: {T.SPACE_XL.var} 0; text-align: center; animation: {T.ANIM_SLIDE_UP.var}; }}
.sl-hero h1 {{ font-size: {T.TEXT_HERO.var}; line-height: 1.05; letter-spacing: -0.03em; max-width: 14ch; margin: 0 auto {T.SPACE_SM.var}; }}
.sl-hero p {{ color: {T.COLOR_TEXT_SECONDARY.var}; font-size: {T.TEXT_BODY.var}; max-width: 620px; margin: 0 auto {T.SPACE_MD.var}; }}
.sl-shot {{ margin-top: {T.SPACE_LG.var}; width: 100%; border-radius: {T.RADIUS_LG.var}; box-shadow: {T.SHADOW_XL.var}; border: 1px solid {T.COLOR_BORDER.var}; }}
.sl-section {{ padding: {T.SPACE_XL.var} 0; }}
.sl-section--alt {{ background: {T.COLOR_SURFACE.var}; }}
.sl-section h2 {{ font-size: {T.TEXT_H2.var}; text-align: center; margin-bottom: {T.SPACE_LG.var}; }}
.sl-grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: {T.SPACE_MD.var}; }}
.sl-feature h3 {{ font-size: {T.TEXT_H3.var}; margin-bottom: {T.SPACE_XS.var}; }}
.sl-feature p, .sl-plan li {{ color: {T.COLOR_TEXT_SECONDARY.var}; }}
.sl-plan {{ display: flex; flex-direction: column; gap: {T.SPACE_SM.var}; }}
.sl-plan--highlighted {{ border-color: {T.COLOR_ACCENT.var}; box-shadow: 0 0 0 2px rgba({T.COLOR_ACCENT_RGB.var}, 0.35), {T.SHADOW_LG.var}; }}
.sl-price {{ font-family: {T.FONT_HEADING.var}; font-size: {T.TEXT_H1.var}; }}
.sl-price small {{ font-size: {T.TEXT_SMALL.var}; color: {T.COLOR_TEXT_TERTIARY.var}; }}
.sl-plan ul {{ list-style: none; display: grid; gap: {T.SPACE_XS.var}; }}
.sl-faq {{ max-width: 760px; margin: 0 auto; }}
.sl-faq details {{ border-bottom: 1px solid {T.COLOR_BORDER.var}; padding: {T.SPACE_SM.var} 0; }}
.sl-faq summary {{ cursor: pointer; font-weight: 600; }}
.sl-faq p {{ color: {T.COLOR_TEXT_SECONDARY.var}; margin-top: {T.SPACE_XS.var}; }}
.sl-footer {{ padding: {T.SPACE_MD.var} 0; text-align: center; color: {T.COLOR_TEXT_TERTIARY.var}; font-size: {T.TEXT_SMALL.var}; }}
"""


def _plan(plan: dict, cta_url: str) -> str:
    highlighted = plan["highlighted"] == "Yes"
    perks = "".join(
        f"<li>{line.strip()}</li>" for line in plan["features"].splitlines() if line.strip()
    )
    return f"""<article class="card sl-plan{' sl-plan--highlighted' if highlighted else ''}">
        <h3>{plan["name"]}</h3>
        <div class="sl-price">{plan["price"]}<small>{plan["period"]}</small></div>
        <ul>{perks}</ul>
        <a class="btn{'' if highlighted else ' btn-outline'}" href="{cta_url}">Choose {plan["name"]}</a>
      </article>"""


def structure(values: FieldValues, theme, color_mode: str) -> str:
    product = values.text("product_name")
    cta_url = values.url("cta_url")

    shot = ""
    if values.has("screenshot"):
        shot = f'<img class="sl-shot" src="{values.url("screenshot")}" alt="{product}">'

    features = "".join(
        f'<article class="card sl-feature"><h3>{f["title"]}</h3><p>{f["description"]}</p></article>'
        for f in values.items("features")
    )
    plans = "".join(_plan(p, cta_url) for p in values.items("pricing_plans") if p["name"])

    faq_html = ""
    faq = values.items("faq")
    if faq:
        entries = "".join(
            f'<details><summary>{q["question"]}</summary><p>{q["answer"]}</p></details>'
            for q in faq if q["question"]
        )
        faq_html = f"""
  <section class="sl-section sl-section--alt" id="faq">
    <div class="container"><h2>Questions</h2><div class="sl-faq">{entries}</div></div>
  </section>"""

    return f"""<header class="container sl-nav">
  <div class="sl-brand">{product}</div>
  <a class="btn btn-outline" href="{cta_url}">{values.text("cta_label")}</a>
</header>
<main>
  <section class="sl-hero">
    <div class="container">
      <h1>{values.text("headline")}</h1>
      <p>{values.text("subheadline")}</p>
      <a class="btn" href="{cta_url}">{values.text("cta_label")}</a>
      {shot}
    </div>
  </section>
  <section class="sl-section sl-section--alt" id="features">
    <div class="container"><h2>Features</h2><div class="sl-grid">{features}</div></div>
  </section>
  <section class="sl-section" id="pricing">
    <div class="container"><h2>Pricing</h2><div class="sl-grid">{plans}</div></div>
  </section>{faq_html}
</main>
<footer class="sl-footer">{product} · {values.text("footer_text")}</footer>"""


TEMPLATE = TemplateDefinition(
    id="saas-landing",
    name="SaaS Product",
    description="Software product page with features, pricing plans and FAQ",
    category="business",
    default_theme="gradient",
    fields=FIELDS,
    structure=structure,
    css=CSS,
    title_field="product_name",
)
