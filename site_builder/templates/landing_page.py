"""
Template "landing-page" — page produit minimaliste (hero, stats, features, témoignage).
"""
from ..core.tokens import Token as T
from ..fields.values import FieldValues
from .base import TemplateDefinition

FIELDS = {
    "company_name": {"type": "text", "label": "Company Name", "default": "ACME", "required": True},
    "headline": {"type": "text", "label": "Headline", "default": "Less is More", "required": True},
    "subheadline": {
        "type": "textarea",
        "label": "Subheadline",
        "rows": 3,
        "default": "Clean design, thoughtful whitespace, and perfect typography. "
                   "Focus on what matters with minimal distractions.",
    },
    "cta_primary": {"type": "text", "label": "Primary CTA", "default": "Get Started"},
    "cta_primary_url": {"type": "url", "label": "Primary CTA Link", "default": "#features"},
    "cta_secondary": {"type": "text", "label": "Secondary CTA", "default": "Learn More", "optional": True},
    "stats": {
        "type": "group",
        "label": "Statistics",
        "item_label": "Stat",
        "min": 0,
        "max": 4,
        "fields": {
            "number": {"type": "text", "label": "Number", "default": ""},
            "label": {"type": "text", "label": "Label", "default": ""},
        },
        "default": [
            {"number": "99.9%", "label": "Uptime Guarantee"},
            {"number": "50K+", "label": "Active Users"},
            {"number": "4.9", "label": "User Rating"},
        ],
    },
    "features_title": {"type": "text", "label": "Features Section Title", "default": "Built for Simplicity"},
    "features_subtitle": {"type": "text", "label": "Features Subtitle", "default": "Everything you need, nothing you don't"},
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
            {"title": "Clean Interface", "description": "Intuitive design that gets out of your way and lets you focus on your work."},
            {"title": "Fast Performance", "description": "Optimized for speed with zero bloat. Every millisecond counts."},
            {"title": "Responsive Design", "description": "Perfectly adapted for every screen size, from mobile to desktop."},
        ],
    },
    "testimonial_quote": {
        "type": "textarea",
        "label": "Testimonial Quote",
        "optional": True,
        "default": "The most elegant solution I've found. Nothing unnecessary, everything essential.",
    },
    "testimonial_author": {"type": "text", "label": "Testimonial Author", "default": "Sarah Chen"},
    "testimonial_role": {"type": "text", "label": "Author Role", "default": "Product Designer"},
    "theme": {"type": "theme-selector", "label": "Design Style"},
}

CSS = f"""
.lp-header {{ padding: {T.SPACE_SM.var} 0; border-bottom: 1px solid {T.COLOR_BORDER.var}; }}
.lp-nav {{ display: flex; justify-content: space-between; align-items: center; }}
.lp-brand {{ font-family: {T.FONT_HEADING.var}; font-weight: 600; font-size: 1.125rem; letter-spacing: -0.02em; }}
.lp-nav ul {{ display: flex; gap: {T.SPACE_MD.var}; list-style: none; }}
.lp-nav a {{ color: {T.COLOR_TEXT_SECONDARY.var}; text-decoration: none; font-size: {T.TEXT_SMALL.var}; }}
.lp-hero {{ padding: {T.SPACE_XXL.var} 0 {T.SPACE_XL.var}; text-align: center; animation: {T.ANIM_FADE_IN.var}; }}
.lp-hero h1 {{ font-size: {T.TEXT_HERO.var}; line-height: 1.1; letter-spacing: -0.03em; margin-bottom: {T.SPACE_SM.var}; }}
.lp-hero p {{ font-size: {T.TEXT_BODY.var}; color: {T.COLOR_TEXT_SECONDARY.var}; max-width: 600px; margin: 0 auto {T.SPACE_MD.var}; }}
.lp-actions {{ display: flex; gap: {T.SPACE_SM.var}; justify-content: center; flex-wrap: wrap; }}
.lp-stats {{ padding: {T.SPACE_LG.var} 0; background: {T.COLOR_SURFACE.var}; border-top: 1px solid {T.COLOR_BORDER.var}; border-bottom: 1px solid {T.COLOR_BORDER.var}; }}
.lp-stats__grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: {T.SPACE_MD.var}; text-align: center; }}
.lp-stats__number {{ font-family: {T.FONT_HEADING.var}; font-size: {T.TEXT_H2.var}; color: {T.COLOR_ACCENT.var}; }}
.lp-stats__label {{ color: {T.COLOR_TEXT_SECONDARY.var}; font-size: {T.TEXT_SMALL.var}; }}
.lp-features {{ padding: {T.SPACE_XL.var} 0; }}
.lp-section-head {{ text-align: center; margin-bottom: {T.SPACE_LG.var}; }}
.lp-section-head h2 {{ font-size: {T.TEXT_H2.var}; margin-bottom: {T.SPACE_XS.var}; }}
.lp-section-head p {{ color: {T.COLOR_TEXT_SECONDARY.var}; }}
.lp-features__grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(260px, 1fr)); gap: {T.SPACE_MD.var}; }}
.lp-feature h3 {{ font-size: {T.TEXT_H3.var}; margin-bottom: {T.SPACE_XS.var}; }}
.lp-feature p {{ color: {T.COLOR_TEXT_SECONDARY.var}; }}
.lp-testimonial {{ padding: {T.SPACE_XL.var} 0; background: {T.COLOR_SURFACE_ALT.var}; text-align: center; }}
.lp-testimonial blockquote {{ font-family: {T.FONT_HEADING.var}; font-size: {T.TEXT_H3.var}; max-width: 760px; margin: 0 auto {T.SPACE_MD.var}; }}
.lp-testimonial cite {{ font-style: normal; color: {T.COLOR_TEXT_SECONDARY.var}; font-size: {T.TEXT_SMALL.var}; }}
.lp-footer {{ padding: {T.SPACE_MD.var} 0; text-align: center; color: {T.COLOR_TEXT_TERTIARY.var}; font-size: {T.TEXT_TINY.var}; border-top: 1px solid {T.COLOR_BORDER.var}; }}
"""


def structure(values: FieldValues, theme, color_mode: str) -> str:
    company = values.text("company_name")

    actions = f'<a href="{values.url("cta_primary_url")}" class="btn">{values.text("cta_primary")}</a>'
    if values.has("cta_secondary"):
        actions += f'<a href="#features" class="btn btn-outline">{values.text("cta_secondary")}</a>'

    stats_html = ""
    stats = values.items("stats")
    if stats:
        cells = "".join(
            f'<div><div class="lp-stats__number">{s["number"]}</div>'
            f'<div class="lp-stats__label">{s["label"]}</div></div>'
            for s in stats
        )
        stats_html = f"""
  <section class="lp-stats">
    <div class="container"><div class="lp-stats__grid">{cells}</div></div>
  </section>"""

    features = "".join(
        f'<article class="card lp-feature"><h3>{f["title"]}</h3><p>{f["description"]}</p></article>'
        for f in values.items("features")
    )

    testimonial = ""
    if values.has("testimonial_quote"):
        testimonial = f"""
  <section class="lp-testimonial" id="testimonial">
    <div class="container">
      <blockquote>&ldquo;{values.text("testimonial_quote")}&rdquo;</blockquote>
      <cite>{values.text("testimonial_author")} · {values.text("testimonial_role")}</cite>
    </div>
  </section>"""

    return f"""<header class="lp-header">
  <div class="container">
    <nav class="lp-nav">
      <div class="lp-brand">{company}</div>
      <ul><li><a href="#features">Features</a></li><li><a href="#testimonial">Reviews</a></li></ul>
    </nav>
  </div>
</header>
<main>
  <section class="lp-hero">
    <div class="container">
      <h1>{values.text("headline")}</h1>
      <p>{values.text("subheadline")}</p>
      <div class="lp-actions">{actions}</div>
    </div>
  </section>{stats_html}
  <section class="lp-features" id="features">
    <div class="container">
      <div class="lp-section-head">
        <h2>{values.text("features_title")}</h2>
        <p>{values.text("features_subtitle")}</p>
      </div>
      <div class="lp-features__grid">{features}</div>
    </div>
  </section>{testimonial}
</main>
<footer class="lp-footer"><div class="container">&copy; {company}</div></footer>"""


TEMPLATE = TemplateDefinition(
    id="landing-page",
    name="Minimal Landing Page",
    description="Product landing page with stats, features and a testimonial",
    category="business",
    default_theme="minimal",
    fields=FIELDS,
    structure=structure,
    css=CSS,
    title_field="company_name",
)
