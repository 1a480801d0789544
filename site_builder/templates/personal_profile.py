"""
Template "personal-profile" — profil personnel : bio, compétences, projets, liens.
"""
from ..core.tokens import Token as T
from ..fields.values import FieldValues
from .base import TemplateDefinition

FIELDS = {
    "name": {"type": "text", "label": "Your Name", "default": "Jordan Rivers", "required": True},
    "tagline": {"type": "text", "label": "Tagline", "default": "Product Designer & Creative"},
    "bio": {
        "type": "textarea",
        "label": "Bio",
        "rows": 4,
        "default": "I create meaningful digital experiences that connect people and solve real problems. "
                   "With a passion for clean design and user-centered thinking.",
    },
    "photo": {"type": "image", "label": "Profile Photo", "default": "", "optional": True, "accept": "image/*"},
    "skills": {
        "type": "repeatable",
        "label": "Skills",
        "item_label": "Skill",
        "max": 8,
        "default": ["UI Design", "Prototyping", "User Research", "Design Systems"],
    },
    "projects": {
        "type": "group",
        "label": "Featured Projects",
        "item_label": "Project",
        "min": 0,
        "max": 3,
        "fields": {
            "title": {"type": "text", "label": "Project Title", "default": ""},
            "description": {"type": "textarea", "label": "Description", "default": ""},
            "tags": {"type": "text", "label": "Tags (comma-separated)", "default": ""},
        },
        "default": [
            {"title": "Mobile Banking App", "description": "Redesigned the core banking experience for 2M+ users", "tags": "UI/UX, Mobile"},
            {"title": "E-commerce Platform", "description": "Built a design system that increased conversion by 40%", "tags": "Design System, Web"},
        ],
    },
    "contact_email": {"type": "email", "label": "Contact Email", "default": "hello@jordan.com"},
    "social_links": {
        "type": "group",
        "label": "Social Links",
        "item_label": "Link",
        "min": 0,
        "max": 4,
        "fields": {
            "platform": {"type": "text", "label": "Platform", "default": ""},
            "url": {"type": "url", "label": "URL", "default": ""},
        },
        "default": [
            {"platform": "Twitter", "url": "https://twitter.com"},
            {"platform": "LinkedIn", "url": "https://linkedin.com"},
            {"platform": "Dribbble", "url": "https://dribbble.com"},
        ],
    },
    "theme": {"type": "theme-selector", "label": "Design Style"},
}

CSS = f"""
.pp {{ max-width: 820px; margin: 0 auto; padding: {T.SPACE_XL.var} {T.SPACE_MD.var}; }}
.pp-hero {{ text-align: center; margin-bottom: {T.SPACE_XL.var}; animation: {T.ANIM_SLIDE_UP.var}; }}
.pp-photo {{ width: 128px; height: 128px; border-radius: {T.RADIUS_FULL.var}; object-fit: cover; margin: 0 auto {T.SPACE_SM.var}; display: block; border: 3px solid {T.COLOR_ACCENT.var}; }}
.pp-hero h1 {{ font-size: {T.TEXT_H1.var}; letter-spacing: -0.02em; }}
.pp-tagline {{ color: {T.COLOR_ACCENT.var}; font-size: {T.TEXT_BODY.var}; margin: {T.SPACE_XS.var} 0 {T.SPACE_SM.var}; }}
.pp-bio {{ color: {T.COLOR_TEXT_SECONDARY.var}; max-width: 600px; margin: 0 auto; }}
.pp-section {{ margin-bottom: {T.SPACE_LG.var}; }}
.pp-section h2 {{ font-size: {T.TEXT_H3.var}; margin-bottom: {T.SPACE_SM.var}; }}
.pp-skills {{ display: flex; flex-wrap: wrap; gap: {T.SPACE_XS.var}; list-style: none; }}
.pp-skills li {{ padding: 0.35rem 0.9rem; border-radius: {T.RADIUS_FULL.var}; background: rgba({T.COLOR_ACCENT_RGB.var}, 0.12); color: {T.COLOR_TEXT.var}; font-size: {T.TEXT_SMALL.var}; }}
.pp-projects {{ display: grid; gap: {T.SPACE_SM.var}; }}
.pp-project h3 {{ font-size: {T.TEXT_BODY.var}; margin-bottom: 0.25rem; }}
.pp-project p {{ color: {T.COLOR_TEXT_SECONDARY.var}; }}
.pp-tags {{ margin-top: {T.SPACE_XS.var}; font-family: {T.FONT_MONO.var}; font-size: {T.TEXT_TINY.var}; color: {T.COLOR_TEXT_TERTIARY.var}; }}
.pp-contact {{ text-align: center; }}
.pp-links {{ display: flex; justify-content: center; gap: {T.SPACE_SM.var}; margin-top: {T.SPACE_SM.var}; list-style: none; }}
.pp-links a {{ color: {T.COLOR_TEXT_SECONDARY.var}; text-decoration: none; }}
.pp-links a:hover {{ color: {T.COLOR_ACCENT.var}; }}
"""


def structure(values: FieldValues, theme, color_mode: str) -> str:
    name = values.text("name")
    photo = ""
    if values.has("photo"):
        photo = f'<img class="pp-photo" src="{values.url("photo")}" alt="{name}">'

    skills = values.strings("skills")
    skills_html = ""
    if skills:
        skills_html = f"""
  <section class="pp-section">
    <h2>Skills</h2>
    <ul class="pp-skills">{"".join(f"<li>{s}</li>" for s in skills)}</ul>
  </section>"""

    projects_html = ""
    projects = values.items("projects")
    if projects:
        cards = "".join(
            f'<article class="card pp-project"><h3>{p["title"]}</h3><p>{p["description"]}</p>'
            + (f'<div class="pp-tags">{p["tags"]}</div>' if p["tags"] else "")
            + "</article>"
            for p in projects
        )
        projects_html = f"""
  <section class="pp-section">
    <h2>Featured Projects</h2>
    <div class="pp-projects">{cards}</div>
  </section>"""

    links = "".join(
        f'<li><a href="{link["url"] or "#"}" rel="noopener">{link["platform"]}</a></li>'
        for link in values.items("social_links")
        if link["platform"]
    )
    email = values.text("contact_email")

    return f"""<main class="pp">
  <header class="pp-hero">
    {photo}
    <h1>{name}</h1>
    <p class="pp-tagline">{values.text("tagline")}</p>
    <p class="pp-bio">{values.text("bio")}</p>
  </header>{skills_html}{projects_html}
  <section class="pp-section pp-contact">
    <h2>Get in touch</h2>
    <a class="btn" href="mailto:{email}">{email}</a>
    <ul class="pp-links">{links}</ul>
  </section>
</main>"""


TEMPLATE = TemplateDefinition(
    id="personal-profile",
    name="Personal Profile",
    description="Personal page with bio, skills, projects and social links",
    category="personal",
    default_theme="elegant",
    fields=FIELDS,
    structure=structure,
    css=CSS,
    title_field="name",
)
