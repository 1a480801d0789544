"""
Tests templates — registry, contrat de rendu sur tous les (template × thème × mode) :
tokens tous définis, défauts appliqués, texte utilisateur échappé.
"""
import re

import pytest

from site_builder.core.errors import SchemaConfigError, TemplateRegistrationError, UnknownTemplateError
from site_builder.fields import FieldValues
from site_builder.renderer import render, render_pages
from site_builder.templates import (
    BUILTIN_TEMPLATES,
    TemplateDefinition,
    get_template,
    list_templates,
    register_template,
    template_ids,
    unregister_template,
)
from site_builder.themes import theme_ids

BUILTIN_IDS = [t.id for t in BUILTIN_TEMPLATES]
BUILTIN_THEMES = ["minimal", "brutalist", "gradient", "elegant", "retro", "glassmorphism", "neumorphism"]
PAYLOAD = "<script>alert(1)</script>"

VAR_REF_RE = re.compile(r"var\((--[a-z0-9-]+)\)")
VAR_DEF_RE = re.compile(r"(--[a-z0-9-]+)\s*:")


def _undefined_vars(html: str) -> set[str]:
    return set(VAR_REF_RE.findall(html)) - set(VAR_DEF_RE.findall(html))


def _hostile_data(template: TemplateDefinition) -> dict:
    """Le payload dans chaque champ texte, item de liste et sous-champ."""
    data = {}
    for key, field in template.fields.items():
        if field.type in ("theme-selector", "color", "select"):
            continue
        if field.type == "repeatable":
            data[key] = [PAYLOAD, PAYLOAD]
        elif field.type == "group":
            data[key] = [{sub_key: PAYLOAD for sub_key in field.fields}]
        else:
            data[key] = PAYLOAD
    return data


def _structure(values, theme, color_mode):
    return f'<main class="hello">{values.text("greeting")}</main>'


@pytest.fixture
def hello_template():
    definition = TemplateDefinition(
        id="hello",
        name="Hello",
        fields={"greeting": {"type": "text", "default": "Bonjour"}},
        structure=_structure,
        css=".hello { color: var(--color-accent); }",
    )
    yield definition
    unregister_template("hello")


# ── Registry ─────────────────────────────────────────────────────────────────

class TestRegistry:
    def test_builtins_registered(self):
        assert template_ids()[:len(BUILTIN_IDS)] == BUILTIN_IDS
        assert {"business-card", "landing-page", "small-business"} <= set(template_ids())

    def test_unknown_template_raises_with_known_ids(self):
        with pytest.raises(UnknownTemplateError) as exc:
            get_template("nope")
        assert exc.value.template_id == "nope"
        assert "business-card" in exc.value.known

    def test_summaries(self):
        summaries = {s.id: s for s in list_templates()}
        assert summaries["small-business"].pages == ["index.html", "about.html", "contact.html"]
        assert summaries["business-card"].pages == ["index.html"]
        assert summaries["personal-profile"].default_theme == "elegant"

    def test_every_default_theme_is_registered(self):
        for template in BUILTIN_TEMPLATES:
            assert template.default_theme in theme_ids()

    def test_register_and_render_new_template(self, hello_template):
        register_template(hello_template)
        html = render("hello", {})
        assert '<main class="hello">Bonjour</main>' in html
        assert not _undefined_vars(html)

    def test_title_without_title_field_is_template_name(self, hello_template):
        register_template(hello_template)
        html = render("hello", {"title": "Intrus"})
        assert "<title>Hello</title>" in html
        assert "Intrus" not in html

    def test_register_from_mapping(self, hello_template):
        register_template(hello_template.model_dump())
        assert get_template("hello").name == "Hello"

    def test_duplicate_registration_rejected(self, hello_template):
        register_template(hello_template)
        with pytest.raises(TemplateRegistrationError, match="déjà"):
            register_template(hello_template)
        register_template(hello_template, replace=True)

    def test_nested_group_rejected_at_registration(self, hello_template):
        fields = {
            "outer": {
                "type": "group",
                "fields": {"inner": {"type": "group", "fields": {"x": {"type": "text"}}}},
            },
        }
        with pytest.raises(SchemaConfigError):
            register_template(hello_template.model_copy(update={"fields": fields}))
        assert "hello" not in template_ids()

    def test_unknown_default_theme_rejected(self, hello_template):
        with pytest.raises(TemplateRegistrationError, match="thème"):
            register_template(hello_template.model_copy(update={"default_theme": "nope"}))

    def test_title_field_must_exist(self, hello_template):
        with pytest.raises(TemplateRegistrationError, match="title_field"):
            register_template(hello_template.model_copy(update={"title_field": "missing"}))

    def test_invalid_page_name_rejected(self):
        with pytest.raises(ValueError):
            TemplateDefinition(
                id="bad-pages",
                name="Bad",
                fields={},
                structure=_structure,
                pages={"../evil.html": _structure},
            )


# ── Contrat de rendu : toutes les combinaisons ───────────────────────────────

@pytest.mark.parametrize("template_id", BUILTIN_IDS)
@pytest.mark.parametrize("theme_id", BUILTIN_THEMES)
@pytest.mark.parametrize("mode", ["light", "dark", "auto"])
def test_every_referenced_variable_is_defined(template_id, theme_id, mode):
    for name, html in render_pages(template_id, {}, theme_id, mode).items():
        assert not _undefined_vars(html), f"{template_id}/{theme_id}/{mode}/{name}"
        assert "undefined" not in html
        assert "None" not in html


@pytest.mark.parametrize("template_id", BUILTIN_IDS)
def test_empty_data_renders_declared_defaults(template_id):
    template = get_template(template_id)
    html = render(template_id, {})
    values = FieldValues(template.fields, {}, template.default_theme)
    for key, field in template.fields.items():
        if field.type in ("text", "textarea") and values.has(key):
            assert values.text(key) in html, f"{template_id}.{key}"


@pytest.mark.parametrize("template_id", BUILTIN_IDS)
def test_user_text_is_escaped(template_id):
    template = get_template(template_id)
    for name, html in render_pages(template_id, _hostile_data(template)).items():
        assert PAYLOAD not in html, f"{template_id}/{name}"
        assert "&lt;script&gt;" in html


@pytest.mark.parametrize("template_id", BUILTIN_IDS)
def test_garbage_data_never_raises(template_id):
    template = get_template(template_id)
    garbage = {key: {"unexpected": [1, 2]} for key in template.fields}
    html = render(template_id, garbage)
    assert html.startswith("<!DOCTYPE html>") or html.startswith("<!-- FILE: index.html -->")


def test_business_card_accent_and_initials():
    html = render("business-card", {"name": "ada lovelace", "accent_color": "#112233"})
    assert ">AL</div>" in html
    assert "#112233" in html


def test_business_card_contact_links():
    data = {"contact_info": [
        {"type": "Email", "value": "a@b.c"},
        {"type": "Phone", "value": "+1 555 0100"},
        {"type": "Website", "value": "example.org"},
    ]}
    html = render("business-card", data)
    assert 'href="mailto:a@b.c"' in html
    assert 'href="tel:+15550100"' in html
    assert 'href="https://example.org"' in html


def test_personal_profile_empty_optional_collections_are_hidden():
    html = render("personal-profile", {"projects": [], "social_links": []})
    assert "Featured Projects" not in html


def test_group_of_wrong_item_type_renders_default_records():
    html = render("business-card", {"contact_info": ["oops", 3]}, "minimal", "light")
    assert "alex@creativestudio.com" in html
