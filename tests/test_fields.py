"""
Tests modèle de champs — validation du schéma, défauts, sections,
édition par chemin, lecture avec fallback + échappement.
"""
import copy

import pytest

from site_builder.core.errors import EditPathError, SchemaConfigError
from site_builder.fields import (
    FieldSchema,
    FieldValues,
    ItemFieldPath,
    ItemPath,
    ScalarPath,
    append_group_item,
    apply_edit,
    compute_defaults,
    group_by_section,
    parse_path,
    remove_group_item,
    resolve_section_for,
    safe_url,
    validate_schema,
)

SCHEMA = validate_schema({
    "theme": {"type": "theme-selector", "label": "Thème"},
    "name": {"type": "text", "default": "Jane Doe"},
    "bio": {"type": "textarea", "default": ""},
    "website": {"type": "url", "default": "https://example.com"},
    "brand": {"type": "color", "default": "#eb1736"},
    "skills": {"type": "repeatable", "default": ["Python", "CSS"]},
    "tags": {"type": "repeatable"},
    "projects": {
        "type": "group",
        "min": 0,
        "max": 3,
        "default": [],
        "fields": {
            "title": {"type": "text", "default": "Projet"},
            "link": {"type": "url", "default": "#"},
        },
    },
    "links": {
        "type": "group",
        "min": 2,
        "fields": {"label": {"type": "text", "default": "Lien"}},
    },
})


# ── Validation du schéma ─────────────────────────────────────────────────────

class TestValidateSchema:
    def test_returns_typed_fields_in_order(self):
        assert list(SCHEMA) == [
            "theme", "name", "bio", "website", "brand", "skills", "tags", "projects", "links",
        ]
        assert isinstance(SCHEMA["projects"].fields["title"], FieldSchema)

    @pytest.mark.parametrize("key", ["a.b", "items[0]", "", "   "])
    def test_rejects_bad_keys(self, key):
        with pytest.raises(SchemaConfigError):
            validate_schema({key: {"type": "text"}})

    def test_rejects_nested_group(self):
        with pytest.raises(SchemaConfigError, match="imbriqué"):
            validate_schema({
                "outer": {
                    "type": "group",
                    "fields": {"inner": {"type": "group", "fields": {"x": {"type": "text"}}}},
                },
            })

    def test_group_requires_fields(self):
        with pytest.raises(SchemaConfigError):
            validate_schema({"g": {"type": "group"}})

    def test_fields_reserved_for_groups(self):
        with pytest.raises(SchemaConfigError):
            validate_schema({"t": {"type": "text", "fields": {"x": {"type": "text"}}}})

    def test_select_requires_options(self):
        with pytest.raises(SchemaConfigError, match="options"):
            validate_schema({"s": {"type": "select"}})

    def test_min_greater_than_max(self):
        with pytest.raises(SchemaConfigError):
            validate_schema({"r": {"type": "repeatable", "min": 4, "max": 2}})

    def test_unknown_type(self):
        with pytest.raises(SchemaConfigError):
            validate_schema({"x": {"type": "slider"}})


# ── Défauts ──────────────────────────────────────────────────────────────────

class TestComputeDefaults:
    def test_theme_selector_never_seeded_with_none(self):
        assert compute_defaults(SCHEMA)["theme"] == "minimal"
        field = FieldSchema(type="theme-selector", default="retro")
        assert compute_defaults({"theme": field})["theme"] == "retro"

    def test_scalars_and_theme_selector(self):
        defaults = compute_defaults(SCHEMA, "elegant")
        assert defaults["theme"] == "elegant"
        assert defaults["name"] == "Jane Doe"
        assert defaults["bio"] == ""

    def test_list_padding(self):
        defaults = compute_defaults(SCHEMA)
        assert defaults["skills"] == ["Python", "CSS"]
        assert defaults["tags"] == [""]
        assert defaults["projects"] == []
        assert defaults["links"] == [{"label": "Lien"}, {"label": "Lien"}]

    def test_defaults_never_share_schema_lists(self):
        defaults = compute_defaults(SCHEMA)
        defaults["skills"].append("Go")
        assert SCHEMA["skills"].default == ["Python", "CSS"]
        assert compute_defaults(SCHEMA)["skills"] == ["Python", "CSS"]


# ── Sections ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("key,field,section", [
    ("theme", {"type": "theme-selector"}, "design"),
    ("brand", {"type": "color"}, "design"),
    ("avatar", {"type": "image"}, "media"),
    ("mail", {"type": "email"}, "contact"),
    ("phone", {"type": "tel"}, "contact"),
    ("skills", {"type": "repeatable"}, "collections"),
    ("github_url", {"type": "url"}, "contact"),
    ("address", {"type": "text"}, "contact"),
    ("headline", {"type": "text"}, "content"),
])
def test_resolve_section_for(key, field, section):
    assert resolve_section_for(key, FieldSchema.model_validate(field)) == section


def test_group_by_section_skips_empty_sections():
    grouped = group_by_section(SCHEMA)
    assert grouped["design"] == ["theme", "brand"]
    assert grouped["collections"] == ["skills", "tags", "projects", "links"]
    assert "media" not in grouped


# ── Chemins d'édition ────────────────────────────────────────────────────────

class TestPaths:
    @pytest.mark.parametrize("path,expected", [
        ("headline", ScalarPath(key="headline")),
        ("skills[2]", ItemPath(key="skills", index=2)),
        ("social_links[0].url", ItemFieldPath(key="social_links", index=0, field="url")),
    ])
    def test_parse(self, path, expected):
        assert parse_path(path) == expected

    @pytest.mark.parametrize("path", ["", "a.b", "items[x]", "items[0].", "items[-1]", "a[0][1]", "a b"])
    def test_malformed_paths_raise(self, path):
        with pytest.raises(EditPathError):
            parse_path(path)

    def test_set_scalar_does_not_mutate_input(self):
        data = {"headline": "Old"}
        out = apply_edit(data, "headline", "New")
        assert out == {"headline": "New"}
        assert data == {"headline": "Old"}

    def test_set_group_field_deep_copies_touched_path(self):
        data = {"social_links": [{"url": "https://a.test", "label": "A"}]}
        snapshot = copy.deepcopy(data)
        out = apply_edit(data, "social_links[0].url", "https://b.test")
        assert out["social_links"][0] == {"url": "https://b.test", "label": "A"}
        assert data == snapshot

    def test_out_of_range_index_extends_list(self):
        out = apply_edit({"skills": ["a"]}, "skills[2]", "c")
        assert out["skills"] == ["a", "", "c"]
        out = apply_edit({}, "projects[1].title", "X")
        assert out["projects"] == [{}, {"title": "X"}]

    def test_accepts_parsed_path(self):
        out = apply_edit(None, ItemPath(key="skills", index=0), "Go")
        assert out == {"skills": ["Go"]}

    def test_append_builds_item_from_defaults_and_respects_max(self):
        field = SCHEMA["projects"]
        data = {"projects": []}
        for _ in range(5):
            data = append_group_item(data, "projects", field=field)
        assert len(data["projects"]) == 3
        assert data["projects"][0] == {"title": "Projet", "link": "#"}

    def test_remove_respects_min_and_bounds(self):
        field = SCHEMA["links"]
        data = {"links": [{"label": "a"}, {"label": "b"}, {"label": "c"}]}
        data = remove_group_item(data, "links", 0, field=field)
        assert data["links"] == [{"label": "b"}, {"label": "c"}]
        assert remove_group_item(data, "links", 0, field=field) == data
        assert remove_group_item(data, "links", 9) == data


# ── Lecture avec fallback ────────────────────────────────────────────────────

class TestFieldValues:
    def test_missing_and_blank_values_fall_back(self):
        values = FieldValues(SCHEMA, {"name": "   "})
        assert values.text("name") == "Jane Doe"
        assert FieldValues(SCHEMA, None).text("name") == "Jane Doe"

    def test_wrong_type_falls_back(self):
        values = FieldValues(SCHEMA, {"name": {"first": "x"}, "skills": "Go"})
        assert values.text("name") == "Jane Doe"
        assert values.strings("skills") == ["Python", "CSS"]

    def test_numbers_rendered_as_text(self):
        assert FieldValues(SCHEMA, {"name": 42}).text("name") == "42"

    def test_text_is_escaped(self):
        values = FieldValues(SCHEMA, {"name": "<script>alert(1)</script>"})
        assert values.text("name") == "&lt;script&gt;alert(1)&lt;/script&gt;"

    def test_undeclared_key_raises(self):
        with pytest.raises(SchemaConfigError, match="nope"):
            FieldValues(SCHEMA, {}).text("nope")

    def test_empty_list_kept_only_when_min_zero(self):
        assert FieldValues(SCHEMA, {"projects": []}).items("projects") == []
        assert FieldValues(SCHEMA, {"skills": []}).strings("skills") == ["Python", "CSS"]

    def test_strings_skip_blank_items(self):
        values = FieldValues(SCHEMA, {"skills": ["Go", "", "  ", None, "<b>"]})
        assert values.strings("skills") == ["Go", "&lt;b&gt;"]

    def test_list_of_wrong_item_type_falls_back(self):
        values = FieldValues(SCHEMA, {"links": ["oops", 3], "skills": [{"x": 1}, ["y"]]})
        assert values.items("links") == [{"label": "Lien"}, {"label": "Lien"}]
        assert values.strings("skills") == ["Python", "CSS"]

    def test_items_fill_missing_sub_fields(self):
        values = FieldValues(SCHEMA, {"projects": [{"title": "A & B"}, "junk"]})
        assert values.items("projects") == [{"title": "A &amp; B", "link": "#"}]

    def test_items_reject_dangerous_urls(self):
        values = FieldValues(SCHEMA, {"projects": [{"link": "javascript:alert(1)"}]})
        assert values.items("projects")[0]["link"] == "#"

    def test_url_rejects_dangerous_scheme(self):
        assert FieldValues(SCHEMA, {"website": "javascript:alert(1)"}).url("website") == "https://example.com"
        assert FieldValues(SCHEMA, {"website": "https://a.test/?q=1&x=2"}).url("website") == (
            "https://a.test/?q=1&amp;x=2"
        )

    def test_color_validated(self):
        assert FieldValues(SCHEMA, {"brand": "#123abc"}).color("brand") == "#123abc"
        assert FieldValues(SCHEMA, {"brand": "red;}"}).color("brand") == "#eb1736"

    def test_theme_selector_uses_template_default(self):
        assert FieldValues(SCHEMA, {}, "retro").raw("theme") == "retro"

    def test_has(self):
        values = FieldValues(SCHEMA, {"bio": ""})
        assert not values.has("bio")
        assert values.has("name")


@pytest.mark.parametrize("url,expected", [
    ("https://example.com", "https://example.com"),
    ("mailto:a@b.c", "mailto:a@b.c"),
    ("tel:+33123", "tel:+33123"),
    ("#contact", "#contact"),
    ("./about.html", "./about.html"),
    ("images/photo.jpg", "images/photo.jpg"),
    ("data:image/png;base64,AAAA", "data:image/png;base64,AAAA"),
    ("javascript:alert(1)", None),
    ("JaVaScRiPt:alert(1)", None),
    ("java\nscript:alert(1)", None),
    ("data:text/html,<b>", None),
    ("file:///etc/passwd", None),
    ("ftp://host/file", None),
])
def test_safe_url(url, expected):
    assert safe_url(url) == expected
