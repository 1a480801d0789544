"""
Tests renderer — document autonome, résolution du thème, couches CSS,
polices, pages multiples, déterminisme.
"""
import pytest

from site_builder.core.errors import UnknownTemplateError
from site_builder.renderer import (
    font_families,
    font_links,
    is_multi_page,
    join_pages,
    page_display_name,
    render,
    render_pages,
    split_pages,
)
from site_builder.renderer.css import BASE_CSS, RESET_CSS, theme_override_css
from site_builder.templates import get_template
from site_builder.themes import get_theme
from site_builder.themes.registry import build_theme
from site_builder.themes.presets import THEME_PRESETS


# ── Document ─────────────────────────────────────────────────────────────────

class TestRender:
    def test_standalone_document(self):
        html = render("business-card", {}, "minimal", "light")
        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="en">' in html
        assert "<title>Alex Morgan</title>" in html
        assert '<meta name="color-scheme" content="light">' in html
        assert "<style>" in html and "</body>" in html

    def test_unknown_template_raises(self):
        with pytest.raises(UnknownTemplateError):
            render("does-not-exist", {})

    def test_unknown_theme_falls_back(self):
        assert render("business-card", {}, "nope", "light") == render("business-card", {}, "minimal", "light")

    @pytest.mark.parametrize("template_id", ["business-card", "saas-landing", "small-business"])
    def test_deterministic(self, template_id):
        data = {"theme": "retro"}
        assert render(template_id, data, None, "auto") == render(template_id, data, None, "auto")

    def test_theme_from_data_selector(self):
        html = render("business-card", {"theme": "retro"}, color_mode="light")
        assert "--gradient-vaporwave:" in html

    def test_explicit_theme_wins_over_data(self):
        html = render("business-card", {"theme": "retro"}, "elegant", "light")
        assert "--gradient-vaporwave:" not in html
        assert "Playfair" in html

    def test_template_default_theme(self):
        html = render("saas-landing", {}, color_mode="light")
        assert "--gradient-primary:" in html

    def test_default_color_mode_from_settings(self, monkeypatch):
        monkeypatch.setenv("SITE_BUILDER_DEFAULT_COLOR_MODE", "dark")
        html = render("business-card", {}, "minimal")
        assert '<meta name="color-scheme" content="dark">' in html
        assert "prefers-color-scheme" not in html

    def test_auto_mode(self):
        html = render("business-card", {}, "minimal", "auto")
        assert '<meta name="color-scheme" content="light dark">' in html
        assert "@media (prefers-color-scheme: dark)" in html

    def test_lang_attribute_escaped(self):
        html = render("business-card", {}, lang='fr"><x')
        assert '<html lang="fr&#34;&gt;&lt;x">' in html

    def test_undeclared_title_key_ignored(self):
        html = render("small-business", {"title": "<b>Intrus</b>", "business_name": ""}, "minimal", "light")
        assert "Intrus" not in html
        assert "<title>Brightside Cleaning</title>" in html

    def test_blank_title_field_uses_its_default(self):
        html = render("business-card", {"name": "  "})
        assert "<title>Alex Morgan</title>" in html


# ── Couches CSS ──────────────────────────────────────────────────────────────

class TestCss:
    def test_layer_order(self):
        html = render("business-card", {}, "brutalist", "light")
        positions = [
            html.index(RESET_CSS),
            html.index(":root {"),
            html.index(BASE_CSS.strip().splitlines()[0]),
            html.index(".bc {"),
            html.index("text-transform: uppercase"),
        ]
        assert positions == sorted(positions)

    def test_override_skipped_without_required_tokens(self):
        data = dict(THEME_PRESETS["retro"])
        data["gradients"] = {}
        theme = build_theme(data)
        assert theme_override_css(theme) == ""

    def test_override_drops_undeclared_animations(self):
        data = dict(THEME_PRESETS["brutalist"])
        data["animations"] = {k: v for k, v in data["animations"].items() if k != "glitch"}
        css = theme_override_css(build_theme(data))
        assert "text-transform: uppercase" in css
        assert "--anim-glitch" not in css

    def test_no_override_for_minimal(self):
        assert theme_override_css(get_theme("minimal")) == ""


# ── Polices ──────────────────────────────────────────────────────────────────

class TestFonts:
    def test_system_fonts_skipped(self):
        assert font_families(get_theme("minimal")) == ["Inter"]

    def test_links_deduplicated_with_preconnect(self):
        links = font_links(get_theme("minimal"))
        assert links.count("family=Inter:") == 1
        assert 'rel="preconnect" href="https://fonts.googleapis.com"' in links

    def test_family_names_url_encoded(self):
        assert "family=Playfair+Display:" in font_links(get_theme("elegant"))


# ── Pages multiples ──────────────────────────────────────────────────────────

class TestPages:
    def test_multi_page_template(self):
        pages = render_pages("small-business", {}, "minimal", "light")
        assert list(pages) == ["index.html", "about.html", "contact.html"]
        assert "<title>About · Brightside Cleaning</title>" in pages["about.html"]
        assert 'href="./contact.html"' in pages["index.html"]
        assert 'aria-current="page">About' in pages["about.html"]

    def test_render_joins_pages_with_markers(self):
        stream = render("small-business", {}, "minimal", "light")
        assert is_multi_page(stream)
        assert list(split_pages(stream)) == ["index.html", "about.html", "contact.html"]

    def test_single_page_has_no_markers(self):
        stream = render("business-card", {})
        assert not is_multi_page(stream)
        assert split_pages(stream) == {}

    def test_split_tolerates_marker_variants(self):
        stream = "<!-- ===== FILE: index.html ===== -->\n<p>a</p>\n<!--file: about.html-->\n<p>b</p>"
        assert split_pages(stream) == {"index.html": "<p>a</p>", "about.html": "<p>b</p>"}

    def test_split_skips_path_separators(self):
        stream = join_pages({"index.html": "<p>a</p>", "../evil.html": "<p>x</p>"})
        assert split_pages(stream) == {"index.html": "<p>a</p>"}

    def test_join_split(self):
        pages = {"index.html": "<p>a</p>", "about.html": "<p>b</p>"}
        assert split_pages(join_pages(pages)) == pages

    @pytest.mark.parametrize("filename,expected", [
        ("about.html", "About"),
        ("product-detail.html", "Product Detail"),
        ("getting-started.html", "getting started"),
    ])
    def test_page_display_name(self, filename, expected):
        assert page_display_name(filename) == expected


def test_render_pages_single_page():
    assert list(render_pages("landing-page", {})) == ["index.html"]
    assert get_template("landing-page").page_names == ["index.html"]
