"""
Tests thèmes — registry (fallback, ordre, enregistrement) + compilateur CSS.
"""
import copy
import re

import pytest

from site_builder.core.errors import ThemeConfigError
from site_builder.core.colors import darken, hex_to_rgb, is_hex_color, rgb_components, with_alpha
from site_builder.core.tokens import COLOR_TOKENS, Token
from site_builder.themes import (
    DEFAULT_THEME_ID,
    compile_keyframes,
    compile_theme_css,
    compile_variables,
    get_theme,
    list_themes,
    normalize_color_mode,
    register_theme,
    theme_ids,
    unregister_theme,
)
from site_builder.themes.presets import THEME_PRESETS

BUILTIN = ["minimal", "brutalist", "gradient", "elegant", "retro", "glassmorphism", "neumorphism"]


def _declarations(block: str) -> dict[str, str]:
    return dict(re.findall(r"(--[a-z0-9-]+):\s*([^;]+);", block))


def _custom_theme(theme_id: str = "ocean") -> dict:
    data = copy.deepcopy(THEME_PRESETS["minimal"])
    data["id"] = theme_id
    data["name"] = "Ocean"
    return data


@pytest.fixture
def ocean():
    yield _custom_theme()
    unregister_theme("ocean")


# ── Registry ─────────────────────────────────────────────────────────────────

class TestRegistry:
    def test_builtin_themes_in_insertion_order(self):
        assert theme_ids()[:len(BUILTIN)] == BUILTIN

    def test_get_theme_by_id(self):
        assert get_theme("retro").name == "Retro Wave"

    @pytest.mark.parametrize("theme_id", ["does-not-exist", "", None])
    def test_unknown_or_empty_id_falls_back_to_default(self, theme_id):
        theme = get_theme(theme_id)
        assert theme is not None
        assert theme.id == DEFAULT_THEME_ID

    def test_fallback_follows_configuration(self, monkeypatch):
        monkeypatch.setenv("SITE_BUILDER_DEFAULT_THEME", "elegant")
        assert get_theme("nope").id == "elegant"

    def test_fallback_ignores_unregistered_configured_theme(self, monkeypatch):
        monkeypatch.setenv("SITE_BUILDER_DEFAULT_THEME", "nope-either")
        assert get_theme("nope").id == DEFAULT_THEME_ID

    def test_list_themes_exposes_display_fields_only(self):
        summaries = list_themes()
        assert [s.id for s in summaries][:len(BUILTIN)] == BUILTIN
        assert set(summaries[0].model_dump()) == {"id", "name", "description"}

    def test_register_custom_theme(self, ocean):
        theme = register_theme("ocean", ocean)
        assert get_theme("ocean") is theme
        assert "ocean" in theme_ids()

    def test_register_duplicate_raises(self, ocean):
        register_theme("ocean", ocean)
        with pytest.raises(ThemeConfigError, match="déjà enregistré"):
            register_theme("ocean", ocean)
        register_theme("ocean", ocean, replace=True)

    def test_register_missing_color_key_fails_fast(self, ocean):
        del ocean["colors"]["dark"]["border_hover"]
        with pytest.raises(ThemeConfigError) as exc:
            register_theme("ocean", ocean)
        assert "ocean" in str(exc.value)
        assert "border_hover" in str(exc.value)

    def test_register_missing_bucket_fails_fast(self, ocean):
        del ocean["spacing"]
        with pytest.raises(ThemeConfigError, match="spacing"):
            register_theme("ocean", ocean)

    def test_register_empty_token_value_fails(self, ocean):
        ocean["fonts"]["body"] = "   "
        with pytest.raises(ThemeConfigError):
            register_theme("ocean", ocean)

    def test_register_unknown_animation_fails(self, ocean):
        ocean["animations"]["wobble"] = "wobble 1s"
        with pytest.raises(ThemeConfigError, match="wobble"):
            register_theme("ocean", ocean)

    def test_accent_must_be_hex(self, ocean):
        ocean["colors"]["light"]["accent"] = "blue"
        with pytest.raises(ThemeConfigError, match="accent"):
            register_theme("ocean", ocean)

    def test_default_theme_cannot_be_removed(self):
        with pytest.raises(ThemeConfigError):
            unregister_theme(DEFAULT_THEME_ID)


# ── Color mode ───────────────────────────────────────────────────────────────

@pytest.mark.parametrize("value,expected", [
    ("dark", "dark"), ("DARK", "dark"), (" Auto ", "auto"), ("light", "light"),
    ("sepia", "light"), ("", "light"), (None, "light"), (42, "light"),
])
def test_normalize_color_mode(value, expected):
    assert normalize_color_mode(value) == expected


# ── Compilateur ──────────────────────────────────────────────────────────────

class TestCompiler:
    @pytest.mark.parametrize("theme_id", BUILTIN)
    @pytest.mark.parametrize("mode", ["light", "dark", "auto"])
    def test_every_token_defined(self, theme_id, mode):
        css = compile_theme_css(get_theme(theme_id), mode)
        declared = _declarations(css)
        for token in Token:
            assert token.prop in declared, f"{theme_id}/{mode} : {token.prop} manquant"
        assert "None" not in css
        assert "undefined" not in css

    @pytest.mark.parametrize("theme_id", BUILTIN)
    def test_deterministic(self, theme_id):
        theme = get_theme(theme_id)
        assert compile_theme_css(theme, "auto") == compile_theme_css(theme, "auto")

    def test_light_and_dark_palettes(self):
        theme = get_theme("minimal")
        light = _declarations(compile_variables(theme, "light"))
        dark = _declarations(compile_variables(theme, "dark"))
        assert light["--color-bg"] == "#ffffff"
        assert dark["--color-bg"] == "#000000"
        assert light["--font-heading"] == dark["--font-heading"]

    def test_auto_mode_wraps_dark_variables_in_media_query(self):
        theme = get_theme("gradient")
        css = compile_theme_css(theme, "auto")
        light_part, dark_part = css.split("@media (prefers-color-scheme: dark)", 1)
        assert _declarations(light_part) == _declarations(compile_variables(theme, "light"))
        dark_block = dark_part.split("@keyframes", 1)[0]
        assert _declarations(dark_block) == _declarations(compile_variables(theme, "dark"))

    def test_unknown_mode_compiles_light(self):
        theme = get_theme("elegant")
        assert compile_theme_css(theme, "sepia") == compile_theme_css(theme, "light")

    def test_accent_rgb_derived_from_accent(self):
        decls = _declarations(compile_variables(get_theme("gradient"), "light"))
        assert decls["--color-accent"] == "#667eea"
        assert decls["--color-accent-rgb"] == "102, 126, 234"

    def test_bg_solid_falls_back_to_background(self):
        minimal = _declarations(compile_variables(get_theme("minimal"), "light"))
        glass = _declarations(compile_variables(get_theme("glassmorphism"), "light"))
        assert minimal["--color-bg-solid"] == minimal["--color-bg"]
        assert glass["--color-bg-solid"] == "#f0f9ff"
        assert glass["--color-bg"].startswith("linear-gradient")

    def test_optional_shadows_only_when_declared(self):
        assert "--shadow-glow" in compile_theme_css(get_theme("retro"))
        assert "--shadow-inset" in compile_theme_css(get_theme("neumorphism"))
        minimal = compile_theme_css(get_theme("minimal"))
        assert "--shadow-glow" not in minimal
        assert "--shadow-inset" not in minimal

    def test_gradients_emitted(self):
        css = compile_theme_css(get_theme("retro"))
        for name in ("sunset", "vaporwave", "miami", "synthwave"):
            assert f"--gradient-{name}:" in css
        assert "--gradient-" not in compile_theme_css(get_theme("elegant"))

    def test_animation_variables(self):
        decls = _declarations(compile_variables(get_theme("retro")))
        assert decls["--anim-fade-in"].startswith("fadeIn")
        assert decls["--anim-neon"].startswith("neon")

    @pytest.mark.parametrize("theme_id,present,absent", [
        ("brutalist", ["glitch"], ["neon", "pulse", "float"]),
        ("retro", ["neon", "pulse"], ["glitch", "float"]),
        ("gradient", ["float"], ["glitch", "neon", "pulse"]),
        ("minimal", [], ["glitch", "neon", "pulse", "float"]),
    ])
    def test_keyframes_only_for_declared_animations(self, theme_id, present, absent):
        keyframes = compile_keyframes(get_theme(theme_id))
        for name in ["fadeIn", "slideUp", "scale", *present]:
            assert f"@keyframes {name} " in keyframes
        for name in absent:
            assert f"@keyframes {name} " not in keyframes

    def test_accepts_raw_mapping(self):
        css = compile_theme_css(THEME_PRESETS["elegant"], "dark")
        assert "--color-bg: #1a1a18;" in css

    def test_missing_bucket_raises_with_theme_and_key(self):
        data = _custom_theme("broken")
        del data["colors"]["light"]["surface"]
        with pytest.raises(ThemeConfigError) as exc:
            compile_theme_css(data, "light")
        assert "broken" in str(exc.value)
        assert "surface" in str(exc.value)

    def test_multiline_token_values_collapsed(self):
        data = _custom_theme("spaced")
        data["shadows"]["md"] = "0 4px 12px\n      rgba(0, 0, 0, 0.08)"
        decls = _declarations(compile_variables(data))
        assert decls["--shadow-md"] == "0 4px 12px rgba(0, 0, 0, 0.08)"

    @pytest.mark.parametrize("theme_id", BUILTIN)
    def test_light_and_dark_differ_only_in_colors(self, theme_id):
        theme = get_theme(theme_id)
        light = _declarations(compile_variables(theme, "light"))
        dark = _declarations(compile_variables(theme, "dark"))
        color_props = {t.prop for t in COLOR_TOKENS}
        changed = {prop for prop in light if light[prop] != dark.get(prop)}
        assert changed <= color_props
        assert set(light) == set(dark)


# ── Couleurs ─────────────────────────────────────────────────────────────────

class TestColors:
    @pytest.mark.parametrize("value,ok", [
        ("#fff", True), ("#A1b2C3", True), (" #123456 ", True),
        ("fff", False), ("#12345", False), ("red", False), (None, False), (123, False),
    ])
    def test_is_hex_color(self, value, ok):
        assert is_hex_color(value) is ok

    def test_conversions(self):
        assert hex_to_rgb("#fff") == (255, 255, 255)
        assert rgb_components("#667eea") == "102, 126, 234"
        assert with_alpha("#000000", 0.5) == "rgba(0, 0, 0, 0.5)"
        assert with_alpha("#000000", 3) == "rgba(0, 0, 0, 1)"
        assert darken("#ffffff", 50) == "#7f7f7f"

    def test_invalid_hex_raises(self):
        with pytest.raises(ValueError):
            hex_to_rgb("blue")
