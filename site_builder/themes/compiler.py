"""
Compilateur de thème : (Theme, color mode) → bloc de CSS custom properties + keyframes.

Fonction pure et déterministe : mêmes entrées → mêmes octets (pas de timestamp,
pas d'id aléatoire). C'est le seul endroit où un token CSS est nommé
(cf. core/tokens.py) ; une valeur manquante lève ThemeConfigError au lieu
d'émettre "None" dans la feuille de style.

Sortie en mode "auto" :

    :root { ...light... }
    @media (prefers-color-scheme: dark) {
      :root { ...dark... }
    }
    @keyframes ...
"""
import logging
from typing import Any, Literal, Mapping

from ..core.colors import rgb_components
from ..core.errors import ThemeConfigError
from ..core.schemas import ColorMode, Theme
from ..core.tokens import ANIMATION_PREFIX, GRADIENT_PREFIX, OPTIONAL_SHADOWS, Token
from .keyframes import KEYFRAMES, animation_slug
from .registry import build_theme

log = logging.getLogger(__name__)

COLOR_MODES: tuple[str, ...] = ("light", "dark", "auto")
DARK_MEDIA_QUERY = "@media (prefers-color-scheme: dark)"


def normalize_color_mode(value: Any) -> ColorMode:
    """Insensible à la casse ; valeur inconnue ou vide → "light"."""
    if isinstance(value, str):
        mode = value.strip().lower()
        if mode in COLOR_MODES:
            return mode  # type: ignore[return-value]
    return "light"


def _resolve(theme: Theme | Mapping[str, Any]) -> Theme:
    return build_theme(theme)


def _declarations(theme: Theme, mode: Literal["light", "dark"]) -> list[tuple[str, str]]:
    palette = theme.palette(mode)
    decls: list[tuple[str, str]] = [
        # Typographie
        (Token.FONT_HEADING.prop, theme.fonts.heading),
        (Token.FONT_BODY.prop, theme.fonts.body),
        (Token.FONT_MONO.prop, theme.fonts.mono),
        (Token.TEXT_HERO.prop, theme.font_sizes.hero),
        (Token.TEXT_H1.prop, theme.font_sizes.h1),
        (Token.TEXT_H2.prop, theme.font_sizes.h2),
        (Token.TEXT_H3.prop, theme.font_sizes.h3),
        (Token.TEXT_BODY.prop, theme.font_sizes.body),
        (Token.TEXT_SMALL.prop, theme.font_sizes.small),
        (Token.TEXT_TINY.prop, theme.font_sizes.tiny),
        # Espacements
        (Token.SPACE_XS.prop, theme.spacing.xs),
        (Token.SPACE_SM.prop, theme.spacing.sm),
        (Token.SPACE_MD.prop, theme.spacing.md),
        (Token.SPACE_LG.prop, theme.spacing.lg),
        (Token.SPACE_XL.prop, theme.spacing.xl),
        (Token.SPACE_XXL.prop, theme.spacing.xxl),
        # Radius
        (Token.RADIUS_NONE.prop, theme.radius.none),
        (Token.RADIUS_SM.prop, theme.radius.sm),
        (Token.RADIUS_MD.prop, theme.radius.md),
        (Token.RADIUS_LG.prop, theme.radius.lg),
        (Token.RADIUS_XL.prop, theme.radius.xl),
        (Token.RADIUS_FULL.prop, theme.radius.full),
        # Ombres
        (Token.SHADOW_NONE.prop, theme.shadows.none),
        (Token.SHADOW_SM.prop, theme.shadows.sm),
        (Token.SHADOW_MD.prop, theme.shadows.md),
        (Token.SHADOW_LG.prop, theme.shadows.lg),
        (Token.SHADOW_XL.prop, theme.shadows.xl),
    ]
    for name in OPTIONAL_SHADOWS:
        value = getattr(theme.shadows, name)
        if value:
            decls.append((f"--shadow-{name}", value))

    decls += [
        # Couleurs
        (Token.COLOR_BG.prop, palette.background),
        (Token.COLOR_BG_SOLID.prop, palette.bg_solid or palette.background),
        (Token.COLOR_SURFACE.prop, palette.surface),
        (Token.COLOR_SURFACE_ALT.prop, palette.surface_alt),
        (Token.COLOR_TEXT.prop, palette.text.primary),
        (Token.COLOR_TEXT_SECONDARY.prop, palette.text.secondary),
        (Token.COLOR_TEXT_TERTIARY.prop, palette.text.tertiary),
        (Token.COLOR_BORDER.prop, palette.border),
        (Token.COLOR_BORDER_HOVER.prop, palette.border_hover),
        (Token.COLOR_ACCENT.prop, palette.accent),
        (Token.COLOR_ACCENT_RGB.prop, rgb_components(palette.accent)),
    ]

    # Animations : fadeIn → --anim-fade-in
    for name, shorthand in theme.animations.items():
        decls.append((f"--{ANIMATION_PREFIX}{animation_slug(name)}", shorthand))

    for name, value in theme.gradients.items():
        decls.append((f"--{GRADIENT_PREFIX}{name}", value))

    for prop, value in decls:
        if value is None or not str(value).strip():
            raise ThemeConfigError(f"Thème {theme.id!r} : valeur manquante pour {prop}")
    return decls


def compile_variables(
    theme: Theme | Mapping[str, Any],
    mode: Any = "light",
    selector: str = ":root",
    indent: str = "",
) -> str:
    """Un bloc `selector { --token: valeur; ... }` pour la palette light ou dark."""
    theme = _resolve(theme)
    palette_mode = "dark" if normalize_color_mode(mode) == "dark" else "light"
    body = "\n".join(f"{indent}  {prop}: {value};" for prop, value in _declarations(theme, palette_mode))
    return f"{indent}{selector} {{\n{body}\n{indent}}}"


def compile_keyframes(theme: Theme | Mapping[str, Any]) -> str:
    """Keyframes des seules animations déclarées par le thème (ordre de déclaration)."""
    theme = _resolve(theme)
    return "\n\n".join(KEYFRAMES[name] for name in theme.animations)


def compile_theme_css(theme: Theme | Mapping[str, Any], mode: Any = "light") -> str:
    """CSS complet du thème pour un color mode (light, dark ou auto)."""
    theme = _resolve(theme)
    color_mode = normalize_color_mode(mode)

    if color_mode == "auto":
        parts = [
            compile_variables(theme, "light"),
            f"{DARK_MEDIA_QUERY} {{\n{compile_variables(theme, 'dark', indent='  ')}\n}}",
        ]
    else:
        parts = [compile_variables(theme, color_mode)]

    keyframes = compile_keyframes(theme)
    if keyframes:
        parts.append(keyframes)

    log.debug("CSS compilé : thème=%s mode=%s", theme.id, color_mode)
    return "\n\n".join(parts) + "\n"
