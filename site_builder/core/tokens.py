"""
Noms des CSS custom properties garanties par le compilateur de thème.

Le compilateur est le seul endroit où un token est nommé ; les templates ne
référencent une variable qu'à travers cette énumération :

    f"color:{Token.COLOR_TEXT.var}"   →  "color:var(--color-text)"

Ajouter un token = l'ajouter ici + le produire dans themes/compiler.py.
Chaque thème enregistré doit alors fournir la valeur (sinon ThemeConfigError).
"""
from enum import Enum


class Token(str, Enum):
    # Typographie
    FONT_HEADING = "font-heading"
    FONT_BODY = "font-body"
    FONT_MONO = "font-mono"

    TEXT_HERO = "text-hero"
    TEXT_H1 = "text-h1"
    TEXT_H2 = "text-h2"
    TEXT_H3 = "text-h3"
    TEXT_BODY = "text-body"
    TEXT_SMALL = "text-small"
    TEXT_TINY = "text-tiny"

    # Espacements
    SPACE_XS = "space-xs"
    SPACE_SM = "space-sm"
    SPACE_MD = "space-md"
    SPACE_LG = "space-lg"
    SPACE_XL = "space-xl"
    SPACE_XXL = "space-xxl"

    # Border radius
    RADIUS_NONE = "radius-none"
    RADIUS_SM = "radius-sm"
    RADIUS_MD = "radius-md"
    RADIUS_LG = "radius-lg"
    RADIUS_XL = "radius-xl"
    RADIUS_FULL = "radius-full"

    # Ombres
    SHADOW_NONE = "shadow-none"
    SHADOW_SM = "shadow-sm"
    SHADOW_MD = "shadow-md"
    SHADOW_LG = "shadow-lg"
    SHADOW_XL = "shadow-xl"

    # Couleurs (dépendent du color mode)
    COLOR_BG = "color-bg"
    COLOR_BG_SOLID = "color-bg-solid"
    COLOR_SURFACE = "color-surface"
    COLOR_SURFACE_ALT = "color-surface-alt"
    COLOR_TEXT = "color-text"
    COLOR_TEXT_SECONDARY = "color-text-secondary"
    COLOR_TEXT_TERTIARY = "color-text-tertiary"
    COLOR_BORDER = "color-border"
    COLOR_BORDER_HOVER = "color-border-hover"
    COLOR_ACCENT = "color-accent"
    COLOR_ACCENT_RGB = "color-accent-rgb"

    # Animations communes à tous les thèmes
    ANIM_FADE_IN = "anim-fade-in"
    ANIM_SLIDE_UP = "anim-slide-up"
    ANIM_SCALE = "anim-scale"

    @property
    def prop(self) -> str:
        """Nom de la custom property : "--color-text"."""
        return f"--{self.value}"

    @property
    def var(self) -> str:
        """Référence CSS : "var(--color-text)"."""
        return f"var(--{self.value})"


# Tokens dont la valeur change entre light et dark
COLOR_TOKENS: tuple[Token, ...] = tuple(t for t in Token if t.value.startswith("color-"))

# Tokens optionnels : émis seulement si le thème les déclare.
# Un template ne doit jamais s'en servir sans fallback ; seuls les overrides
# spécifiques à un thème (renderer/css.py) les référencent.
OPTIONAL_SHADOWS: tuple[str, ...] = ("glow", "inset")
GRADIENT_PREFIX = "gradient-"
ANIMATION_PREFIX = "anim-"


def gradient_var(name: str) -> str:
    return f"var(--{GRADIENT_PREFIX}{name})"
