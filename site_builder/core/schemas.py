"""
Schémas Pydantic du moteur : Theme (tokens de design) + ColorMode.

Un Theme est un bundle fermé : toutes les clés sont obligatoires, sauf les
tokens explicitement optionnels (shadows.glow, shadows.inset, gradients,
animations supplémentaires, bg_solid). Un thème incomplet ne se construit pas.
"""
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .colors import is_hex_color

ColorMode = Literal["light", "dark", "auto"]

REQUIRED_ANIMATIONS: tuple[str, ...] = ("fadeIn", "slideUp", "scale")


class _Tokens(BaseModel):
    """Base des buckets : clés inconnues refusées, valeurs non vides."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _strip_non_empty(cls, v):
        if isinstance(v, str):
            v = " ".join(v.split())
            if not v:
                raise ValueError("valeur de token vide")
        return v


class ThemeFonts(_Tokens):
    heading: str
    body: str
    mono: str


class ThemeFontSizes(_Tokens):
    hero: str
    h1: str
    h2: str
    h3: str
    body: str
    small: str
    tiny: str


class ThemeSpacing(_Tokens):
    xs: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str


class ThemeRadius(_Tokens):
    none: str
    sm: str
    md: str
    lg: str
    xl: str
    full: str


class ThemeShadows(_Tokens):
    none: str
    sm: str
    md: str
    lg: str
    xl: str
    glow: Optional[str] = None
    inset: Optional[str] = None


class TextColors(_Tokens):
    primary: str
    secondary: str
    tertiary: str


class ColorPalette(_Tokens):
    background: str
    surface: str
    surface_alt: str
    text: TextColors
    border: str
    border_hover: str
    accent: str
    bg_solid: Optional[str] = None

    @field_validator("accent")
    @classmethod
    def _accent_is_hex(cls, v: str) -> str:
        # Les templates dérivent des variantes alpha depuis l'accent
        if not is_hex_color(v):
            raise ValueError(f"accent doit être une couleur hexadécimale, reçu {v!r}")
        return v


class ThemeColors(_Tokens):
    light: ColorPalette
    dark: ColorPalette


class Theme(BaseModel):
    """Thème visuel complet (typographie, espacements, ombres, couleurs light/dark)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., pattern=r"^[a-z0-9][a-z0-9-]*$")
    name: str
    description: str = ""
    fonts: ThemeFonts
    font_sizes: ThemeFontSizes
    spacing: ThemeSpacing
    radius: ThemeRadius
    shadows: ThemeShadows
    colors: ThemeColors
    animations: Dict[str, str] = Field(
        ...,
        description="nom de keyframes → shorthand CSS (ex: fadeIn → 'fadeIn 0.6s ease')",
    )
    gradients: Dict[str, str] = Field(default_factory=dict)

    @field_validator("animations")
    @classmethod
    def _required_animations(cls, v: Dict[str, str]) -> Dict[str, str]:
        missing = [name for name in REQUIRED_ANIMATIONS if not v.get(name)]
        if missing:
            raise ValueError(f"animations obligatoires manquantes : {', '.join(missing)}")
        return v

    @field_validator("gradients")
    @classmethod
    def _gradient_names(cls, v: Dict[str, str]) -> Dict[str, str]:
        for key, value in v.items():
            if not key.replace("-", "").isalnum() or not str(value).strip():
                raise ValueError(f"gradient invalide : {key!r}")
        return v

    def palette(self, mode: Literal["light", "dark"]) -> ColorPalette:
        return self.colors.dark if mode == "dark" else self.colors.light


class ThemeSummary(BaseModel):
    """Métadonnées d'affichage — jamais les valeurs de tokens."""
    id: str
    name: str
    description: str
