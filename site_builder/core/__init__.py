"""
Noyau : modèles de thème, tokens CSS, erreurs, helpers couleurs.
"""
from .errors import (
    ConfigurationError,
    EditPathError,
    SchemaConfigError,
    TemplateRegistrationError,
    ThemeConfigError,
    UnknownTemplateError,
)
from .schemas import (
    ColorMode,
    ColorPalette,
    TextColors,
    Theme,
    ThemeColors,
    ThemeFonts,
    ThemeFontSizes,
    ThemeRadius,
    ThemeShadows,
    ThemeSpacing,
    ThemeSummary,
)
from .tokens import Token

__all__ = [
    "ConfigurationError", "EditPathError", "SchemaConfigError",
    "TemplateRegistrationError", "ThemeConfigError", "UnknownTemplateError",
    "ColorMode", "ColorPalette", "TextColors", "Theme", "ThemeColors",
    "ThemeFonts", "ThemeFontSizes", "ThemeRadius", "ThemeShadows",
    "ThemeSpacing", "ThemeSummary",
    "Token",
]
