"""
site_builder — moteur de rendu templates × thèmes → HTML statique autonome.

Usage:
    >>> from site_builder import render, export_site
    >>> html = render("business-card", {"name": "Ada Lovelace"}, "elegant", "auto")
    >>> archive = export_site("small-business", {}, "gradient", "light")   # bytes zip

Pièces :
  themes     registry + compilateur CSS (tokens → custom properties)
  fields     schémas de champs, défauts, édition par chemin
  templates  registry + templates intégrés
  renderer   composition du document HTML
  export     archive zip (images/, README.md, manifest.json)
"""
__version__ = "0.3.0"

from .core.errors import (
    ConfigurationError,
    EditPathError,
    SchemaConfigError,
    TemplateRegistrationError,
    ThemeConfigError,
    UnknownTemplateError,
)
from .core.schemas import ColorMode, Theme, ThemeSummary
from .core.tokens import Token
from .themes import (
    DEFAULT_THEME_ID,
    compile_theme_css,
    get_theme,
    list_themes,
    normalize_color_mode,
    register_theme,
)
from .fields import FieldSchema, FieldValues, apply_edit, compute_defaults, resolve_section_for
from .templates import TemplateDefinition, get_template, list_templates, register_template
from .renderer import RenderStage, render, render_pages, split_pages
from .export import Asset, export_site, package_site, package_site_async

__all__ = [
    "__version__",
    "ConfigurationError", "EditPathError", "SchemaConfigError",
    "TemplateRegistrationError", "ThemeConfigError", "UnknownTemplateError",
    "ColorMode", "Theme", "ThemeSummary", "Token",
    "DEFAULT_THEME_ID", "compile_theme_css", "get_theme", "list_themes",
    "normalize_color_mode", "register_theme",
    "FieldSchema", "FieldValues", "apply_edit", "compute_defaults", "resolve_section_for",
    "TemplateDefinition", "get_template", "list_templates", "register_template",
    "RenderStage", "render", "render_pages", "split_pages",
    "Asset", "export_site", "package_site", "package_site_async",
]
