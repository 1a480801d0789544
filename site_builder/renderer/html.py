"""
Renderer — (template_id, données, theme_id, color mode) → document HTML autonome.

Étapes (loguées en debug) :
  IDLE → RESOLVING → TOKENS_COMPILED → BODY_COMPOSED → DOCUMENT_ASSEMBLED → DONE
  seule sortie en erreur : RESOLVING → ERROR (template inconnu)

Le document ne référence aucune ressource de l'application : CSS inline,
polices Google Fonts, images déjà résolues en URL absolues ou data URI.
"""
import logging
from enum import Enum
from typing import Any, Mapping, Optional

import markupsafe

from ..config import get_settings
from ..core.errors import UnknownTemplateError
from ..core.schemas import Theme
from ..fields.values import FieldValues
from ..templates import INDEX_PAGE, TemplateDefinition, get_template
from ..themes.compiler import compile_theme_css, normalize_color_mode
from ..themes.registry import get_theme
from .css import assemble_css, font_links
from .pages import join_pages, page_display_name

log = logging.getLogger(__name__)


class RenderStage(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    TOKENS_COMPILED = "tokens_compiled"
    BODY_COMPOSED = "body_composed"
    DOCUMENT_ASSEMBLED = "document_assembled"
    DONE = "done"
    ERROR = "error"


def _stage(stage: RenderStage, template_id: Any) -> None:
    log.debug("render %s : %s", template_id, stage.value)


# ── Résolution ───────────────────────────────────────────────────────────────

def resolve_theme(template: TemplateDefinition, data: Mapping[str, Any], theme_id: Optional[str]) -> Theme:
    """theme_id explicite, sinon champ theme-selector des données, sinon thème du template."""
    if not theme_id:
        for key, field in template.fields.items():
            if field.type == "theme-selector" and isinstance(data.get(key), str) and data[key].strip():
                theme_id = data[key].strip()
                break
    return get_theme(theme_id or template.default_theme)


def document_title(template: TemplateDefinition, values: FieldValues) -> str:
    """Champ titre du template, puis champ "title" s'il est déclaré, puis nom du template (échappé)."""
    for key in (template.title_field, "title"):
        if key and key in template.fields and values.has(key):
            return values.text(key)
    return str(markupsafe.escape(template.name))


def wrap_document(title: str, head_links: str, css: str, body: str, color_mode: str, lang: str = "en") -> str:
    color_scheme = "light dark" if color_mode == "auto" else color_mode
    return f"""<!DOCTYPE html>
<html lang="{markupsafe.escape(lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="color-scheme" content="{color_scheme}">
  <title>{title}</title>
  {head_links}
  <style>
{css}
  </style>
</head>
<body>
{body.strip()}
</body>
</html>
"""


# ── Points d'entrée publics ──────────────────────────────────────────────────

def render_pages(
    template_id: str,
    data: Optional[Mapping[str, Any]] = None,
    theme_id: Optional[str] = None,
    color_mode: Optional[str] = None,
    lang: str = "en",
) -> dict[str, str]:
    """
    Rend chaque page du template : {"index.html": ..., "about.html": ...}.
    Un template mono-page produit uniquement index.html.

    Raises:
        UnknownTemplateError: template non enregistré
    """
    _stage(RenderStage.IDLE, template_id)
    _stage(RenderStage.RESOLVING, template_id)
    try:
        template = get_template(template_id)
    except UnknownTemplateError:
        _stage(RenderStage.ERROR, template_id)
        raise

    data = data if isinstance(data, Mapping) else {}
    mode = normalize_color_mode(color_mode if color_mode is not None else get_settings().default_color_mode)
    theme = resolve_theme(template, data, theme_id)

    theme_css = compile_theme_css(theme, mode)
    css = assemble_css(theme, theme_css, template.css)
    head_links = font_links(theme)
    _stage(RenderStage.TOKENS_COMPILED, template_id)

    values = FieldValues(template.fields, data, default_theme_id=template.default_theme)
    title = document_title(template, values)

    structures = {INDEX_PAGE: template.structure, **template.pages}
    bodies = {name: fn(values, theme, mode) for name, fn in structures.items()}
    _stage(RenderStage.BODY_COMPOSED, template_id)

    documents = {}
    for name, body in bodies.items():
        page_title = title if name == INDEX_PAGE else f"{page_display_name(name)} · {title}"
        documents[name] = wrap_document(page_title, head_links, css, body, mode, lang)
    _stage(RenderStage.DOCUMENT_ASSEMBLED, template_id)

    log.debug("render %s : thème=%s mode=%s pages=%s", template_id, theme.id, mode, list(documents))
    _stage(RenderStage.DONE, template_id)
    return documents


def render(
    template_id: str,
    data: Optional[Mapping[str, Any]] = None,
    theme_id: Optional[str] = None,
    color_mode: Optional[str] = None,
    lang: str = "en",
) -> str:
    """
    Document HTML complet. Template multi-page : flux unique où chaque page est
    précédée de son marqueur `<!-- FILE: name.html -->` (cf. pages.split_pages).
    """
    documents = render_pages(template_id, data, theme_id, color_mode, lang)
    if len(documents) == 1:
        return documents[INDEX_PAGE]
    return join_pages(documents)
