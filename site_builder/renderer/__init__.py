"""
Renderer : composition du document HTML (CSS partagé, pages multiples).
"""
from .html import RenderStage, render, render_pages, resolve_theme
from .pages import FILE_MARKER_RE, is_multi_page, join_pages, page_display_name, split_pages
from .css import SYSTEM_FONTS, assemble_css, font_families, font_links

__all__ = [
    "RenderStage", "render", "render_pages", "resolve_theme",
    "FILE_MARKER_RE", "is_multi_page", "join_pages", "page_display_name", "split_pages",
    "SYSTEM_FONTS", "assemble_css", "font_families", "font_links",
]
