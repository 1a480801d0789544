"""
Documents multi-page sérialisés en un seul flux, délimités par des marqueurs :

    <!-- FILE: index.html -->
    <!DOCTYPE html>...
    <!-- FILE: about.html -->
    <!DOCTYPE html>...

Variantes tolérées à la lecture : `<!-- ===== FILE: about.html ===== -->`, casse libre.
"""
import logging
import re
from typing import Mapping

log = logging.getLogger(__name__)

FILE_MARKER_RE = re.compile(r"<!--\s*(?:=+\s*)?FILE:\s*(\S+\.html)\s*(?:=+\s*)?-->", re.IGNORECASE)

PAGE_NAMES = {
    "index.html": "Home",
    "about.html": "About",
    "services.html": "Services",
    "contact.html": "Contact",
    "products.html": "Products",
    "product-detail.html": "Product Detail",
    "cart.html": "Cart",
    "blog.html": "Blog",
    "post.html": "Blog Post",
    "menu.html": "Menu",
    "gallery.html": "Gallery",
    "pricing.html": "Pricing",
}


def file_marker(filename: str) -> str:
    return f"<!-- FILE: {filename} -->"


def join_pages(pages: Mapping[str, str]) -> str:
    """Map nom de fichier → HTML  →  flux unique avec marqueurs FILE."""
    return "\n".join(f"{file_marker(name)}\n{html.strip()}" for name, html in pages.items()) + "\n"


def split_pages(stream: str) -> dict[str, str]:
    """
    Flux avec marqueurs → map nom de fichier → HTML.
    Aucun marqueur → {} (document mono-page). Noms avec séparateur de chemin ignorés.
    """
    if not stream:
        return {}
    parts = FILE_MARKER_RE.split(stream)
    pages: dict[str, str] = {}
    # parts = [préambule, nom1, contenu1, nom2, contenu2, ...]
    for i in range(1, len(parts) - 1, 2):
        filename = parts[i].strip()
        content = parts[i + 1].strip()
        if "/" in filename or "\\" in filename:
            log.warning("Page ignorée (chemin interdit) : %r", filename)
            continue
        if filename and content:
            pages[filename] = content
    return pages


def is_multi_page(stream: str) -> bool:
    return bool(FILE_MARKER_RE.search(stream or ""))


def page_display_name(filename: str) -> str:
    """"about.html" → "About" ; nom inconnu → "getting started" (tirets → espaces)."""
    if filename in PAGE_NAMES:
        return PAGE_NAMES[filename]
    stem = filename[:-5] if filename.lower().endswith(".html") else filename
    return stem.replace("-", " ")
