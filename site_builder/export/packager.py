"""
Export zip d'un site rendu.

Archive :
  index.html (+ une page par fichier pour un template multi-page)
  images/<fichier>
  README.md
  manifest.json      (si build_info fourni)

Chaque référence d'asset (URL absolue ou data URI) est réécrite en
./images/<fichier>. Une référence sans asset correspondant n'est jamais
bloquante : elle reste telle quelle, signalée en warning et dans le README.
"""
import io
import json
import logging
import re
import zipfile
from typing import Any, Mapping, Optional

import markupsafe
from fastapi.concurrency import run_in_threadpool

from ..config import get_settings
from ..renderer.html import render_pages, resolve_theme
from ..renderer.pages import is_multi_page, split_pages
from ..templates import INDEX_PAGE, get_template
from ..themes.compiler import normalize_color_mode
from .assets import Asset, extract_data_uri_assets, image_references, sanitize_filename, unique_filename
from .readme import build_readme

log = logging.getLogger(__name__)

IMAGES_DIR = "images"
# Horodatage fixe des entrées : mêmes entrées → mêmes octets
ZIP_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


def _documents(rendered: str | Mapping[str, str]) -> dict[str, str]:
    if isinstance(rendered, Mapping):
        documents = dict(rendered)
    elif is_multi_page(rendered):
        documents = split_pages(rendered)
    else:
        documents = {INDEX_PAGE: rendered}
    if not documents:
        raise ValueError("Aucun document HTML à packager")
    # index.html toujours en tête
    if INDEX_PAGE in documents:
        documents = {INDEX_PAGE: documents.pop(INDEX_PAGE), **documents}
    return documents


def _write(zf: zipfile.ZipFile, name: str, data: bytes | str) -> None:
    info = zipfile.ZipInfo(name, date_time=ZIP_TIMESTAMP)
    info.compress_type = zipfile.ZIP_DEFLATED
    info.external_attr = 0o644 << 16
    zf.writestr(info, data)


def _rewrite_references(documents: dict[str, str], targets: Mapping[str, str]) -> dict[str, int]:
    """
    Réécrit toutes les références en une passe : une seule alternation, sources
    les plus longues d'abord (".../img.png?w=800" avant ".../img.png").
    Modifie `documents` en place et retourne le nombre de remplacements par cible.
    """
    hits: dict[str, int] = {}
    if not targets:
        return hits
    pattern = re.compile("|".join(re.escape(form) for form in sorted(targets, key=len, reverse=True)))

    def _replace(match: re.Match) -> str:
        target = targets[match.group(0)]
        hits[target] = hits.get(target, 0) + 1
        return target

    for name, html in documents.items():
        documents[name] = pattern.sub(_replace, html)
    return hits


def package_site(
    rendered: str | Mapping[str, str],
    assets: Optional[Mapping[str, Asset]] = None,
    *,
    project_name: str = "Your Website",
    build_info: Optional[Mapping[str, Any]] = None,
    max_asset_bytes: Optional[int] = None,
) -> bytes:
    """
    Construit l'archive zip.

    Args:
        rendered: document unique, flux multi-page (marqueurs FILE) ou map nom → HTML
        assets: clé logique → Asset ; `asset.source` (ou la clé) = référence dans le HTML
        project_name: titre du README
        build_info: template / thème / color mode → manifest.json + README
        max_asset_bytes: taille max d'un asset (défaut : SITE_BUILDER_MAX_ASSET_BYTES)

    Returns:
        octets de l'archive zip
    """
    documents = _documents(rendered)
    limit = max_asset_bytes or get_settings().max_asset_bytes

    taken: set[str] = set()
    included: list[tuple[str, bytes]] = []
    failed: list[dict[str, str]] = []

    # forme de la référence (brute ou échappée HTML) → ./images/<fichier>
    targets: dict[str, str] = {}

    for key in sorted(assets or {}):
        asset = assets[key]
        source = asset.source or key
        if len(asset.data) > limit:
            log.warning("Asset %s ignoré : %d octets > %d", asset.filename, len(asset.data), limit)
            failed.append({"source": source, "reason": "File too large"})
            continue
        filename = unique_filename(sanitize_filename(asset.filename, asset.data), taken)
        taken.add(filename)

        target = f"./{IMAGES_DIR}/{filename}"
        for form in (source, str(markupsafe.escape(source))):
            if form:
                targets.setdefault(form, target)
        included.append((filename, asset.data))

    hits = _rewrite_references(documents, targets)
    for filename, _ in included:
        if not hits.get(f"./{IMAGES_DIR}/{filename}"):
            log.info("Asset %s non référencé dans le HTML (inclus quand même)", filename)

    unresolved: list[str] = []
    for html in documents.values():
        for ref in image_references(html):
            if ref not in unresolved:
                unresolved.append(ref)
    for ref in unresolved:
        log.warning("Image sans asset, référence conservée : %s", ref[:80])

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as zf:
        for name, html in documents.items():
            _write(zf, name, html)
        for filename, data in included:
            _write(zf, f"{IMAGES_DIR}/{filename}", data)
        _write(zf, "README.md", build_readme(
            project_name,
            pages=list(documents),
            images=[filename for filename, _ in included],
            failed=failed,
            unresolved=unresolved,
            build_info=build_info,
        ))
        if build_info is not None:
            manifest = {
                **build_info,
                "pages": list(documents),
                "images": {
                    "included": [filename for filename, _ in included],
                    "failed": failed,
                    "unresolved": len(unresolved),
                },
            }
            _write(zf, "manifest.json", json.dumps(manifest, indent=2, ensure_ascii=False))

    archive = buffer.getvalue()
    log.info(
        "Archive créée : %d page(s), %d image(s), %d ignorée(s), %d octets",
        len(documents), len(included), len(failed), len(archive),
    )
    return archive


async def package_site_async(
    rendered: str | Mapping[str, str],
    assets: Optional[Mapping[str, Asset]] = None,
    **kwargs: Any,
) -> bytes:
    """package_site hors de l'event loop (threadpool)."""
    return await run_in_threadpool(package_site, rendered, assets, **kwargs)


def export_site(
    template_id: str,
    data: Optional[Mapping[str, Any]] = None,
    theme_id: Optional[str] = None,
    color_mode: Optional[str] = None,
    assets: Optional[Mapping[str, Asset]] = None,
    project_name: Optional[str] = None,
) -> bytes:
    """
    Rend puis package un template. Les images embarquées en data URI sont
    extraites vers images/ ; les assets fournis priment à clé égale.

    Raises:
        UnknownTemplateError: template non enregistré
    """
    template = get_template(template_id)
    documents = render_pages(template_id, data, theme_id, color_mode)

    # Thème effectivement utilisé (fallback compris), pour le manifest
    theme = resolve_theme(template, data if isinstance(data, Mapping) else {}, theme_id)

    all_assets = {**extract_data_uri_assets(documents), **(assets or {})}
    mode = normalize_color_mode(color_mode if color_mode is not None else get_settings().default_color_mode)

    if not project_name:
        title_key = template.title_field
        value = (data or {}).get(title_key) if title_key else None
        project_name = f"{value.strip()} Website" if isinstance(value, str) and value.strip() else template.name

    return package_site(
        documents,
        all_assets,
        project_name=project_name,
        build_info={"template_id": template.id, "theme": theme.id, "color_mode": mode},
    )
