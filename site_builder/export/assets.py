"""
Assets binaires d'un export : images téléversées ou extraites des data URI.
"""
import base64
import binascii
import hashlib
import logging
import re
from typing import Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "webp", "svg", "avif", "ico")

_MIME_EXT = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
    "image/avif": "avif",
    "image/x-icon": "ico",
}

DATA_URI_RE = re.compile(r"data:(image/[a-z0-9.+-]+);base64,([A-Za-z0-9+/=]+)", re.IGNORECASE)

# Références d'images dans le HTML : src="...", url(...), href vers un fichier image
_SRC_RE = re.compile(r"""\bsrc\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
_CSS_URL_RE = re.compile(r"""url\(\s*(?:&#39;|&#34;|['"])?([^'")&\s]+)""", re.IGNORECASE)
_HREF_RE = re.compile(r"""\bhref\s*=\s*["']([^"']+)["']""", re.IGNORECASE)


class Asset(BaseModel):
    """
    Fichier binaire à placer sous images/.

    `source` : la référence telle qu'elle apparaît dans le HTML (URL absolue ou
    data URI). Absente → la clé de l'asset dans la map sert de référence.
    """
    model_config = ConfigDict(frozen=True)

    data: bytes
    filename: str = Field(..., min_length=1)
    source: Optional[str] = None


def guess_extension(data: bytes) -> Optional[str]:
    """Extension d'après la signature binaire (png, jpg, gif, webp, svg)."""
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "png"
    if data.startswith(b"\xff\xd8\xff"):
        return "jpg"
    if data[:6] in (b"GIF87a", b"GIF89a"):
        return "gif"
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "webp"
    head = data[:256].lstrip().lower()
    if head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in data[:1024].lower()):
        return "svg"
    return None


def sanitize_filename(name: str, data: bytes = b"", fallback: str = "image") -> str:
    """
    Nom de fichier sûr pour l'archive : [a-z0-9._-], sans chemin, extension
    image connue (sinon devinée depuis les octets, sinon .jpg).
    """
    base = re.split(r"[\\/]", name or "")[-1]
    base = re.sub(r"[^A-Za-z0-9._-]+", "_", base).strip("._-") or fallback
    stem, dot, ext = base.rpartition(".")
    if not dot:
        stem, ext = base, ""
    ext = ext.lower()
    if ext not in IMAGE_EXTENSIONS:
        stem = base if not dot else stem
        ext = guess_extension(data) or "jpg"
    stem = re.sub(r"_+", "_", stem).strip("._-") or fallback
    return f"{stem}.{ext}"


def filename_from_field_path(field_path: str, index: int, ext: str = "jpg") -> str:
    """"projects[2].image" → "projects_2_image_0.jpg"."""
    clean = re.sub(r"[\[\].]", "_", field_path)
    clean = re.sub(r"_+", "_", clean).strip("_") or "image"
    return f"{clean}_{index}.{ext}"


def unique_filename(filename: str, taken: set[str]) -> str:
    """photo.jpg, photo-2.jpg, photo-3.jpg..."""
    if filename not in taken:
        return filename
    stem, _, ext = filename.rpartition(".")
    n = 2
    while f"{stem}-{n}.{ext}" in taken:
        n += 1
    return f"{stem}-{n}.{ext}"


def extract_data_uri_assets(documents: str | Mapping[str, str] | Iterable[str]) -> dict[str, Asset]:
    """
    Décode les images base64 embarquées (data URI) en assets.

    Clé = nom de fichier déterministe dérivé du contenu (image-<sha256[:12]>.<ext>),
    `source` = le data URI exact, pour la réécriture des références.
    """
    if isinstance(documents, str):
        documents = [documents]
    elif isinstance(documents, Mapping):
        documents = list(documents.values())

    assets: dict[str, Asset] = {}
    seen: set[str] = set()
    for html in documents:
        for match in DATA_URI_RE.finditer(html):
            uri = match.group(0)
            if uri in seen:
                continue
            seen.add(uri)
            try:
                data = base64.b64decode(match.group(2), validate=True)
            except (binascii.Error, ValueError):
                log.warning("Data URI illisible ignoré (%d caractères)", len(uri))
                continue
            ext = _MIME_EXT.get(match.group(1).lower()) or guess_extension(data) or "jpg"
            filename = f"image-{hashlib.sha256(data).hexdigest()[:12]}.{ext}"
            assets[filename] = Asset(data=data, filename=filename, source=uri)
    return assets


def _is_image_href(url: str) -> bool:
    path = url.split("?", 1)[0].split("#", 1)[0].lower()
    return path.rsplit(".", 1)[-1] in IMAGE_EXTENSIONS if "." in path else False


def image_references(html: str) -> list[str]:
    """Références d'images non relatives (http(s) ou data URI), dans l'ordre d'apparition."""
    refs: list[str] = []
    candidates = [m.group(1) for m in _SRC_RE.finditer(html)]
    candidates += [m.group(1) for m in _CSS_URL_RE.finditer(html)]
    candidates += [m.group(1) for m in _HREF_RE.finditer(html) if _is_image_href(m.group(1))]
    for ref in candidates:
        lowered = ref.lower()
        if lowered.startswith(("http://", "https://", "//", "data:")) and ref not in refs:
            refs.append(ref)
    return refs


def describe_reference(ref: str) -> str:
    """Forme lisible d'une référence (les data URI sont tronqués)."""
    if ref.lower().startswith("data:"):
        head = ref.split(",", 1)[0]
        return f"{head},… ({len(ref)} caractères)"
    return ref
