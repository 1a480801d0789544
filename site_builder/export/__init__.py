"""
Export : archive zip autonome d'un site rendu.
"""
from .assets import (
    Asset,
    extract_data_uri_assets,
    filename_from_field_path,
    image_references,
    sanitize_filename,
    unique_filename,
)
from .packager import IMAGES_DIR, export_site, package_site, package_site_async
from .readme import build_readme

__all__ = [
    "Asset", "extract_data_uri_assets", "filename_from_field_path", "image_references",
    "sanitize_filename", "unique_filename",
    "IMAGES_DIR", "export_site", "package_site", "package_site_async",
    "build_readme",
]
