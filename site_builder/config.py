"""
Configuration par variables d'environnement (lues à chaque appel) :

  SITE_BUILDER_DEFAULT_THEME        thème de repli            (minimal)
  SITE_BUILDER_DEFAULT_COLOR_MODE   color mode par défaut     (auto)
  SITE_BUILDER_MAX_ASSET_BYTES      taille max d'une image    (5 Mio)
  SITE_BUILDER_LOG_LEVEL            niveau de log de l'app    (INFO)
  SITE_BUILDER_CORS_ORIGINS         origines CORS, virgules   (*)
"""
import logging
import os

from pydantic import BaseModel, Field

log = logging.getLogger(__name__)

DEFAULT_MAX_ASSET_BYTES = 5 * 1024 * 1024


class Settings(BaseModel):
    default_theme: str = "minimal"
    default_color_mode: str = "auto"
    max_asset_bytes: int = Field(DEFAULT_MAX_ASSET_BYTES, gt=0)
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        value = int(raw)
    except ValueError:
        if raw:
            log.warning("%s invalide (%r) → %d", name, raw, default)
        return default
    return value if value > 0 else default


def get_settings() -> Settings:
    origins = [o.strip() for o in os.getenv("SITE_BUILDER_CORS_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        default_theme=os.getenv("SITE_BUILDER_DEFAULT_THEME", "minimal").strip() or "minimal",
        default_color_mode=os.getenv("SITE_BUILDER_DEFAULT_COLOR_MODE", "auto").strip() or "auto",
        max_asset_bytes=_int_env("SITE_BUILDER_MAX_ASSET_BYTES", DEFAULT_MAX_ASSET_BYTES),
        log_level=os.getenv("SITE_BUILDER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        cors_origins=origins or ["*"],
    )
