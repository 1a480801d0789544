"""
Registry des thèmes — lookup par id avec fallback sur le thème par défaut.

    >>> get_theme("retro").name
    'Retro Wave'
    >>> get_theme("does-not-exist").id
    'minimal'
"""
import logging
from typing import Any, Mapping

from pydantic import ValidationError

from ..config import get_settings
from ..core.errors import ThemeConfigError
from ..core.schemas import Theme, ThemeSummary
from .keyframes import KEYFRAMES
from .presets import THEME_PRESETS

log = logging.getLogger(__name__)

DEFAULT_THEME_ID = "minimal"

_REGISTRY: dict[str, Theme] = {}


def build_theme(data: Mapping[str, Any] | Theme) -> Theme:
    """Valide un dict brut en Theme. Lève ThemeConfigError (jamais ValidationError)."""
    if isinstance(data, Theme):
        theme = data
    else:
        theme_id = data.get("id", "?") if isinstance(data, Mapping) else "?"
        try:
            theme = Theme.model_validate(data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or '<racine>'} : {err['msg']}"
                for err in e.errors()
            )
            raise ThemeConfigError(f"Thème {theme_id!r} invalide : {problems}") from e

    unknown = sorted(name for name in theme.animations if name not in KEYFRAMES)
    if unknown:
        raise ThemeConfigError(
            f"Thème {theme.id!r} : animations sans keyframes {unknown}. Connues : {list(KEYFRAMES)}"
        )
    return theme


def register_theme(theme_id: str, data: Mapping[str, Any] | Theme, replace: bool = False) -> Theme:
    """
    Enregistre un thème. Le bundle doit être complet : un bucket ou une
    couleur manquante lève ThemeConfigError immédiatement.
    """
    if theme_id in _REGISTRY and not replace:
        raise ThemeConfigError(f"Thème déjà enregistré : {theme_id!r}")
    if isinstance(data, Theme):
        theme = data
    else:
        payload = dict(data)
        payload.setdefault("id", theme_id)
        theme = build_theme(payload)
    if theme.id != theme_id:
        raise ThemeConfigError(f"Id incohérent : enregistré sous {theme_id!r}, déclaré {theme.id!r}")
    _REGISTRY[theme_id] = theme
    log.debug("Thème enregistré : %s", theme_id)
    return theme


def unregister_theme(theme_id: str) -> None:
    if theme_id == DEFAULT_THEME_ID:
        raise ThemeConfigError("Le thème par défaut ne peut pas être retiré")
    _REGISTRY.pop(theme_id, None)


def fallback_theme_id() -> str:
    """Thème de repli : SITE_BUILDER_DEFAULT_THEME s'il est enregistré, sinon "minimal"."""
    configured = get_settings().default_theme
    return configured if configured in _REGISTRY else DEFAULT_THEME_ID


def get_theme(theme_id: str | None) -> Theme:
    """Thème demandé, ou le thème par défaut si l'id est inconnu / vide."""
    if theme_id and theme_id in _REGISTRY:
        return _REGISTRY[theme_id]
    fallback = fallback_theme_id()
    if theme_id:
        log.info("Thème inconnu %r → fallback %s", theme_id, fallback)
    return _REGISTRY[fallback]


def has_theme(theme_id: str | None) -> bool:
    return bool(theme_id) and theme_id in _REGISTRY


def theme_ids() -> list[str]:
    return list(_REGISTRY)


def list_themes() -> list[ThemeSummary]:
    """Liste {id, name, description} dans l'ordre d'enregistrement."""
    return [
        ThemeSummary(id=t.id, name=t.name, description=t.description)
        for t in _REGISTRY.values()
    ]


for _theme_id, _data in THEME_PRESETS.items():
    register_theme(_theme_id, _data)
