"""
Valeurs par défaut d'un schéma : données initiales à la sélection d'un template.
"""
import copy
from typing import Any, Dict, Mapping

from ..themes.registry import DEFAULT_THEME_ID
from .schema import FieldSchema


def item_defaults(field: FieldSchema) -> Any:
    """Un item neuf pour un group (dict des sous-défauts) ou un repeatable ("")."""
    if field.type == "group":
        return {
            sub_key: copy.deepcopy(sub.default) if sub.default is not None else ""
            for sub_key, sub in (field.fields or {}).items()
        }
    return ""


def field_default(field: FieldSchema, default_theme_id: str | None = None) -> Any:
    """Défaut d'un champ, copie profonde (les défauts du schéma ne sont jamais partagés)."""
    if field.type == "theme-selector":
        return default_theme_id or field.default or DEFAULT_THEME_ID

    if field.is_list:
        items = copy.deepcopy(field.default) if isinstance(field.default, list) else []
        while len(items) < field.min_items:
            items.append(item_defaults(field))
        return items

    return copy.deepcopy(field.default) if field.default is not None else ""


def compute_defaults(
    schema: Mapping[str, FieldSchema],
    default_theme_id: str | None = None,
) -> Dict[str, Any]:
    """
    Parcourt le schéma et construit la map de personnalisation initiale.

    - group / repeatable : défaut déclaré, complété jusqu'au minimum d'items
      (`min` déclaré, sinon 1) avec des items construits depuis les sous-défauts
    - theme-selector : thème par défaut du template, sinon défaut du champ,
      sinon le thème par défaut du registry
    """
    return {key: field_default(field, default_theme_id) for key, field in schema.items()}
