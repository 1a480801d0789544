"""
Édition des données de personnalisation par chemin.

Trois grammaires, parsées une seule fois en chemins typés :

    "headline"              → ScalarPath(key="headline")
    "skills[2]"             → ItemPath(key="skills", index=2)
    "social_links[0].url"   → ItemFieldPath(key="social_links", index=0, field="url")

Chaque opération retourne une NOUVELLE map ; l'entrée n'est jamais modifiée.
Un index hors limites étend la liste (sémantique "ajouter un item" de l'éditeur).
"""
import re
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict

from ..core.errors import EditPathError
from .defaults import item_defaults
from .schema import FieldSchema

_PATH_RE = re.compile(r"^([^.\[\]\s]+)(?:\[(\d+)\](?:\.([^.\[\]\s]+))?)?$")


class ScalarPath(BaseModel):
    model_config = ConfigDict(frozen=True)
    key: str


class ItemPath(BaseModel):
    model_config = ConfigDict(frozen=True)
    key: str
    index: int


class ItemFieldPath(BaseModel):
    model_config = ConfigDict(frozen=True)
    key: str
    index: int
    field: str


EditPath = Union[ScalarPath, ItemPath, ItemFieldPath]


def parse_path(path: str) -> EditPath:
    if not isinstance(path, str):
        raise EditPathError(repr(path), "chaîne attendue")
    match = _PATH_RE.match(path.strip())
    if not match:
        raise EditPathError(path, "attendu : key, key[n] ou key[n].champ")
    key, index, field = match.groups()
    if index is None:
        return ScalarPath(key=key)
    if field is None:
        return ItemPath(key=key, index=int(index))
    return ItemFieldPath(key=key, index=int(index), field=field)


# ── Opérations typées ────────────────────────────────────────────────────────

def _list_copy(data: Mapping[str, Any], key: str) -> list:
    current = data.get(key)
    return list(current) if isinstance(current, list) else []


def _extend(items: list, index: int, filler) -> None:
    while len(items) <= index:
        items.append(filler())


def set_scalar(data: Mapping[str, Any], key: str, value: Any) -> Dict[str, Any]:
    out = dict(data)
    out[key] = value
    return out


def set_array_item(data: Mapping[str, Any], key: str, index: int, value: Any) -> Dict[str, Any]:
    items = _list_copy(data, key)
    _extend(items, index, str)
    items[index] = value
    return set_scalar(data, key, items)


def set_group_field(
    data: Mapping[str, Any], key: str, index: int, field: str, value: Any,
) -> Dict[str, Any]:
    items = _list_copy(data, key)
    _extend(items, index, dict)
    record = dict(items[index]) if isinstance(items[index], Mapping) else {}
    record[field] = value
    items[index] = record
    return set_scalar(data, key, items)


def append_group_item(
    data: Mapping[str, Any],
    key: str,
    item: Any = None,
    field: Optional[FieldSchema] = None,
) -> Dict[str, Any]:
    """
    Ajoute un item en fin de liste. Avec le schéma du champ : item construit
    depuis les sous-défauts si absent, et `max` respecté (map inchangée au max).
    """
    items = _list_copy(data, key)
    if field is not None:
        if field.max is not None and len(items) >= field.max:
            return dict(data)
        if item is None:
            item = item_defaults(field)
    items.append({} if item is None else item)
    return set_scalar(data, key, items)


def remove_group_item(
    data: Mapping[str, Any],
    key: str,
    index: int,
    field: Optional[FieldSchema] = None,
) -> Dict[str, Any]:
    """Retire l'item `index`. Index hors limites ou `min` atteint → map inchangée."""
    items = _list_copy(data, key)
    if not 0 <= index < len(items):
        return dict(data)
    if field is not None and field.min is not None and len(items) <= field.min:
        return dict(data)
    del items[index]
    return set_scalar(data, key, items)


# ── Point d'entrée "un chemin, une valeur" ───────────────────────────────────

def apply_edit(data: Optional[Mapping[str, Any]], path: str | EditPath, value: Any) -> Dict[str, Any]:
    """Nouvelle map avec `value` placée à `path`."""
    data = data or {}
    parsed = parse_path(path) if isinstance(path, str) else path
    if isinstance(parsed, ItemFieldPath):
        return set_group_field(data, parsed.key, parsed.index, parsed.field, value)
    if isinstance(parsed, ItemPath):
        return set_array_item(data, parsed.key, parsed.index, value)
    return set_scalar(data, parsed.key, value)
