"""
Modèle de champs : schéma, défauts, sections d'édition, édition par chemin,
lecture avec fallback.
"""
from .schema import FieldSchema, FieldType, LIST_TYPES, SCALAR_TYPES, validate_schema
from .defaults import compute_defaults, field_default, item_defaults
from .sections import SECTIONS, group_by_section, resolve_section_for
from .paths import (
    EditPath,
    ItemFieldPath,
    ItemPath,
    ScalarPath,
    append_group_item,
    apply_edit,
    parse_path,
    remove_group_item,
    set_array_item,
    set_group_field,
    set_scalar,
)
from .values import FieldValues, safe_url

__all__ = [
    "FieldSchema", "FieldType", "LIST_TYPES", "SCALAR_TYPES", "validate_schema",
    "compute_defaults", "field_default", "item_defaults",
    "SECTIONS", "group_by_section", "resolve_section_for",
    "EditPath", "ItemFieldPath", "ItemPath", "ScalarPath",
    "append_group_item", "apply_edit", "parse_path", "remove_group_item",
    "set_array_item", "set_group_field", "set_scalar",
    "FieldValues", "safe_url",
]
