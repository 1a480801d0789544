"""
Schéma de champs d'un template — décrit chaque entrée personnalisable.

Types supportés :
  text, email, url, tel, textarea, select, color, image  → scalaires
  repeatable                                              → liste de scalaires
  group                                                   → liste d'enregistrements
                                                            (sous-schéma `fields`)
  theme-selector                                          → id de thème

Un `group` ne peut pas contenir un autre `group` : l'adressage par chemin
(`projects[2].title`) ne connaît qu'un niveau de répétition.
"""
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.errors import SchemaConfigError

FieldType = Literal[
    "text", "email", "url", "tel", "textarea", "select",
    "color", "image", "repeatable", "group", "theme-selector",
]

SCALAR_TYPES: tuple[str, ...] = ("text", "email", "url", "tel", "textarea", "select", "color", "image")
LIST_TYPES: tuple[str, ...] = ("repeatable", "group")


class FieldSchema(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: FieldType
    label: str = ""
    default: Any = None
    required: bool = False
    optional: bool = False
    # select
    options: Optional[List[str]] = None
    # group / repeatable
    min: Optional[int] = Field(None, ge=0)
    max: Optional[int] = Field(None, ge=1)
    item_label: Optional[str] = None
    fields: Optional[Dict[str, "FieldSchema"]] = None
    # text-like
    placeholder: Optional[str] = None
    rows: Optional[int] = Field(None, ge=1)
    # image
    accept: Optional[str] = None

    @property
    def is_list(self) -> bool:
        return self.type in LIST_TYPES

    @property
    def min_items(self) -> int:
        """Nombre d'items à seeder : `min` déclaré, sinon 1."""
        return self.min if self.min is not None else 1


FieldSchema.model_rebuild()


def _check_key(key: Any, where: str) -> None:
    if not isinstance(key, str) or not key.strip():
        raise SchemaConfigError(f"{where} : clé de champ vide")
    if any(c in key for c in ".[]"):
        raise SchemaConfigError(f"{where} : clé {key!r} interdite (ni '.', ni '[', ni ']')")


def _check_field(key: str, field: FieldSchema, where: str, nested: bool = False) -> None:
    if field.type == "select" and not field.options:
        raise SchemaConfigError(f"{where}.{key} : un champ select exige `options`")
    if field.type == "group":
        if nested:
            raise SchemaConfigError(
                f"{where}.{key} : group imbriqué dans un group (un seul niveau de répétition)"
            )
        if not field.fields:
            raise SchemaConfigError(f"{where}.{key} : un group exige un sous-schéma `fields`")
    elif field.fields:
        raise SchemaConfigError(f"{where}.{key} : `fields` réservé au type group")
    if field.min is not None and field.max is not None and field.min > field.max:
        raise SchemaConfigError(f"{where}.{key} : min ({field.min}) > max ({field.max})")
    if field.type == "group":
        for sub_key, sub in field.fields.items():
            _check_key(sub_key, f"{where}.{key}")
            _check_field(sub_key, sub, f"{where}.{key}", nested=True)


def validate_schema(
    fields: Mapping[str, FieldSchema | Mapping[str, Any]],
    where: str = "schema",
) -> Dict[str, FieldSchema]:
    """
    Valide un schéma de champs (dicts bruts ou FieldSchema).

    Returns:
        dict ordonné clé → FieldSchema

    Raises:
        SchemaConfigError: clé invalide, select sans options, group sans
        sous-schéma, group dans un group, min > max.
    """
    validated: Dict[str, FieldSchema] = {}
    for key, raw in fields.items():
        _check_key(key, where)
        try:
            field = raw if isinstance(raw, FieldSchema) else FieldSchema.model_validate(raw)
        except ValidationError as e:
            raise SchemaConfigError(f"{where}.{key} : {e.errors()[0]['msg']}") from e
        _check_field(key, field, where)
        validated[key] = field
    return validated
