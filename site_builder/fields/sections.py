"""
Rangement des champs dans les sections de l'UI d'édition.

Fonction pure, utilisée uniquement par l'éditeur externe : le moteur de rendu
ignore les sections.
"""
from .schema import FieldSchema

SECTIONS: tuple[str, ...] = ("design", "media", "contact", "collections", "content")

_CONTACT_HINTS = ("email", "phone", "tel", "address", "contact", "social", "website")


def resolve_section_for(key: str, field: FieldSchema) -> str:
    """Clé + schéma → une des SECTIONS."""
    if field.type in ("theme-selector", "color") or key.lower() in ("color_mode", "colormode"):
        return "design"
    if field.type == "image":
        return "media"
    if field.type in ("email", "tel"):
        return "contact"
    if field.type in ("repeatable", "group"):
        return "collections"
    lowered = key.lower()
    if field.type == "url" or any(hint in lowered for hint in _CONTACT_HINTS):
        return "contact"
    return "content"


def group_by_section(schema: dict[str, FieldSchema]) -> dict[str, list[str]]:
    """Clés regroupées par section, dans l'ordre de SECTIONS puis du schéma."""
    grouped: dict[str, list[str]] = {name: [] for name in SECTIONS}
    for key, field in schema.items():
        grouped[resolve_section_for(key, field)].append(key)
    return {name: keys for name, keys in grouped.items() if keys}
