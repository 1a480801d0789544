"""
Lecture "défaut déclaré ou valeur courante" pour les templates.

Les données de personnalisation ne sont pas validées avant rendu : une valeur
absente, None, vide ou du mauvais type retombe sur le défaut du schéma. Toutes
les lectures destinées au HTML sont échappées (markupsafe).

    values = FieldValues(schema, {"name": "<b>Jo</b>"})
    values.text("name")   # '&lt;b&gt;Jo&lt;/b&gt;'
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

import markupsafe

from ..core.colors import is_hex_color
from ..core.errors import SchemaConfigError
from .defaults import field_default
from .schema import FieldSchema

log = logging.getLogger(__name__)

_SAFE_URL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "#", "/", "./", "../", "data:image/")
_UNSAFE_SCHEMES = ("javascript:", "vbscript:", "data:", "file:")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _scalar(value: Any) -> Optional[str]:
    """Scalaire affichable, ou None si le type ne convient pas."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


def _is_item(field: FieldSchema, item: Any) -> bool:
    """Item du bon type : dict pour un group, scalaire pour un repeatable."""
    if field.type == "group":
        return isinstance(item, Mapping)
    return _scalar(item) is not None


def safe_url(value: str) -> Optional[str]:
    """URL utilisable dans un attribut href/src, ou None (schéma dangereux)."""
    candidate = value.strip()
    lowered = "".join(candidate.split()).lower()
    if lowered.startswith(_SAFE_URL_PREFIXES):
        return candidate
    if lowered.startswith(_UNSAFE_SCHEMES):
        return None
    if ":" in lowered.split("/", 1)[0]:
        # autre schéma explicite (ftp:, sms:...) : refusé
        return None
    return candidate


class FieldValues:
    """Accès aux valeurs d'un template à travers son schéma."""

    def __init__(
        self,
        schema: Mapping[str, FieldSchema],
        data: Optional[Mapping[str, Any]] = None,
        default_theme_id: Optional[str] = None,
    ):
        self.schema = schema
        self.data = data if isinstance(data, Mapping) else {}
        self.default_theme_id = default_theme_id

    def field(self, key: str) -> FieldSchema:
        try:
            return self.schema[key]
        except KeyError:
            raise SchemaConfigError(
                f"Champ non déclaré : {key!r}. Schéma : {list(self.schema)}"
            ) from None

    def default(self, key: str) -> Any:
        return field_default(self.field(key), self.default_theme_id)

    @staticmethod
    def escape(value: Any) -> str:
        """Échappe une valeur dérivée (ex : initiales calculées depuis un nom)."""
        return str(markupsafe.escape("" if value is None else value))

    # ── Scalaires ────────────────────────────────────────────────────────────

    def raw(self, key: str) -> Any:
        """Valeur courante non échappée (ou défaut). Listes pour group/repeatable."""
        field = self.field(key)
        value = self.data.get(key)
        if field.is_list:
            # Liste vide acceptée seulement si min == 0 ; liste sans aucun item
            # du bon type → défaut
            if isinstance(value, list):
                if not value and field.min == 0:
                    return value
                if any(_is_item(field, item) for item in value):
                    return value
            return self.default(key)
        if _is_blank(value) or _scalar(value) is None:
            return self.default(key)
        return _scalar(value)

    def has(self, key: str) -> bool:
        """Vrai si la valeur effective (courante ou défaut) est non vide."""
        value = self.raw(key)
        return bool(value) if isinstance(value, list) else not _is_blank(value)

    def text(self, key: str) -> str:
        value = self.raw(key)
        return str(markupsafe.escape("" if value is None else value))

    def url(self, key: str) -> str:
        """URL échappée pour un attribut ; schéma dangereux → défaut."""
        value = self.raw(key)
        url = safe_url(str(value or ""))
        if url is None:
            log.warning("URL refusée pour %s : %r", key, value)
            url = safe_url(str(self.default(key) or "")) or "#"
        return str(markupsafe.escape(url))

    def color(self, key: str) -> str:
        """Couleur hexadécimale validée, sinon le défaut déclaré."""
        value = self.raw(key)
        if is_hex_color(value):
            return value.strip()
        fallback = self.default(key)
        return fallback if is_hex_color(fallback) else "#000000"

    # ── Collections ──────────────────────────────────────────────────────────

    def strings(self, key: str) -> List[str]:
        """Items d'un repeatable, échappés ; items vides ou non scalaires ignorés."""
        out = []
        for item in self.raw(key):
            item = _scalar(item)
            if not _is_blank(item):
                out.append(str(markupsafe.escape(item)))
        return out

    def items(self, key: str) -> List[Dict[str, str]]:
        """
        Enregistrements d'un group, chaque sous-champ échappé selon son type
        (url / image passés par safe_url). Sous-champ manquant → sous-défaut.
        Items qui ne sont pas des dicts ignorés.
        """
        field = self.field(key)
        sub_fields = field.fields or {}
        records = []
        for item in self.raw(key):
            if not isinstance(item, Mapping):
                continue
            record = {}
            for sub_key, sub in sub_fields.items():
                value = _scalar(item.get(sub_key))
                if _is_blank(value):
                    value = _scalar(sub.default) or ""
                if sub.type in ("url", "image"):
                    value = safe_url(value) or ("" if not value else "#")
                record[sub_key] = str(markupsafe.escape(value))
            records.append(record)
        return records
