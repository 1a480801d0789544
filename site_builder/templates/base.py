"""
Contrat des templates + registry.

Un template = une valeur TemplateDefinition :
  - fields    : schéma des champs personnalisables
  - structure : (values, theme, color_mode) → fragment HTML du <body>
  - css       : CSS propre au template (classes utilisées par `structure`)
  - pages     : pages supplémentaires d'un template multi-page
                (nom de fichier → fonction de structure)

Règles que chaque structure respecte :
  - lecture uniquement via FieldValues (jamais data["x"])
  - variables CSS uniquement via Token (core/tokens.py)
  - tout texte utilisateur échappé (FieldValues.text / items / strings / url)
  - couleurs inline uniquement dérivées de l'accent (core/colors.py)

Ajouter un template = un module + un appel à register_template().
"""
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.errors import TemplateRegistrationError, UnknownTemplateError
from ..core.schemas import Theme
from ..fields.schema import FieldSchema, validate_schema
from ..fields.values import FieldValues
from ..themes.registry import has_theme

log = logging.getLogger(__name__)

StructureFn = Callable[[FieldValues, Theme, str], str]

INDEX_PAGE = "index.html"


class TemplateDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(..., pattern=r"^[a-z0-9][a-z0-9-]*$")
    name: str
    description: str = ""
    category: str = "general"
    default_theme: str = "minimal"
    fields: Dict[str, FieldSchema]
    structure: Callable[..., str]
    css: str = ""
    pages: Dict[str, Callable[..., str]] = Field(default_factory=dict)
    title_field: Optional[str] = None

    @field_validator("pages")
    @classmethod
    def _page_names(cls, v: Dict[str, Callable]) -> Dict[str, Callable]:
        for filename in v:
            if not filename.endswith(".html") or "/" in filename or filename == INDEX_PAGE:
                raise ValueError(f"nom de page invalide : {filename!r}")
        return v

    @property
    def is_multi_page(self) -> bool:
        return bool(self.pages)

    @property
    def page_names(self) -> list[str]:
        return [INDEX_PAGE, *self.pages]


class TemplateSummary(BaseModel):
    id: str
    name: str
    description: str
    category: str
    default_theme: str
    pages: list[str]


_REGISTRY: Dict[str, TemplateDefinition] = {}


def register_template(
    definition: TemplateDefinition | Mapping[str, Any],
    replace: bool = False,
) -> TemplateDefinition:
    """
    Enregistre un template. Vérifie le schéma (group imbriqué, select sans
    options...), le thème par défaut et le champ titre.

    Raises:
        SchemaConfigError: schéma de champs invalide
        TemplateRegistrationError: id en double, thème par défaut inconnu...
    """
    if not isinstance(definition, TemplateDefinition):
        try:
            definition = TemplateDefinition.model_validate(dict(definition))
        except ValidationError as e:
            raise TemplateRegistrationError(f"Template invalide : {e.errors()[0]['msg']}") from e

    validate_schema(definition.fields, where=definition.id)

    if definition.id in _REGISTRY and not replace:
        raise TemplateRegistrationError(f"Template déjà enregistré : {definition.id!r}")
    if not has_theme(definition.default_theme):
        raise TemplateRegistrationError(
            f"{definition.id} : thème par défaut inconnu {definition.default_theme!r}"
        )
    if definition.title_field and definition.title_field not in definition.fields:
        raise TemplateRegistrationError(
            f"{definition.id} : title_field {definition.title_field!r} absent du schéma"
        )

    _REGISTRY[definition.id] = definition
    log.debug("Template enregistré : %s (%d champs)", definition.id, len(definition.fields))
    return definition


def unregister_template(template_id: str) -> None:
    _REGISTRY.pop(template_id, None)


def get_template(template_id: str) -> TemplateDefinition:
    try:
        return _REGISTRY[template_id]
    except (KeyError, TypeError):
        raise UnknownTemplateError(str(template_id), list(_REGISTRY)) from None


def template_ids() -> list[str]:
    return list(_REGISTRY)


def list_templates() -> list[TemplateSummary]:
    return [
        TemplateSummary(
            id=t.id,
            name=t.name,
            description=t.description,
            category=t.category,
            default_theme=t.default_theme,
            pages=t.page_names,
        )
        for t in _REGISTRY.values()
    ]
