"""
Erreurs du moteur.

Deux familles seulement :
- ConfigurationError : erreur de programmation / de schéma (template inconnu,
  thème incomplet, group imbriqué...). Levée immédiatement, jamais masquée.
- EditPathError : chemin d'édition mal formé ("items[x].", "a.b"...).

Les données utilisateur incomplètes ou corrompues ne lèvent jamais : chaque
lecture retombe sur la valeur par défaut déclarée.
"""


class ConfigurationError(ValueError):
    """Configuration invalide (template, thème ou schéma de champs)."""


class UnknownTemplateError(ConfigurationError):
    """Template non enregistré."""

    def __init__(self, template_id: str, known: list[str] | None = None):
        self.template_id = template_id
        self.known = known or []
        msg = f"Template inconnu : {template_id!r}"
        if self.known:
            msg += f". Registry : {self.known}"
        super().__init__(msg)


class ThemeConfigError(ConfigurationError):
    """Thème incomplet ou mal formé (bucket de tokens manquant, valeur vide...)."""


class SchemaConfigError(ConfigurationError):
    """Schéma de champs invalide (clé pointée, group dans un group...)."""


class TemplateRegistrationError(ConfigurationError):
    """Enregistrement de template invalide ou en double."""


class EditPathError(ValueError):
    """Chemin d'édition non reconnu."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__(f"Chemin d'édition invalide : {path!r}" + (f" ({reason})" if reason else ""))
