"""
Templates intégrés + registry.

L'import de ce package enregistre les templates intégrés ; un template tiers
s'ajoute avec register_template(TemplateDefinition(...)).
"""
from .base import (
    INDEX_PAGE,
    StructureFn,
    TemplateDefinition,
    TemplateSummary,
    get_template,
    list_templates,
    register_template,
    template_ids,
    unregister_template,
)
from . import business_card, landing_page, personal_profile, restaurant_menu, saas_landing, small_business

BUILTIN_TEMPLATES = (
    business_card.TEMPLATE,
    landing_page.TEMPLATE,
    personal_profile.TEMPLATE,
    restaurant_menu.TEMPLATE,
    saas_landing.TEMPLATE,
    small_business.TEMPLATE,
)

for _template in BUILTIN_TEMPLATES:
    register_template(_template)

__all__ = [
    "INDEX_PAGE", "StructureFn", "TemplateDefinition", "TemplateSummary",
    "get_template", "list_templates", "register_template", "template_ids",
    "unregister_template", "BUILTIN_TEMPLATES",
]
