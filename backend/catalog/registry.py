"""
Kit registry — maps kit ids to predefined kits and templates.
"""

from typing import Optional

from ..pricing_engine import Kit
from .kits import PREDEFINED_KITS
from .templates import KIT_TEMPLATES, TEMPLATE_CATEGORIES, KitTemplate

KIT_REGISTRY: dict[str, Kit] = {kit.id: kit for kit in PREDEFINED_KITS}
TEMPLATE_REGISTRY: dict[str, KitTemplate] = {t.id: t for t in KIT_TEMPLATES}


def get_kit(kit_id: str) -> Kit:
    """Returns a predefined kit or a template's kit by id, or raises ValueError."""
    if kit_id in KIT_REGISTRY:
        return KIT_REGISTRY[kit_id]
    if kit_id in TEMPLATE_REGISTRY:
        return TEMPLATE_REGISTRY[kit_id].kit
    raise ValueError(
        f"Unknown kit: {kit_id}. "
        f"Available: {list(KIT_REGISTRY.keys()) + list(TEMPLATE_REGISTRY.keys())}"
    )


def has_kit(kit_id: str) -> bool:
    return kit_id in KIT_REGISTRY or kit_id in TEMPLATE_REGISTRY


def list_kits() -> list[Kit]:
    """Predefined kits in display order."""
    return list(PREDEFINED_KITS)


def get_template(template_id: str) -> KitTemplate:
    if template_id not in TEMPLATE_REGISTRY:
        raise ValueError(
            f"Unknown template: {template_id}. "
            f"Available: {list(TEMPLATE_REGISTRY.keys())}"
        )
    return TEMPLATE_REGISTRY[template_id]


def list_templates(category: Optional[str] = None) -> list[KitTemplate]:
    """All templates, or only those of one category."""
    if category is None:
        return list(KIT_TEMPLATES)
    if category not in TEMPLATE_CATEGORIES:
        raise ValueError(
            f"Unknown template category: {category}. Available: {list(TEMPLATE_CATEGORIES)}"
        )
    return [t for t in KIT_TEMPLATES if t.category == category]
