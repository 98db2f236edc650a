"""
Custom kit builder — accumulates user edits and produces an immutable Kit.

No validation here; run the validator before quoting.
"""

from dataclasses import replace
from typing import Optional

from ..pricing_engine import AdditionalCostCategory, AdditionalCosts, Component, Kit

ADDITIONAL_COST_CATEGORIES = ("graphics", "logistics", "installation", "platform")


class KitBuilder:

    def __init__(self, kit_id: str = "custom", name: str = "Custom Package",
                 description: str = "Custom component configuration"):
        self.kit_id = kit_id
        self.name = name
        self.description = description
        self.base_area_m2 = 0.0
        self.components: list[Component] = []
        self.additional_costs: dict[str, Optional[AdditionalCostCategory]] = {
            "graphics": AdditionalCostCategory(0.0),
            "logistics": AdditionalCostCategory(0.0),
            "installation": AdditionalCostCategory(0.0),
            "platform": None,
        }

    @classmethod
    def blank(cls) -> "KitBuilder":
        """Starting point for a hand-built package: one empty component, every service at zero."""
        builder = cls()
        builder.add_component("Component 1", 0.0, 0)
        builder.set_additional_cost("platform", 0.0)
        return builder

    @classmethod
    def from_kit(cls, kit: Kit) -> "KitBuilder":
        """Start editing from an existing kit (e.g. a template)."""
        builder = cls(kit.id, kit.name, kit.description)
        builder.base_area_m2 = kit.base_area_m2
        builder.components = list(kit.components)
        extras = kit.additional_costs
        builder.additional_costs = {
            "graphics": extras.graphics,
            "logistics": extras.logistics,
            "installation": extras.installation,
            "platform": extras.platform,
        }
        return builder

    def set_details(self, kit_id: Optional[str] = None, name: Optional[str] = None,
                    description: Optional[str] = None) -> "KitBuilder":
        if kit_id is not None:
            self.kit_id = kit_id
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        return self

    def set_base_area(self, base_area_m2: float) -> "KitBuilder":
        self.base_area_m2 = base_area_m2
        return self

    def add_component(self, name: str, unit_cost: float, quantity: float,
                      cost_per_extra_m2: float = 0.0) -> "KitBuilder":
        self.components.append(Component(name, unit_cost, quantity, cost_per_extra_m2))
        return self

    def update_component(self, index: int, **fields) -> "KitBuilder":
        """Replace fields of the component at `index` (name, unit_cost, quantity, cost_per_extra_m2)."""
        self.components[index] = replace(self.components[index], **fields)
        return self

    def remove_component(self, index: int) -> "KitBuilder":
        del self.components[index]
        return self

    def set_additional_cost(self, category: str, base_cost: float,
                            cost_per_extra_m2: float = 0.0) -> "KitBuilder":
        if category not in ADDITIONAL_COST_CATEGORIES:
            raise ValueError(
                f"Unknown cost category: {category}. Available: {list(ADDITIONAL_COST_CATEGORIES)}"
            )
        self.additional_costs[category] = AdditionalCostCategory(base_cost, cost_per_extra_m2)
        return self

    def remove_platform(self) -> "KitBuilder":
        self.additional_costs["platform"] = None
        return self

    def build(self) -> Kit:
        return Kit(
            id=self.kit_id,
            name=self.name,
            description=self.description,
            base_area_m2=self.base_area_m2,
            components=tuple(self.components),
            additional_costs=AdditionalCosts(
                graphics=self.additional_costs["graphics"],
                logistics=self.additional_costs["logistics"],
                installation=self.additional_costs["installation"],
                platform=self.additional_costs["platform"],
            ),
        )
