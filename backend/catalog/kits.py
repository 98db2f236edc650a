"""
Predefined stand kits. Purchase costs per unit, plus marginal rates per m²
beyond each kit's base area.
"""

from ..pricing_engine import AdditionalCostCategory, AdditionalCosts, Component, Kit


ESSENTIAL = Kit(
    id="essential",
    name="Essential",
    description="Basic package for small stands (up to 20 m²)",
    base_area_m2=20,
    components=(
        Component("Octanorm profiles 1m", unit_cost=45, quantity=20, cost_per_extra_m2=2.5),
        Component("Octanorm profiles 2m", unit_cost=85, quantity=15, cost_per_extra_m2=4.0),
        Component("Connectors", unit_cost=12, quantity=50, cost_per_extra_m2=0.8),
        Component("Panels 1x1m", unit_cost=120, quantity=10, cost_per_extra_m2=8.0),
        Component("Base plates", unit_cost=35, quantity=8, cost_per_extra_m2=2.0),
    ),
    additional_costs=AdditionalCosts(
        graphics=AdditionalCostCategory(800, 25),
        logistics=AdditionalCostCategory(300, 8),
        installation=AdditionalCostCategory(600, 15),
        platform=AdditionalCostCategory(400, 12),
    ),
)

IMPACT = Kit(
    id="impact",
    name="Impact",
    description="Mid-range package for medium stands (up to 50 m²)",
    base_area_m2=50,
    components=(
        Component("Octanorm profiles 1m", unit_cost=45, quantity=35, cost_per_extra_m2=2.2),
        Component("Octanorm profiles 2m", unit_cost=85, quantity=25, cost_per_extra_m2=3.5),
        Component("Octanorm profiles 3m", unit_cost=125, quantity=10, cost_per_extra_m2=2.8),
        Component("Connectors", unit_cost=12, quantity=80, cost_per_extra_m2=0.7),
        Component("Panels 1x1m", unit_cost=120, quantity=18, cost_per_extra_m2=7.0),
        Component("Panels 2x1m", unit_cost=220, quantity=8, cost_per_extra_m2=6.5),
        Component("Base plates", unit_cost=35, quantity=15, cost_per_extra_m2=1.8),
    ),
    additional_costs=AdditionalCosts(
        graphics=AdditionalCostCategory(1500, 22),
        logistics=AdditionalCostCategory(500, 7),
        installation=AdditionalCostCategory(1200, 12),
        platform=AdditionalCostCategory(800, 10),
    ),
)

PREMIUM = Kit(
    id="premium",
    name="Premium",
    description="Full package for large stands (over 50 m²)",
    base_area_m2=100,
    components=(
        Component("Octanorm profiles 1m", unit_cost=45, quantity=50, cost_per_extra_m2=2.0),
        Component("Octanorm profiles 2m", unit_cost=85, quantity=40, cost_per_extra_m2=3.2),
        Component("Octanorm profiles 3m", unit_cost=125, quantity=20, cost_per_extra_m2=2.5),
        Component("Octanorm profiles 4m", unit_cost=165, quantity=8, cost_per_extra_m2=1.8),
        Component("Connectors", unit_cost=12, quantity=120, cost_per_extra_m2=0.6),
        Component("Panels 1x1m", unit_cost=120, quantity=25, cost_per_extra_m2=6.5),
        Component("Panels 2x1m", unit_cost=220, quantity=15, cost_per_extra_m2=6.0),
        Component("Special panels", unit_cost=350, quantity=6, cost_per_extra_m2=4.0),
        Component("Base plates", unit_cost=35, quantity=25, cost_per_extra_m2=1.5),
        Component("Premium accessories", unit_cost=180, quantity=10, cost_per_extra_m2=2.2),
    ),
    additional_costs=AdditionalCosts(
        graphics=AdditionalCostCategory(2500, 20),
        logistics=AdditionalCostCategory(800, 6),
        installation=AdditionalCostCategory(2000, 10),
        platform=AdditionalCostCategory(1200, 8),
    ),
)

# Display order
PREDEFINED_KITS = (ESSENTIAL, IMPACT, PREMIUM)
