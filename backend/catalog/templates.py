"""
Package templates — ready-made kits grouped by client category.

Each template wraps a Kit with marketing data (recommended use, feature list).
"""

from dataclasses import dataclass
from typing import Tuple

from ..pricing_engine import AdditionalCostCategory, AdditionalCosts, Component, Kit

TEMPLATE_CATEGORIES = ("corporate", "commercial", "startup", "institutional")

# Area used for the template browser's quick estimate
DEFAULT_ESTIMATE_AREA_M2 = 50.0


@dataclass(frozen=True)
class KitTemplate:
    id: str
    name: str
    description: str
    category: str
    recommended_use: str
    features: Tuple[str, ...]
    kit: Kit


KIT_TEMPLATES = (
    KitTemplate(
        id="corporate_premium",
        name="Corporate Premium",
        description="For large companies looking for maximum visual impact",
        category="corporate",
        recommended_use="International fairs, product launches, VIP events",
        features=(
            "Robust and elegant structure",
            "High quality graphics",
            "Integrated LED lighting",
            "Private meeting area",
            "Hidden storage",
        ),
        kit=Kit(
            id="corporate_premium",
            name="Corporate Premium",
            description="Premium package for corporate companies",
            base_area_m2=80,
            components=(
                Component("Octanorm profiles 1m Premium", unit_cost=55, quantity=60, cost_per_extra_m2=2.8),
                Component("Octanorm profiles 2m Premium", unit_cost=95, quantity=45, cost_per_extra_m2=3.8),
                Component("Octanorm profiles 3m Premium", unit_cost=135, quantity=25, cost_per_extra_m2=3.2),
                Component("Octanorm profiles 4m Premium", unit_cost=175, quantity=12, cost_per_extra_m2=2.5),
                Component("Premium connectors", unit_cost=18, quantity=150, cost_per_extra_m2=0.9),
                Component("Panels 1x1m Premium", unit_cost=140, quantity=30, cost_per_extra_m2=7.5),
                Component("Panels 2x1m Premium", unit_cost=260, quantity=20, cost_per_extra_m2=7.0),
                Component("Special panels Premium", unit_cost=420, quantity=8, cost_per_extra_m2=5.5),
                Component("Base plates Premium", unit_cost=45, quantity=30, cost_per_extra_m2=2.0),
                Component("LED lighting system", unit_cost=280, quantity=8, cost_per_extra_m2=3.5),
                Component("Corporate furniture", unit_cost=350, quantity=6, cost_per_extra_m2=4.0),
            ),
            additional_costs=AdditionalCosts(
                graphics=AdditionalCostCategory(3500, 35),
                logistics=AdditionalCostCategory(1200, 12),
                installation=AdditionalCostCategory(2800, 18),
                platform=AdditionalCostCategory(1800, 15),
            ),
        ),
    ),
    KitTemplate(
        id="commercial_impact",
        name="Commercial Impact",
        description="Balance between visual impact and budget",
        category="commercial",
        recommended_use="Trade fairs, sector exhibitions, showrooms",
        features=(
            "Attractive and functional design",
            "Medium-high quality graphics",
            "Optimized exhibition area",
            "Storage space",
            "Easy assembly and disassembly",
        ),
        kit=Kit(
            id="commercial_impact",
            name="Commercial Impact",
            description="Balanced package for commercial use",
            base_area_m2=45,
            components=(
                Component("Octanorm profiles 1m", unit_cost=48, quantity=40, cost_per_extra_m2=2.4),
                Component("Octanorm profiles 2m", unit_cost=88, quantity=30, cost_per_extra_m2=3.6),
                Component("Octanorm profiles 3m", unit_cost=128, quantity=15, cost_per_extra_m2=2.9),
                Component("Connectors", unit_cost=14, quantity=90, cost_per_extra_m2=0.75),
                Component("Panels 1x1m", unit_cost=125, quantity=22, cost_per_extra_m2=7.2),
                Component("Panels 2x1m", unit_cost=235, quantity=12, cost_per_extra_m2=6.8),
                Component("Base plates", unit_cost=38, quantity=18, cost_per_extra_m2=1.9),
                Component("Decorative elements", unit_cost=180, quantity=8, cost_per_extra_m2=2.5),
                Component("Basic furniture", unit_cost=220, quantity=4, cost_per_extra_m2=2.8),
            ),
            additional_costs=AdditionalCosts(
                graphics=AdditionalCostCategory(2200, 28),
                logistics=AdditionalCostCategory(700, 9),
                installation=AdditionalCostCategory(1600, 14),
                platform=AdditionalCostCategory(1000, 11),
            ),
        ),
    ),
    KitTemplate(
        id="startup_essential",
        name="Startup Essential",
        description="Economical solution without compromising quality",
        category="startup",
        recommended_use="Startups, small businesses, local events",
        features=(
            "Maximum use of space",
            "Optimized graphics",
            "Modular structure",
            "Easy transport",
            "Excellent value for money",
        ),
        kit=Kit(
            id="startup_essential",
            name="Startup Essential",
            description="Package optimized for startups and small businesses",
            base_area_m2=15,
            components=(
                Component("Octanorm profiles 1m", unit_cost=42, quantity=18, cost_per_extra_m2=2.2),
                Component("Octanorm profiles 2m", unit_cost=82, quantity=12, cost_per_extra_m2=3.4),
                Component("Connectors", unit_cost=10, quantity=45, cost_per_extra_m2=0.7),
                Component("Panels 1x1m", unit_cost=115, quantity=8, cost_per_extra_m2=6.8),
                Component("Base plates", unit_cost=32, quantity=6, cost_per_extra_m2=1.8),
                Component("Basic accessories kit", unit_cost=150, quantity=2, cost_per_extra_m2=1.5),
            ),
            additional_costs=AdditionalCosts(
                graphics=AdditionalCostCategory(600, 20),
                logistics=AdditionalCostCategory(250, 6),
                installation=AdditionalCostCategory(400, 10),
                platform=AdditionalCostCategory(300, 8),
            ),
        ),
    ),
    KitTemplate(
        id="institutional_formal",
        name="Institutional Formal",
        description="Sober, professional design for institutions",
        category="institutional",
        recommended_use="Public bodies, universities, NGOs, institutional events",
        features=(
            "Sober and elegant design",
            "Highly durable materials",
            "Large information areas",
            "Public service desk",
            "Meets official regulations",
        ),
        kit=Kit(
            id="institutional_formal",
            name="Institutional Formal",
            description="Package designed for institutions and official bodies",
            base_area_m2=60,
            components=(
                Component("Octanorm profiles 1m Institutional", unit_cost=50, quantity=45, cost_per_extra_m2=2.5),
                Component("Octanorm profiles 2m Institutional", unit_cost=90, quantity=35, cost_per_extra_m2=3.5),
                Component("Octanorm profiles 3m Institutional", unit_cost=130, quantity=18, cost_per_extra_m2=3.0),
                Component("Institutional connectors", unit_cost=15, quantity=110, cost_per_extra_m2=0.8),
                Component("Information panels 1x1m", unit_cost=130, quantity=25, cost_per_extra_m2=7.0),
                Component("Information panels 2x1m", unit_cost=245, quantity=15, cost_per_extra_m2=6.5),
                Component("Base plates Institutional", unit_cost=40, quantity=22, cost_per_extra_m2=1.9),
                Component("Institutional furniture", unit_cost=280, quantity=5, cost_per_extra_m2=3.2),
                Component("Information system", unit_cost=320, quantity=3, cost_per_extra_m2=2.8),
            ),
            additional_costs=AdditionalCosts(
                graphics=AdditionalCostCategory(2800, 30),
                logistics=AdditionalCostCategory(900, 10),
                installation=AdditionalCostCategory(2200, 16),
                platform=AdditionalCostCategory(1400, 12),
            ),
        ),
    ),
)


def template_estimate(kit: Kit, area_m2: float = DEFAULT_ESTIMATE_AREA_M2) -> float:
    """
    Quick purchase + services total for the template browser.
    Not a quote: no amortization, overhead, margin or VAT.
    """
    extra_area = max(0.0, area_m2 - kit.base_area_m2)
    components = sum(
        c.unit_cost * c.quantity + c.cost_per_extra_m2 * extra_area for c in kit.components
    )
    extras = kit.additional_costs
    categories = [extras.graphics, extras.logistics, extras.installation]
    if extras.platform is not None:
        categories.append(extras.platform)
    services = sum(k.base_cost + k.cost_per_extra_m2 * extra_area for k in categories)
    return components + services
