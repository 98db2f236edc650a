"""
Pricing Engine — rental quote for a modular stand kit.

Combines a Kit, the project area and the business configuration into a QuoteResult.
Pure math — no I/O, no logging, no rounding. Quantity × cost, area scaling,
amortization per event, overhead on direct costs, margin as a divisor, VAT last.

Input: Kit + ProjectInput + BusinessConfig
Output: QuoteResult (totals + per-component / per-category breakdown)
"""

import math
from dataclasses import asdict, dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class BusinessConfig:
    """Global pricing policy. One snapshot per calculation."""
    lifespan_years: float
    annual_usage_frequency: float
    breakage_rate: float
    overhead_rate: float
    margin_rate: float
    vat_rate: float


DEFAULT_CONFIG = BusinessConfig(
    lifespan_years=10,
    annual_usage_frequency=5,
    breakage_rate=0.02,
    overhead_rate=0.10,
    margin_rate=0.35,
    vat_rate=0.21,
)


@dataclass(frozen=True)
class Component:
    name: str
    unit_cost: float
    quantity: float
    cost_per_extra_m2: float = 0.0


@dataclass(frozen=True)
class AdditionalCostCategory:
    base_cost: float
    cost_per_extra_m2: float = 0.0


@dataclass(frozen=True)
class AdditionalCosts:
    graphics: AdditionalCostCategory
    logistics: AdditionalCostCategory
    installation: AdditionalCostCategory
    platform: Optional[AdditionalCostCategory] = None


@dataclass(frozen=True)
class Kit:
    """A complete priced package. `base_area_m2` is the area already covered by base costs."""
    id: str
    name: str
    description: str
    components: Tuple[Component, ...]
    additional_costs: AdditionalCosts
    base_area_m2: float = 0.0


@dataclass(frozen=True)
class ProjectInput:
    area_m2: float
    client_name: Optional[str] = None
    project_name: Optional[str] = None
    quote_date: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class ComponentBreakdown:
    name: str
    unit_cost: float
    quantity: float
    total_cost: float
    per_m2: float
    amortized_per_event: float
    replacement_per_event: float


@dataclass(frozen=True)
class AdditionalCostsBreakdown:
    graphics: float
    logistics: float
    installation: float
    platform: Optional[float]
    total: float


@dataclass(frozen=True)
class QuoteBreakdown:
    components: Tuple[ComponentBreakdown, ...]
    additional_costs: AdditionalCostsBreakdown


@dataclass(frozen=True)
class QuoteTotals:
    extra_area: float
    total_purchase_cost: float
    extra_area_purchase_cost: float
    annual_amortization: float
    amortization_per_use: float
    amortized_cost_per_event: float
    replacement_cost: float
    additional_costs_total: float
    direct_costs: float
    overhead: float
    ctp: float
    par: float
    par_with_vat: float
    cost_per_m2: float


@dataclass(frozen=True)
class QuoteResult:
    kit: Kit
    config: BusinessConfig
    project: ProjectInput
    totals: QuoteTotals
    breakdown: QuoteBreakdown = field(repr=False)


def _div(numerator: float, denominator: float) -> float:
    """Float division with IEEE-754 results (inf / nan) instead of ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _scaled_cost(base: float, cost_per_extra_m2: float, extra_area: float) -> float:
    return base + cost_per_extra_m2 * extra_area


def compute_quote(
    kit: Kit,
    project: ProjectInput,
    config: BusinessConfig = DEFAULT_CONFIG,
) -> QuoteResult:
    """
    Computes CTP (total project cost) and PAR (recommended rental price) for a kit.

    Never raises for out-of-range numbers: zero area, zero lifespan/frequency or
    margin >= 1 come back as inf / nan. Validate before calling.
    """
    area = project.area_m2
    extra_area = max(0.0, area - kit.base_area_m2)

    # --- Components: each one amortized from its own scaled cost ---
    component_rows = []
    total_purchase_cost = 0.0
    extra_area_purchase_cost = 0.0
    for comp in kit.components:
        extra_cost = comp.cost_per_extra_m2 * extra_area
        total_cost = comp.unit_cost * comp.quantity + extra_cost
        total_purchase_cost += total_cost
        extra_area_purchase_cost += extra_cost
        component_rows.append(ComponentBreakdown(
            name=comp.name,
            unit_cost=comp.unit_cost,
            quantity=comp.quantity,
            total_cost=total_cost,
            per_m2=_div(total_cost, area),
            amortized_per_event=_div(_div(total_cost, config.lifespan_years), config.annual_usage_frequency),
            replacement_per_event=_div(total_cost * config.breakage_rate, config.annual_usage_frequency),
        ))

    # --- Services: graphics, logistics, installation, platform if the kit has one ---
    extras = kit.additional_costs
    graphics = _scaled_cost(extras.graphics.base_cost, extras.graphics.cost_per_extra_m2, extra_area)
    logistics = _scaled_cost(extras.logistics.base_cost, extras.logistics.cost_per_extra_m2, extra_area)
    installation = _scaled_cost(extras.installation.base_cost, extras.installation.cost_per_extra_m2, extra_area)
    platform = None
    if extras.platform is not None:
        platform = _scaled_cost(extras.platform.base_cost, extras.platform.cost_per_extra_m2, extra_area)
    additional_costs_total = graphics + logistics + installation + (platform if platform is not None else 0.0)

    # --- Amortization ---
    annual_amortization = _div(total_purchase_cost, config.lifespan_years)
    amortization_per_use = _div(total_purchase_cost, config.lifespan_years * config.annual_usage_frequency)
    amortized_cost_per_event = _div(annual_amortization, config.annual_usage_frequency)
    replacement_cost = _div(total_purchase_cost * config.breakage_rate, config.annual_usage_frequency)

    # --- Overhead on direct costs only, then margin as a share of the final price ---
    direct_costs = amortized_cost_per_event + replacement_cost + additional_costs_total
    overhead = direct_costs * config.overhead_rate
    ctp = direct_costs + overhead
    par = _div(ctp, 1 - config.margin_rate)
    par_with_vat = par * (1 + config.vat_rate)
    cost_per_m2 = _div(par, area)

    return QuoteResult(
        kit=kit,
        config=config,
        project=project,
        totals=QuoteTotals(
            extra_area=extra_area,
            total_purchase_cost=total_purchase_cost,
            extra_area_purchase_cost=extra_area_purchase_cost,
            annual_amortization=annual_amortization,
            amortization_per_use=amortization_per_use,
            amortized_cost_per_event=amortized_cost_per_event,
            replacement_cost=replacement_cost,
            additional_costs_total=additional_costs_total,
            direct_costs=direct_costs,
            overhead=overhead,
            ctp=ctp,
            par=par,
            par_with_vat=par_with_vat,
            cost_per_m2=cost_per_m2,
        ),
        breakdown=QuoteBreakdown(
            components=tuple(component_rows),
            additional_costs=AdditionalCostsBreakdown(
                graphics=graphics,
                logistics=logistics,
                installation=installation,
                platform=platform,
                total=additional_costs_total,
            ),
        ),
    )


# --- Serialization (history storage, exporters) ---

def quote_to_dict(result: QuoteResult) -> dict:
    """Plain JSON-ready dict snapshot of a QuoteResult."""
    data = asdict(result)
    data["kit"]["components"] = list(data["kit"]["components"])
    data["breakdown"]["components"] = list(data["breakdown"]["components"])
    return data


def kit_from_dict(data: dict) -> Kit:
    extras = data.get("additional_costs", {})
    platform = extras.get("platform")
    return Kit(
        id=data["id"],
        name=data["name"],
        description=data.get("description", ""),
        base_area_m2=data.get("base_area_m2", 0.0),
        components=tuple(Component(**c) for c in data.get("components", [])),
        additional_costs=AdditionalCosts(
            graphics=AdditionalCostCategory(**extras["graphics"]),
            logistics=AdditionalCostCategory(**extras["logistics"]),
            installation=AdditionalCostCategory(**extras["installation"]),
            platform=AdditionalCostCategory(**platform) if platform is not None else None,
        ),
    )


def quote_from_dict(data: dict) -> QuoteResult:
    """Rebuilds a QuoteResult from quote_to_dict() output."""
    breakdown = data["breakdown"]
    return QuoteResult(
        kit=kit_from_dict(data["kit"]),
        config=BusinessConfig(**data["config"]),
        project=ProjectInput(**data["project"]),
        totals=QuoteTotals(**data["totals"]),
        breakdown=QuoteBreakdown(
            components=tuple(ComponentBreakdown(**c) for c in breakdown["components"]),
            additional_costs=AdditionalCostsBreakdown(**breakdown["additional_costs"]),
        ),
    )
