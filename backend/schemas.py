from pydantic import BaseModel, Field
from typing import Optional, List

from .pricing_engine import (
    AdditionalCostCategory,
    AdditionalCosts,
    BusinessConfig,
    Component,
    Kit,
    ProjectInput,
)


class BusinessConfigIn(BaseModel):
    lifespan_years: float
    annual_usage_frequency: float
    breakage_rate: float
    overhead_rate: float
    margin_rate: float
    vat_rate: float

    def to_domain(self) -> BusinessConfig:
        return BusinessConfig(**self.model_dump())


class ComponentIn(BaseModel):
    name: str
    unit_cost: float
    quantity: float
    cost_per_extra_m2: float = 0.0

    def to_domain(self) -> Component:
        return Component(**self.model_dump())


class AdditionalCostCategoryIn(BaseModel):
    base_cost: float = 0.0
    cost_per_extra_m2: float = 0.0

    def to_domain(self) -> AdditionalCostCategory:
        return AdditionalCostCategory(**self.model_dump())


class AdditionalCostsIn(BaseModel):
    graphics: AdditionalCostCategoryIn = Field(default_factory=AdditionalCostCategoryIn)
    logistics: AdditionalCostCategoryIn = Field(default_factory=AdditionalCostCategoryIn)
    installation: AdditionalCostCategoryIn = Field(default_factory=AdditionalCostCategoryIn)
    platform: Optional[AdditionalCostCategoryIn] = None

    def to_domain(self) -> AdditionalCosts:
        return AdditionalCosts(
            graphics=self.graphics.to_domain(),
            logistics=self.logistics.to_domain(),
            installation=self.installation.to_domain(),
            platform=self.platform.to_domain() if self.platform is not None else None,
        )


class KitIn(BaseModel):
    id: str = "custom"
    name: str = "Custom Package"
    description: str = ""
    base_area_m2: float = 0.0
    components: List[ComponentIn] = []
    additional_costs: AdditionalCostsIn = Field(default_factory=AdditionalCostsIn)

    def to_domain(self) -> Kit:
        return Kit(
            id=self.id,
            name=self.name,
            description=self.description,
            base_area_m2=self.base_area_m2,
            components=tuple(c.to_domain() for c in self.components),
            additional_costs=self.additional_costs.to_domain(),
        )


class ProjectIn(BaseModel):
    area_m2: float
    client_name: Optional[str] = None
    project_name: Optional[str] = None
    quote_date: Optional[str] = None
    notes: Optional[str] = None

    def to_domain(self) -> ProjectInput:
        return ProjectInput(**self.model_dump())


class QuoteRequest(BaseModel):
    """Either kit_id (catalog) or an inline kit. config falls back to the server defaults."""
    kit_id: Optional[str] = None
    kit: Optional[KitIn] = None
    project: ProjectIn
    config: Optional[BusinessConfigIn] = None


class SaveQuoteRequest(QuoteRequest):
    title: Optional[str] = None


class CompareRequest(BaseModel):
    kit_ids: Optional[List[str]] = None
    project: ProjectIn
    config: Optional[BusinessConfigIn] = None
    rank_by: str = "par"


class ConfigurationCreate(BaseModel):
    name: str
    description: Optional[str] = None
    config: BusinessConfigIn
