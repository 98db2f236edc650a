"""
Quote Input Validator — checks kit, project and configuration before pricing.

The pricing engine never guards its inputs: zero area, zero lifespan or a
margin of 100% come back as inf / nan, and so do NaN inputs or figures that
overflow once scaled by area. Callers run this first and suppress
the result whenever the report has errors.

Levels:
  error   — the quote must not be shown
  warning — unusual but computable
  info    — missing optional metadata
"""

import math
from dataclasses import dataclass, field, fields
from typing import List, Optional

from .pricing_engine import BusinessConfig, Kit, ProjectInput, compute_quote

ERROR = "error"
WARNING = "warning"
INFO = "info"


@dataclass
class ValidationIssue:
    level: str
    message: str
    field: Optional[str] = None


@dataclass
class ValidationReport:
    issues: List[ValidationIssue] = field(default_factory=list)

    def add(self, level: str, message: str, field_name: Optional[str] = None):
        self.issues.append(ValidationIssue(level, message, field_name))

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == WARNING]

    @property
    def infos(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.level == INFO]

    @property
    def can_calculate(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "can_calculate": self.can_calculate,
            "error_count": len(self.errors),
            "warning_count": len(self.warnings),
            "info_count": len(self.infos),
            "issues": [
                {"level": i.level, "message": i.message, "field": i.field}
                for i in self.issues
            ],
        }


class QuoteValidator:
    """Rule set for project, kit and business configuration."""

    MIN_TYPICAL_AREA_M2 = 5
    MAX_TYPICAL_AREA_M2 = 500
    MIN_TYPICAL_LIFESPAN = 3
    MAX_TYPICAL_LIFESPAN = 20
    MAX_TYPICAL_FREQUENCY = 50
    MAX_TYPICAL_BREAKAGE = 0.5
    MIN_TYPICAL_MARGIN = 0.1
    MAX_TYPICAL_MARGIN = 0.8

    def validate(self, kit: Optional[Kit], project: ProjectInput,
                 config: BusinessConfig) -> ValidationReport:
        report = ValidationReport()
        # Range rules compare numbers; NaN and inf must be rejected before them
        self._check_finite(kit, project, config, report)
        if report.errors:
            return report
        self._check_project(project, report)
        self._check_kit(kit, project, report)
        self._check_config(config, report)
        if report.can_calculate:
            self._check_totals(kit, project, config, report)
        return report

    def _check_finite(self, kit: Optional[Kit], project: ProjectInput,
                      config: BusinessConfig, report: ValidationReport):
        if not math.isfinite(project.area_m2):
            report.add(ERROR, "Area must be a finite number", "area_m2")

        if kit is not None:
            if not math.isfinite(kit.base_area_m2):
                report.add(ERROR, "Kit base area must be a finite number", "base_area_m2")
            invalid = [
                c for c in kit.components
                if not all(math.isfinite(v) for v in (c.unit_cost, c.quantity, c.cost_per_extra_m2))
            ]
            if invalid:
                report.add(ERROR, f"{len(invalid)} component(s) have a non-finite cost or quantity", "components")
            extras = kit.additional_costs
            categories = [extras.graphics, extras.logistics, extras.installation]
            if extras.platform is not None:
                categories.append(extras.platform)
            if not all(math.isfinite(k.base_cost) and math.isfinite(k.cost_per_extra_m2) for k in categories):
                report.add(ERROR, "Additional costs must be finite numbers", "additional_costs")

        for f in fields(config):
            if not math.isfinite(getattr(config, f.name)):
                report.add(ERROR, f"{f.name} must be a finite number", f.name)

    def _check_totals(self, kit: Kit, project: ProjectInput, config: BusinessConfig,
                      report: ValidationReport):
        """Finite inputs can still overflow once scaled by area."""
        totals = compute_quote(kit, project, config).totals
        overflowed = [f.name for f in fields(totals) if not math.isfinite(getattr(totals, f.name))]
        if overflowed:
            report.add(ERROR, f"Figures too large to price: {', '.join(overflowed)}", "totals")

    def _check_project(self, project: ProjectInput, report: ValidationReport):
        area = project.area_m2
        if area <= 0:
            report.add(ERROR, "Area must be greater than 0 m²", "area_m2")
        elif area < self.MIN_TYPICAL_AREA_M2:
            report.add(WARNING, f"Very small stand (under {self.MIN_TYPICAL_AREA_M2} m²). Check that it is correct.", "area_m2")
        elif area > self.MAX_TYPICAL_AREA_M2:
            report.add(WARNING, f"Very large stand (over {self.MAX_TYPICAL_AREA_M2} m²). Check that it is correct.", "area_m2")

        if not (project.client_name or "").strip():
            report.add(INFO, "Consider adding the client name to the quote", "client_name")
        if not (project.project_name or "").strip():
            report.add(INFO, "Consider adding a project name to identify the quote", "project_name")

    def _check_kit(self, kit: Optional[Kit], project: ProjectInput, report: ValidationReport):
        if kit is None:
            report.add(ERROR, "A kit must be selected", "kit")
            return

        if not kit.components:
            report.add(ERROR, "The kit must have at least one component", "components")

        invalid = [c for c in kit.components if c.unit_cost <= 0 or c.quantity <= 0]
        if invalid:
            report.add(ERROR, f"{len(invalid)} component(s) have an invalid cost or quantity", "components")

        # Marginal rates only matter once the quote exceeds the base area
        if kit.base_area_m2 and project.area_m2 > kit.base_area_m2:
            extra_area = project.area_m2 - kit.base_area_m2
            unscaled = [c for c in kit.components if c.cost_per_extra_m2 <= 0]
            if unscaled:
                report.add(
                    WARNING,
                    f"{len(unscaled)} component(s) have no cost per m² for the "
                    f"{extra_area:.1f} m² of extra area",
                    "cost_per_extra_m2",
                )

        extras = kit.additional_costs
        if (extras.graphics.base_cost <= 0 and extras.logistics.base_cost <= 0
                and extras.installation.base_cost <= 0):
            report.add(WARNING, "No additional costs configured (graphics, logistics, installation)", "additional_costs")

    def _check_config(self, config: BusinessConfig, report: ValidationReport):
        if config.lifespan_years <= 0:
            report.add(ERROR, "Lifespan must be greater than 0 years", "lifespan_years")
        elif config.lifespan_years < self.MIN_TYPICAL_LIFESPAN:
            report.add(
                WARNING,
                f"Very short lifespan (under {self.MIN_TYPICAL_LIFESPAN} years). "
                f"Amortization costs will rise significantly.",
                "lifespan_years",
            )
        elif config.lifespan_years > self.MAX_TYPICAL_LIFESPAN:
            report.add(
                WARNING,
                f"Very long lifespan (over {self.MAX_TYPICAL_LIFESPAN} years). Check that it is realistic.",
                "lifespan_years",
            )

        if config.annual_usage_frequency <= 0:
            report.add(ERROR, "Usage frequency must be greater than 0 events/year", "annual_usage_frequency")
        elif config.annual_usage_frequency > self.MAX_TYPICAL_FREQUENCY:
            report.add(
                WARNING,
                f"Very high usage frequency (over {self.MAX_TYPICAL_FREQUENCY} events/year). Check that it is realistic.",
                "annual_usage_frequency",
            )

        if config.breakage_rate < 0 or config.breakage_rate > self.MAX_TYPICAL_BREAKAGE:
            report.add(WARNING, "Breakage rate outside the typical range (0-50%). Check that it is correct.", "breakage_rate")

        if config.overhead_rate < 0:
            report.add(ERROR, "Overhead rate cannot be negative", "overhead_rate")

        if config.margin_rate >= 1:
            report.add(ERROR, "Margin must be below 100% of the price", "margin_rate")
        elif config.margin_rate < 0:
            report.add(ERROR, "Margin cannot be negative", "margin_rate")
        elif config.margin_rate < self.MIN_TYPICAL_MARGIN or config.margin_rate > self.MAX_TYPICAL_MARGIN:
            report.add(WARNING, "Margin outside the typical range (10-80%). Check that it is correct.", "margin_rate")

        if config.vat_rate < 0:
            report.add(ERROR, "VAT rate cannot be negative", "vat_rate")


def validate_quote_inputs(kit: Optional[Kit], project: ProjectInput,
                          config: BusinessConfig) -> ValidationReport:
    return QuoteValidator().validate(kit, project, config)
