"""
Kit Comparator — prices several kits for the same project and ranks them.

Runs the pricing engine once per candidate with a shared project and config.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .pricing_engine import BusinessConfig, Kit, ProjectInput, QuoteResult, compute_quote

RANK_KEYS = ("par", "cost_per_m2")


@dataclass
class ComparisonEntry:
    kit_id: str
    kit_name: str
    extra_area: float
    result: QuoteResult


@dataclass
class Comparison:
    rank_by: str
    entries: List[ComparisonEntry] = field(default_factory=list)

    @property
    def best(self) -> Optional[ComparisonEntry]:
        """Cheapest option by the ranking key, None when nothing was compared."""
        return self.entries[0] if self.entries else None

    def price_difference(self, entry: ComparisonEntry) -> float:
        """PAR above the best option (0 for the best itself)."""
        return entry.result.totals.par - self.best.result.totals.par


def compare_kits(
    kits: Sequence[Kit],
    project: ProjectInput,
    config: BusinessConfig,
    rank_by: str = "par",
) -> Comparison:
    """
    Returns entries sorted ascending by totals.par or totals.cost_per_m2.
    Ties keep the order the kits were given in.
    """
    if rank_by not in RANK_KEYS:
        raise ValueError(f"rank_by must be one of {list(RANK_KEYS)}, got {rank_by}")

    entries = []
    for kit in kits:
        result = compute_quote(kit, project, config)
        entries.append(ComparisonEntry(
            kit_id=kit.id,
            kit_name=kit.name,
            extra_area=result.totals.extra_area,
            result=result,
        ))

    entries.sort(key=lambda e: getattr(e.result.totals, rank_by))
    return Comparison(rank_by=rank_by, entries=entries)
