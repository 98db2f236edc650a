from fastapi import APIRouter, HTTPException

from .. import schemas
from ..catalog.registry import get_kit, list_kits
from ..comparator import compare_kits
from ..pricing_engine import quote_to_dict
from ..validator import validate_quote_inputs
from .quotes import resolve_config

router = APIRouter(prefix="/compare", tags=["compare"])


@router.post("/")
def compare(request: schemas.CompareRequest):
    """
    Prices each kit for the same project and config, cheapest first.
    Defaults to all predefined kits.
    """
    if request.kit_ids is None:
        kits = list_kits()
    else:
        try:
            kits = [get_kit(kit_id) for kit_id in request.kit_ids]
        except ValueError as e:
            raise HTTPException(status_code=404, detail=str(e))

    project = request.project.to_domain()
    config = resolve_config(request.config)

    blocked = {}
    for kit in kits:
        report = validate_quote_inputs(kit, project, config)
        if not report.can_calculate:
            blocked[kit.id] = report.to_dict()
    if blocked:
        raise HTTPException(status_code=422, detail=blocked)

    try:
        comparison = compare_kits(kits, project, config, rank_by=request.rank_by)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    best = comparison.best
    return {
        "rank_by": comparison.rank_by,
        "best_kit_id": best.kit_id if best else None,
        "entries": [
            {
                "rank": i + 1,
                "kit_id": entry.kit_id,
                "kit_name": entry.kit_name,
                "extra_area": entry.extra_area,
                "par": entry.result.totals.par,
                "cost_per_m2": entry.result.totals.cost_per_m2,
                "difference_to_best": comparison.price_difference(entry),
                "result": quote_to_dict(entry.result),
            }
            for i, entry in enumerate(comparison.entries)
        ],
    }
