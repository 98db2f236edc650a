import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import schemas
from ..catalog.registry import get_kit
from ..config import settings
from ..database import get_db
from ..pricing_engine import BusinessConfig, Kit, compute_quote, quote_to_dict
from ..repositories import QuoteHistoryRepository, quote_record_to_dict
from ..validator import validate_quote_inputs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quotes", tags=["quotes"])


def resolve_kit(kit_id: Optional[str], kit: Optional[schemas.KitIn]) -> Kit:
    """Inline kit wins over kit_id. 404 for unknown catalog ids, 400 when neither is given."""
    if kit is not None:
        return kit.to_domain()
    if not kit_id:
        raise HTTPException(status_code=400, detail="Provide kit_id or an inline kit")
    try:
        return get_kit(kit_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Kit not found")


def resolve_config(config: Optional[schemas.BusinessConfigIn]) -> BusinessConfig:
    if config is None:
        return settings.default_business_config()
    return config.to_domain()


def calculate_validated(request: schemas.QuoteRequest):
    """
    Validate, then price. Raises 422 with the validation report when the
    inputs would produce a meaningless result — the result is never returned then.
    """
    kit = resolve_kit(request.kit_id, request.kit)
    project = request.project.to_domain()
    config = resolve_config(request.config)

    report = validate_quote_inputs(kit, project, config)
    if not report.can_calculate:
        logger.warning(
            "Quote for kit %s blocked by %d validation error(s)", kit.id, len(report.errors)
        )
        raise HTTPException(status_code=422, detail=report.to_dict())
    return compute_quote(kit, project, config), report


@router.post("/calculate")
def calculate_quote(request: schemas.QuoteRequest):
    result, report = calculate_validated(request)
    return {
        "validation": report.to_dict(),
        "result": quote_to_dict(result),
    }


@router.post("/")
def save_quote(request: schemas.SaveQuoteRequest, db: Session = Depends(get_db)):
    result, report = calculate_validated(request)
    repo = QuoteHistoryRepository(db)
    quote_id = repo.save(result, title=request.title)
    data = quote_record_to_dict(repo.get(quote_id))
    data["validation"] = report.to_dict()
    return data


@router.get("/")
def list_quotes(skip: int = 0, limit: int = 50, q: Optional[str] = None, order_by: str = "date",
                db: Session = Depends(get_db)):
    """Quote history, newest first by default. `q` filters by title, client, project or kit name."""
    try:
        records = QuoteHistoryRepository(db).list(skip=skip, limit=limit, search=q, order_by=order_by)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [quote_record_to_dict(r, include_result=False) for r in records]


@router.delete("/")
def clear_quotes(db: Session = Depends(get_db)):
    removed = QuoteHistoryRepository(db).clear()
    return {"ok": True, "deleted": removed}


@router.get("/{quote_id}")
def get_quote(quote_id: int, db: Session = Depends(get_db)):
    record = QuoteHistoryRepository(db).get(quote_id)
    if not record:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote_record_to_dict(record)


@router.delete("/{quote_id}")
def delete_quote(quote_id: int, db: Session = Depends(get_db)):
    if not QuoteHistoryRepository(db).delete(quote_id):
        raise HTTPException(status_code=404, detail="Quote not found")
    return {"ok": True}
