"""
Document downloads for saved quotes.

GET /api/quotes/{quote_id}/pdf  — client-facing PDF
GET /api/quotes/{quote_id}/xlsx — spreadsheet with full breakdown

Both render the stored snapshot; nothing is recalculated.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from .. import models
from ..config import settings
from ..database import get_db
from ..pdf_generator import generate_quote_pdf
from ..repositories import QuoteHistoryRepository
from ..spreadsheet_export import generate_quote_workbook

router = APIRouter(prefix="/quotes", tags=["exports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _get_saved_quote(quote_id: int, db: Session) -> models.SavedQuote:
    record = QuoteHistoryRepository(db).get(quote_id)
    if not record:
        raise HTTPException(status_code=404, detail="Quote not found")
    return record


def _filename(record: models.SavedQuote, extension: str) -> str:
    return f"quote_{record.kit_id}_{record.id}.{extension}"


@router.get("/{quote_id}/pdf")
def download_pdf(quote_id: int, db: Session = Depends(get_db)):
    record = _get_saved_quote(quote_id, db)
    company = {
        "name": settings.COMPANY_NAME,
        "email": settings.COMPANY_EMAIL,
        "phone": settings.COMPANY_PHONE,
    }
    created = record.created_at.isoformat() if record.created_at else None

    # Convert bytearray to bytes for Response compatibility
    pdf_bytes = bytes(generate_quote_pdf(
        record.result_json,
        company,
        quote_number=str(record.id),
        created_at=created,
        valid_days=settings.QUOTE_VALID_DAYS,
    ))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{_filename(record, "pdf")}"'},
    )


@router.get("/{quote_id}/xlsx")
def download_xlsx(quote_id: int, db: Session = Depends(get_db)):
    record = _get_saved_quote(quote_id, db)
    return Response(
        content=generate_quote_workbook(record.result_json),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{_filename(record, "xlsx")}"'},
    )
