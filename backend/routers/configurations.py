from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import schemas
from ..config import settings
from ..database import get_db
from ..repositories import ConfigurationRepository, config_record_to_dict

router = APIRouter(prefix="/configurations", tags=["configurations"])


@router.get("/default")
def get_default_configuration():
    return asdict(settings.default_business_config())


@router.get("/")
def list_configurations(db: Session = Depends(get_db)):
    return ConfigurationRepository(db).export_all()


@router.post("/")
def create_configuration(request: schemas.ConfigurationCreate, db: Session = Depends(get_db)):
    repo = ConfigurationRepository(db)
    try:
        config_id = repo.save(request.name, request.config.to_domain(), request.description)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return config_record_to_dict(repo.get(config_id))


@router.get("/export")
def export_configurations(db: Session = Depends(get_db)):
    return ConfigurationRepository(db).export_all()


@router.post("/import")
def import_configurations(records: List[dict], db: Session = Depends(get_db)):
    imported = ConfigurationRepository(db).import_many(records)
    return {"ok": True, "imported": imported}


@router.get("/{config_id}")
def get_configuration(config_id: int, db: Session = Depends(get_db)):
    record = ConfigurationRepository(db).get(config_id)
    if not record:
        raise HTTPException(status_code=404, detail="Configuration not found")
    return config_record_to_dict(record)


@router.delete("/{config_id}")
def delete_configuration(config_id: int, db: Session = Depends(get_db)):
    if not ConfigurationRepository(db).delete(config_id):
        raise HTTPException(status_code=404, detail="Configuration not found")
    return {"ok": True}
