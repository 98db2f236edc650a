"""
Persistence for quote history and saved business configurations.

Injected into the HTTP layer with a SQLAlchemy session. The pricing engine
never touches storage; these classes only store and return its snapshots.
"""

import logging
import math
from dataclasses import asdict, fields
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from . import models
from .pricing_engine import BusinessConfig, QuoteResult, quote_to_dict

logger = logging.getLogger(__name__)

CONFIG_FIELDS = tuple(f.name for f in fields(BusinessConfig))


def default_quote_title(result: QuoteResult) -> str:
    client = result.project.client_name or "No client"
    return f"Quote {result.kit.name} - {client}"


HISTORY_ORDERS = ("date", "price", "client")


class QuoteHistoryRepository:
    """Ordered quote history, newest first unless asked otherwise."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, result: QuoteResult, title: Optional[str] = None) -> int:
        record = models.SavedQuote(
            title=title or default_quote_title(result),
            kit_id=result.kit.id,
            kit_name=result.kit.name,
            client_name=result.project.client_name,
            project_name=result.project.project_name,
            par=result.totals.par,
            result_json=quote_to_dict(result),
            created_at=datetime.utcnow(),
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info("Saved quote %d (%s)", record.id, record.title)
        return record.id

    def list(self, skip: int = 0, limit: int = 50, search: Optional[str] = None,
             order_by: str = "date") -> List[models.SavedQuote]:
        """
        search: case-insensitive match on title, client, project or kit name.
        order_by: date (newest first), price (highest PAR first) or client (A-Z, missing first).
        """
        if order_by not in HISTORY_ORDERS:
            raise ValueError(f"order_by must be one of {list(HISTORY_ORDERS)}, got {order_by}")

        query = self.db.query(models.SavedQuote)
        if search and search.strip():
            pattern = f"%{search.strip()}%"
            query = query.filter(or_(
                models.SavedQuote.title.ilike(pattern),
                models.SavedQuote.client_name.ilike(pattern),
                models.SavedQuote.project_name.ilike(pattern),
                models.SavedQuote.kit_name.ilike(pattern),
            ))

        if order_by == "price":
            query = query.order_by(models.SavedQuote.par.desc(), models.SavedQuote.id.desc())
        elif order_by == "client":
            query = query.order_by(
                func.lower(func.coalesce(models.SavedQuote.client_name, "")),
                models.SavedQuote.id.desc(),
            )
        else:
            query = query.order_by(models.SavedQuote.id.desc())
        return query.offset(skip).limit(limit).all()

    def get(self, quote_id: int) -> Optional[models.SavedQuote]:
        return self.db.query(models.SavedQuote).filter(models.SavedQuote.id == quote_id).first()

    def delete(self, quote_id: int) -> bool:
        record = self.get(quote_id)
        if not record:
            return False
        self.db.delete(record)
        self.db.commit()
        logger.info("Deleted quote %d", quote_id)
        return True

    def clear(self) -> int:
        """Deletes the whole history. Returns how many quotes were removed."""
        removed = self.db.query(models.SavedQuote).delete()
        self.db.commit()
        logger.info("Cleared quote history (%d quotes)", removed)
        return removed


def _is_valid_config_record(record) -> bool:
    """Basic structure check for imported configuration records."""
    if not isinstance(record, dict):
        return False
    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        return False
    config = record.get("config")
    if not isinstance(config, dict):
        return False
    return all(
        isinstance(config.get(n), (int, float)) and not isinstance(config.get(n), bool)
        and math.isfinite(config[n])
        for n in CONFIG_FIELDS
    )


class ConfigurationRepository:
    """Named BusinessConfig snapshots, oldest first."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, name: str, config: BusinessConfig, description: Optional[str] = None) -> int:
        name = name.strip()
        if not name:
            raise ValueError("Configuration name is required")
        if self.get_by_name(name):
            raise ValueError(f"A configuration named '{name}' already exists")
        record = models.SavedConfiguration(
            name=name,
            description=(description or "").strip() or None,
            config_json=asdict(config),
        )
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info("Saved configuration %d (%s)", record.id, record.name)
        return record.id

    def list(self) -> List[models.SavedConfiguration]:
        return self.db.query(models.SavedConfiguration).order_by(models.SavedConfiguration.id).all()

    def get(self, config_id: int) -> Optional[models.SavedConfiguration]:
        return self.db.query(models.SavedConfiguration).filter(
            models.SavedConfiguration.id == config_id
        ).first()

    def get_by_name(self, name: str) -> Optional[models.SavedConfiguration]:
        return self.db.query(models.SavedConfiguration).filter(
            models.SavedConfiguration.name == name
        ).first()

    def delete(self, config_id: int) -> bool:
        record = self.get(config_id)
        if not record:
            return False
        self.db.delete(record)
        self.db.commit()
        logger.info("Deleted configuration %d", config_id)
        return True

    def load(self, config_id: int) -> Optional[BusinessConfig]:
        record = self.get(config_id)
        if not record:
            return None
        return BusinessConfig(**{name: record.config_json[name] for name in CONFIG_FIELDS})

    def export_all(self) -> List[dict]:
        return [config_record_to_dict(r) for r in self.list()]

    def import_many(self, records: list) -> int:
        """
        Adds structurally valid records whose name is not taken yet.
        Returns how many were imported.
        """
        existing = {r.name for r in self.list()}
        imported = 0
        for record in records:
            if not _is_valid_config_record(record):
                logger.warning("Skipping invalid configuration record: %r", record)
                continue
            name = record["name"].strip()
            if name in existing:
                continue
            config = {n: record["config"][n] for n in CONFIG_FIELDS}
            self.db.add(models.SavedConfiguration(
                name=name,
                description=record.get("description"),
                config_json=config,
            ))
            existing.add(name)
            imported += 1
        self.db.commit()
        logger.info("Imported %d configuration(s)", imported)
        return imported


def config_record_to_dict(record: models.SavedConfiguration) -> dict:
    return {
        "id": record.id,
        "name": record.name,
        "description": record.description,
        "config": record.config_json,
        "created_at": record.created_at.isoformat() if record.created_at else None,
        "updated_at": record.updated_at.isoformat() if record.updated_at else None,
    }


def quote_record_to_dict(record: models.SavedQuote, include_result: bool = True) -> dict:
    totals = (record.result_json or {}).get("totals", {})
    data = {
        "id": record.id,
        "title": record.title,
        "kit_id": record.kit_id,
        "kit_name": record.kit_name,
        "client_name": record.client_name,
        "project_name": record.project_name,
        "par": totals.get("par"),
        "par_with_vat": totals.get("par_with_vat"),
        "created_at": record.created_at.isoformat() if record.created_at else None,
    }
    if include_result:
        data["result"] = record.result_json
    return data
