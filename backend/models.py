from sqlalchemy import Column, Integer, Float, String, DateTime, Text, JSON
from datetime import datetime
from .database import Base


class SavedQuote(Base):
    """Quote history — one engine result snapshot per row, never recomputed."""
    __tablename__ = "saved_quotes"

    id = Column(Integer, primary_key=True, index=True)  # increases with creation order
    title = Column(String, nullable=False)
    kit_id = Column(String, nullable=False)
    kit_name = Column(String, nullable=False)
    client_name = Column(String, nullable=True)
    project_name = Column(String, nullable=True)
    par = Column(Float, nullable=True)  # copied from totals for price ordering
    result_json = Column(JSON, nullable=False)  # quote_to_dict() output
    created_at = Column(DateTime, default=datetime.utcnow)


class SavedConfiguration(Base):
    """Named business configuration snapshots."""
    __tablename__ = "saved_configurations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    config_json = Column(JSON, nullable=False)  # BusinessConfig fields
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
