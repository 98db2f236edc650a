"""
Shared test fixtures — SQLite test database, test client, sample inputs.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Point settings at the test database before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from backend.database import Base, get_db
from backend.main import app
from backend.catalog.kits import ESSENTIAL
from backend.pricing_engine import DEFAULT_CONFIG, ProjectInput


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def essential_kit():
    return ESSENTIAL


@pytest.fixture
def base_project():
    """Project sized exactly at the Essential kit's base area."""
    return ProjectInput(area_m2=20, client_name="Acme Fairs", project_name="Spring Expo")


@pytest.fixture
def default_config():
    return DEFAULT_CONFIG
