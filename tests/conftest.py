# File: tests/conftest.py

"""
Shared fixtures.

Every test gets its own in-memory SQLite database. The app's ``get_db``
dependency is overridden to hand out sessions bound to it, and the
startup bootstrap runs against it when the TestClient starts.
"""

import os

# Must be set before app.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.api.deps import get_db
from app.db.session import build_engine
from app.main import create_application


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def app(engine):
    application = create_application(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(engine):
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
