"""
Shared pytest fixtures available to every test file automatically.

The app runs against an in-memory SQLite database (single shared
connection). Tables are created fresh for every test.
"""

from __future__ import annotations

import os

# Must be set before anything imports app.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["WHATSAPP_NUMBER"] = "6281234567890"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ.pop("PENDING_HOLD_HOURS", None)

import pytest
from fastapi.testclient import TestClient

import app.models  # noqa: F401 registers every model on Base.metadata
from app.database import Base, SessionLocal, engine
from app.dependencies import get_admin_user, get_current_user
from app.main import create_app

from .factories import make_admin


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def admin(db):
    return make_admin(db)


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def public_client(db):
    """No auth overrides: admin routes run the real bearer-token guard."""
    return TestClient(create_app(), raise_server_exceptions=True)


@pytest.fixture()
def admin_client(db, admin):
    """Auth dependencies overridden to return `admin` unconditionally."""
    app = create_app()

    def _admin():
        return admin

    app.dependency_overrides[get_admin_user] = _admin
    app.dependency_overrides[get_current_user] = _admin
    return TestClient(app, raise_server_exceptions=True)
