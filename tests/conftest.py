"""Shared fixtures: an in-memory store wired into the FastAPI app."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import init_db
from database.deps import get_db_read, get_db_write
from main import app


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose routes read and write the in-memory store."""
    def _session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_read] = _session
    app.dependency_overrides[get_db_write] = _session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def monday():
    return {
        "day": "Monday",
        "breakfast": "Oats",
        "lunch": "Salad",
        "dinner": "Rice",
        "snacks": "Nuts",
    }


def _plan_for(day: str, **overrides) -> dict:
    payload = {
        "day": day,
        "breakfast": f"{day} porridge",
        "lunch": f"{day} soup",
        "dinner": f"{day} curry",
        "snacks": "Fruit",
        "notes": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_plan():
    """Factory for valid create payloads: make_plan("Friday", lunch="Tacos")."""
    return _plan_for
