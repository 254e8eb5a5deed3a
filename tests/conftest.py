"""Shared fixtures: an isolated in-memory SQLite database per test and an ASGI client."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import pytest_asyncio
from datetime import datetime
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mileage_tracker.database import create_tables, get_db
from mileage_tracker.main import app
from mileage_tracker.models.supervisor import Supervisor
from mileage_tracker.models.vehicle import Vehicle


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def vehicle(db):
    v = Vehicle(name="Patrol 1", license_plate="ABC-123", is_active=True)
    db.add(v)
    db.commit()
    return v


@pytest.fixture
def supervisor(db):
    s = Supervisor(name="Jordan Lee", badge_number="B-100", is_active=True)
    db.add(s)
    db.commit()
    return s


@pytest.fixture
def morning():
    return datetime(2026, 3, 10, 8, 30)


@pytest_asyncio.fixture
async def client(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
