"""
Centralized Test Configuration.
"""

import random
import time
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from tracker.app.db.session import Base, init_models
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.repositories.parcel_store import ParcelStore
from tracker.app.schemas.parcel import ParcelCreate
from tracker.app.services.parcel_service import ParcelService

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    """Fresh in-memory database with the parcel table for each test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(test_engine)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def store(engine):
    return ParcelStore(engine)


@pytest.fixture
def service(store):
    return ParcelService(store)


@pytest.fixture
def rand():
    """Per-test random generator, seeded from the clock."""
    return random.Random(time.time_ns())


@pytest.fixture
def make_parcel():
    """Factory for test parcels; keyword arguments override the defaults."""
    def _make_parcel(**overrides) -> ParcelCreate:
        fields = {
            "client": 1000,
            "status": ParcelStatus.REGISTERED,
            "address": "test",
            "created_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        }
        fields.update(overrides)
        return ParcelCreate(**fields)

    return _make_parcel
