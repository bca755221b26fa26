"""Service test fixtures — in-memory SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database and its own write lock
    - get_db_manager dependency overridden to use the test manager
    - db_manager singleton patched for code that reads it directly (readiness probe)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL row locks not exercised here; the write lock covers SQLite)
    - Real DatabaseSessionManager, not a stub: write_transaction() is under test too
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fleet.core.domain_types import Mileage, Registration
from fleet.core.rental_rules import CarRecord
from fleet.infrastructure.database import DatabaseSessionManager, get_db_manager
import fleet.infrastructure.database as db_module
from fleet.main import app
from fleet.services.rental_service import RentalService


@pytest.fixture
async def test_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def service(test_manager):
    return RentalService(test_manager)


@pytest.fixture
async def client(test_manager):
    """FastAPI test client with the session manager overridden."""
    app.dependency_overrides[get_db_manager] = lambda: test_manager

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_car(service):
    """Insert one available car directly through the service."""
    car = CarRecord(
        model="Tesla M3", registration=Registration("BTS812"), mileage=Mileage(6003),
    )
    await service.add_car(car)
    return car


@pytest.fixture
async def rented_car(service, seed_car):
    """The seeded car, already rented out."""
    return await service.rent_car(seed_car.registration)
