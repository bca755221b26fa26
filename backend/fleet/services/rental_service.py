"""Rental Service — imperative shell around the pure rental rules.

Invariants:
    - Listing reads the store directly (store is the source of truth) and takes no lock
    - add/rent/return run inside DatabaseSessionManager.write_transaction():
      lookup, rule check and write happen under one lock and one transaction
    - A rule violation raised inside the boundary rolls the transaction back,
      so the store is never left half-updated
    - Repositories are built per session through an injected factory

Design Decisions:
    - Impureim sandwich: repository read → rental_rules (pure) → repository write
    - repository_factory injected: tests and alternative stores plug in a
      CarRepository without touching the service
"""

import logging
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from fleet.core import rental_rules
from fleet.core.domain_types import Registration
from fleet.core.errors import (
    CarAlreadyRegisteredError, ErrorContext, ResourceNotFoundError,
)
from fleet.core.rental_rules import CarRecord
from fleet.core.repository_protocols import CarRepository
from fleet.infrastructure.car_repository import SqlCarRepository
from fleet.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[AsyncSession], CarRepository]

DEMO_CAR = CarRecord(
    model="Tesla M3", registration=Registration("BTS812"), mileage=6003, rented=False,
)


class RentalService:
    """Fleet operations: list, add, rent, return."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        repository_factory: RepositoryFactory = SqlCarRepository,
    ):
        self._db = db
        self._repository_factory = repository_factory

    async def list_available(self) -> list[CarRecord]:
        async with self._db.session() as session:
            return await self._repository_factory(session).list_available()

    async def add_car(self, car: CarRecord) -> None:
        async with self._db.write_transaction() as session:
            repo = self._repository_factory(session)
            if await repo.exists(car.registration):
                raise CarAlreadyRegisteredError(
                    ErrorContext(registration=car.registration),
                )
            await repo.add(car)
        logger.info(
            f"Car {car.registration} added",
            extra={"registration": car.registration},
        )

    async def ensure_car(self, car: CarRecord) -> bool:
        """Insert car unless its registration exists. Returns True if inserted."""
        async with self._db.write_transaction() as session:
            repo = self._repository_factory(session)
            if await repo.exists(car.registration):
                return False
            await repo.add(car)
        logger.info(
            f"Car {car.registration} seeded",
            extra={"registration": car.registration},
        )
        return True

    async def rent_car(self, registration: Registration) -> CarRecord:
        async with self._db.write_transaction() as session:
            repo = self._repository_factory(session)
            car = await self._get_or_404(repo, registration)
            rented = rental_rules.rent(car)
            await repo.save(rented)
        logger.info(
            f"Car {registration} rented",
            extra={"registration": registration},
        )
        return rented

    async def return_car(
        self, registration: Registration, raw_mileage: str | None = None,
    ) -> CarRecord:
        async with self._db.write_transaction() as session:
            repo = self._repository_factory(session)
            car = await self._get_or_404(repo, registration)
            returned = rental_rules.return_car(car, raw_mileage)
            await repo.save(returned)
        logger.info(
            f"Car {registration} returned",
            extra={
                "registration": registration,
                "mileage_delta": returned.mileage - car.mileage,
            },
        )
        return returned

    @staticmethod
    async def _get_or_404(
        repo: CarRepository, registration: Registration,
    ) -> CarRecord:
        car = await repo.get_for_update(registration)
        if car is None:
            raise ResourceNotFoundError(
                "Car", registration, ErrorContext(registration=registration),
            )
        return car
