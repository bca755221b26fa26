"""SQL Car Repository — CarRepository implementation over the `cars` table.

Invariants:
    - Speaks CarRecord in and out; ORM rows never leave this module
    - Never commits: the caller's session/transaction owns the commit
    - get_for_update issues SELECT ... FOR UPDATE (ignored by SQLite, where the
      write lock alone serializes writers)
    - A primary-key violation on insert surfaces as CarAlreadyRegisteredError

Design Decisions:
    - Core UPDATE for save(): writes exactly the two mutable columns, both in
      one statement so mileage and rented change together
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fleet.core.domain_types import Registration
from fleet.core.errors import CarAlreadyRegisteredError, ErrorContext
from fleet.core.rental_rules import CarRecord
from fleet.models.car import Car

logger = logging.getLogger(__name__)


class SqlCarRepository:
    """Car persistence bound to one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_available(self) -> list[CarRecord]:
        result = await self._session.execute(
            select(Car).where(Car.rented.is_(False)).order_by(Car.registration),
        )
        return [car.to_record() for car in result.scalars().all()]

    async def exists(self, registration: Registration) -> bool:
        result = await self._session.execute(
            select(Car.registration).where(Car.registration == registration),
        )
        return result.scalar_one_or_none() is not None

    async def add(self, car: CarRecord) -> None:
        self._session.add(Car.from_record(car))
        try:
            await self._session.flush()
        except IntegrityError as e:
            logger.warning(
                f"Insert rejected for car {car.registration}: {e.orig}",
                extra={"registration": car.registration},
            )
            raise CarAlreadyRegisteredError(
                ErrorContext(registration=car.registration),
            ) from e

    async def get_for_update(self, registration: Registration) -> CarRecord | None:
        result = await self._session.execute(
            select(Car).where(Car.registration == registration).with_for_update(),
        )
        car = result.scalar_one_or_none()
        return car.to_record() if car else None

    async def save(self, car: CarRecord) -> None:
        await self._session.execute(
            update(Car)
            .where(Car.registration == car.registration)
            .values(mileage=car.mileage, rented=car.rented),
        )
