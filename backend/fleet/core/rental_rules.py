"""Rental Rules — pure state transitions for a single car.

Invariants:
    - Only two states: AVAILABLE ⇄ RENTED
    - rent: AVAILABLE → RENTED, otherwise CarAlreadyRentedError
    - return: RENTED → AVAILABLE, otherwise CarNotRentedError
    - Return checks state before mileage: a bad mileage on an available car
      reports "not rented"
    - Mileage only grows, and only on return with an explicit delta
    - Functions never mutate their input; they return a new CarRecord

Design Decisions:
    - Frozen dataclass snapshot: the service copies ORM rows in and out, so the
      rules stay testable without a database (ADR: ExMA impureim sandwich)
    - Mileage parsed here, not by FastAPI Query validation: the car must be
      looked up (404) before the mileage value is judged (400)
"""

import re
from dataclasses import dataclass, replace

from fleet.core.domain_types import CarStatus, Mileage, MileageDelta, Registration
from fleet.core.errors import (
    CarAlreadyRentedError, CarNotRentedError, ErrorContext, InvalidMileageError,
)

# At most 10 digits (MAX_MILEAGE is 10 digits); longer strings never reach int()
_MILEAGE_PATTERN = re.compile(r"\+?[0-9]{1,10}")

# Largest value a 32-bit INTEGER column holds (PostgreSQL `integer`)
MAX_MILEAGE = 2**31 - 1


@dataclass(frozen=True)
class CarRecord:
    """Immutable snapshot of one row in the `cars` table."""
    model: str
    registration: Registration
    mileage: Mileage
    rented: bool = False

    @property
    def status(self) -> CarStatus:
        return CarStatus.from_rented(self.rented)


def parse_mileage_delta(
    raw: str | None, registration: Registration | None = None,
) -> MileageDelta | None:
    """Parse the `mileage` query value. Absent or empty means no change."""
    if raw is None or raw == "":
        return None
    # ASCII digits only, optional '+'; negative deltas would roll mileage back
    if not _MILEAGE_PATTERN.fullmatch(raw):
        raise InvalidMileageError(raw, ErrorContext(registration=registration))
    return MileageDelta(int(raw))


def rent(car: CarRecord) -> CarRecord:
    """Transition AVAILABLE → RENTED."""
    if car.status.is_rented:
        raise CarAlreadyRentedError(ErrorContext(registration=car.registration))
    return replace(car, rented=True)


def return_car(car: CarRecord, raw_mileage: str | None = None) -> CarRecord:
    """Transition RENTED → AVAILABLE, adding the parsed mileage delta if any."""
    if not car.status.is_rented:
        raise CarNotRentedError(ErrorContext(registration=car.registration))
    delta = parse_mileage_delta(raw_mileage, car.registration)
    if delta is None:
        return replace(car, rented=False)
    mileage = car.mileage + delta
    if mileage > MAX_MILEAGE:
        raise InvalidMileageError(raw_mileage, ErrorContext(registration=car.registration))
    return replace(car, rented=False, mileage=Mileage(mileage))
