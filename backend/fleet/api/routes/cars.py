"""Cars Routes — list, add, rent and return cars.

Invariants:
    - Routes hold no business logic: parse input, call RentalService, shape output
    - Every success body for a write is {"message": ...} with status 200
    - Errors are raised as FleetError and mapped to status codes by api/error_handlers.py
    - `mileage` reaches the service as the raw query string; the service checks
      the car exists and is rented before judging it

Design Decisions:
    - RentalService injected via Depends: tests override get_db_manager or the
      service itself without patching module globals
"""

import logging

from fastapi import APIRouter, Depends, Query

from fleet.core.domain_types import Registration
from fleet.infrastructure.database import DatabaseSessionManager, get_db_manager
from fleet.schemas.car import CarCreate, CarResponse, MessageResponse
from fleet.services.rental_service import RentalService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/cars", tags=["cars"])


def get_rental_service(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> RentalService:
    return RentalService(db)


@router.get("", response_model=list[CarResponse])
async def list_available_cars(
    service: RentalService = Depends(get_rental_service),
):
    """List cars that are not currently rented."""
    cars = await service.list_available()
    return [CarResponse.model_validate(car) for car in cars]


@router.post("", response_model=MessageResponse)
async def add_car(
    body: CarCreate, service: RentalService = Depends(get_rental_service),
):
    """Register a new car in the fleet."""
    await service.add_car(body.to_record())
    return MessageResponse(message="Car added successfully")


@router.post("/{registration}/rentals", response_model=MessageResponse)
async def rent_car(
    registration: str, service: RentalService = Depends(get_rental_service),
):
    """Mark an available car as rented."""
    await service.rent_car(Registration(registration))
    return MessageResponse(message="Car rented successfully")


@router.post("/{registration}/returns", response_model=MessageResponse)
async def return_car(
    registration: str,
    mileage: str | None = Query(None, description="Distance driven during the rental"),
    service: RentalService = Depends(get_rental_service),
):
    """Mark a rented car as available, adding driven mileage if given."""
    await service.return_car(Registration(registration), mileage)
    return MessageResponse(message="Car returned successfully")
