"""Car Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - CarCreate.registration: 1-32 chars after stripping, non-empty
    - CarCreate.mileage: 0..MAX_MILEAGE, defaults to 0
    - CarResponse mirrors the persisted row exactly: {model, registration, mileage, rented}

Design Decisions:
    - StringConstraints(strip_whitespace=True): length bounds apply to the stripped value
    - StrictBool/StrictInt on the body: "yes" or "12.5" are client errors, not coerced
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StringConstraints

from fleet.core.domain_types import Mileage, Registration
from fleet.core.rental_rules import MAX_MILEAGE, CarRecord

# Whitespace stripped before the length bounds are checked
ModelName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
RegistrationText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=32)]


class CarCreate(BaseModel):
    """Car registration request body."""
    model: ModelName
    registration: RegistrationText
    mileage: StrictInt = Field(0, ge=0, le=MAX_MILEAGE)
    rented: StrictBool = False

    def to_record(self) -> CarRecord:
        return CarRecord(
            model=self.model,
            registration=Registration(self.registration),
            mileage=Mileage(self.mileage),
            rented=self.rented,
        )


class CarResponse(BaseModel):
    """Public car representation."""
    model_config = ConfigDict(from_attributes=True)

    model: str
    registration: str
    mileage: int
    rented: bool


class MessageResponse(BaseModel):
    """Acknowledgement body for successful writes."""
    message: str
