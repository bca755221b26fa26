"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Registration wraps str — the license plate, unique across the fleet
    - Mileage is a non-negative int and never decreases
    - Car lifecycle encoded as CarStatus — no raw bool checks in domain logic

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

Registration = NewType("Registration", str)


# ─── Value Types ─────────────────────────────────────────────────

Mileage = NewType("Mileage", int)           # >= 0
MileageDelta = NewType("MileageDelta", int)  # >= 0, added on return


# ─── Enums ───────────────────────────────────────────────────────

class CarStatus(str, Enum):
    """Car lifecycle states — maps to the DB `rented` column."""
    AVAILABLE = "available"
    RENTED = "rented"

    @classmethod
    def from_rented(cls, rented: bool) -> "CarStatus":
        return cls.RENTED if rented else cls.AVAILABLE

    @property
    def is_rented(self) -> bool:
        return self is CarStatus.RENTED
