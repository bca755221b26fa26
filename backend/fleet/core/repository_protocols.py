"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - get_for_update is only called inside a write boundary (lock + transaction)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Repositories speak CarRecord, never ORM rows: the service can swap the
      SQL store for a fake in tests
"""

from typing import Protocol

from fleet.core.domain_types import Registration
from fleet.core.rental_rules import CarRecord


class CarRepository(Protocol):
    """Contract for car persistence — implemented by shell."""
    async def list_available(self) -> list[CarRecord]: ...
    async def exists(self, registration: Registration) -> bool: ...
    async def add(self, car: CarRecord) -> None: ...
    async def get_for_update(self, registration: Registration) -> CarRecord | None: ...
    async def save(self, car: CarRecord) -> None: ...
