"""Car ORM — one row per vehicle in the rental fleet.

Invariants:
    - registration is the primary key (natural key, unique across the fleet)
    - mileage is non-negative (CHECK constraint) and only grows on return
    - rented is the whole state machine: False = available, True = rented

Design Decisions:
    - Natural primary key over surrogate id: every route addresses cars by plate
    - to_record()/from_record() keep ORM rows out of core/ rental rules
"""

from sqlalchemy import Boolean, CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fleet.core.domain_types import Mileage, Registration
from fleet.core.rental_rules import CarRecord
from fleet.db.base import Base


class Car(Base):
    """A rentable car."""
    __tablename__ = "cars"
    __table_args__ = (
        CheckConstraint("mileage >= 0", name="ck_cars_mileage_non_negative"),
    )

    registration: Mapped[str] = mapped_column(String(32), primary_key=True)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    mileage: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    rented: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def to_record(self) -> CarRecord:
        return CarRecord(
            model=self.model,
            registration=Registration(self.registration),
            mileage=Mileage(self.mileage),
            rented=self.rented,
        )

    @classmethod
    def from_record(cls, record: CarRecord) -> "Car":
        return cls(
            registration=record.registration,
            model=record.model,
            mileage=record.mileage,
            rented=record.rented,
        )
