"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Car is the only aggregate; registration is its natural key

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all
      or Alembic autogenerate runs
"""

from fleet.models.car import Car  # noqa: F401
