"""Service Layer — orchestrates IO around the pure core.

Invariants:
    - Services own transaction boundaries; routes never open sessions
    - Services raise FleetError subclasses; HTTP mapping happens in api/

Design Decisions:
    - Thin routes delegate to services (ADR: ExMA impureim sandwich)
"""
