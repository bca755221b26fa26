"""Fleet Rental Service — tracks which cars are available, rented and how far they have driven.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
