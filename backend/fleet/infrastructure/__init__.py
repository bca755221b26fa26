"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports from here
    - All SQLAlchemy errors mapped to core DatabaseError before leaving this layer

Design Decisions:
    - Session manager owns both the connection pool and the write boundary
"""
