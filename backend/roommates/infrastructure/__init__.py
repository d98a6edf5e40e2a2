"""Infrastructure Layer — database engine and observability.

Invariants:
    - Infrastructure never imports from core/ domain logic (errors excepted)
    - All SQLAlchemy failures mapped to DatabaseError
"""
