"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services load ORM rows, convert them to snapshots, and call core/ functions
    - Every mutation is validated by core/enforce_membership.py before it touches the DB
"""
