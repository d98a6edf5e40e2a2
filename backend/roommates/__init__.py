"""Roommates Application Package — roommate matching backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
