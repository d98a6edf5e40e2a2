"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - A user has at most one profile and at most one membership

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from roommates.models.user import User  # noqa: F401
from roommates.models.profile import Profile  # noqa: F401
from roommates.models.group import Group  # noqa: F401
from roommates.models.membership import Membership  # noqa: F401
