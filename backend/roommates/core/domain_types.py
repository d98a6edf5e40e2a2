"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ProfileId, GroupId, MembershipId wrap string ids — never use bare str in domain logic
    - All enumerated profile attributes are closed Enums — no raw string matching
    - Enum values are the strings stored in the DB and sent over the wire

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ProfileId = NewType("ProfileId", str)
GroupId = NewType("GroupId", str)
MembershipId = NewType("MembershipId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Membership role — governs permitted actions within a group."""
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class School(str, Enum):
    UCLA = "UCLA"
    USC = "USC"
    UCSD = "UCSD"
    UCB = "UCB"
    UCI = "UCI"
    STANFORD = "STANFORD"
    CALTECH = "CALTECH"
    OTHER = "OTHER"


class Sex(str, Enum):
    """Assigned sex as reported on the profile."""
    MALE = "MALE"
    FEMALE = "FEMALE"
    INTERSEX = "INTERSEX"


class Volume(str, Enum):
    """Day/night noise level a resident is comfortable with."""
    QUIET = "QUIET"
    MODERATE = "MODERATE"
    LOUD = "LOUD"


class Status(str, Enum):
    """Search status — whether the user is still looking for roommates."""
    LOOKING = "LOOKING"
    NOT_LOOKING = "NOT_LOOKING"
    MATCHED = "MATCHED"


class MembershipAction(str, Enum):
    """Mutations a member can request from the group dashboard."""
    REMOVE_MEMBER = "remove_member"
    LEAVE_GROUP = "leave_group"
    DELETE_GROUP = "delete_group"
