"""Snapshots — immutable plain-data views of profiles and memberships.

Invariants:
    - All snapshots are frozen dataclasses: core functions never mutate their input
    - FilterCriteria fields default to None, meaning "no constraint"
    - None and 0 are distinct for minimum_neatness / minimum_social_energy_level
    - GroupSnapshot.members keeps the order supplied by the persistence layer

Design Decisions:
    - Dataclasses, not ORM rows: core stays importable without SQLAlchemy
    - Tuples for member lists so snapshots stay hashable and immutable
"""

from dataclasses import dataclass, field

from roommates.core.domain_types import (
    GroupId, MembershipId, ProfileId, UserId,
    Role, School, Sex, Status, Volume,
)


@dataclass(frozen=True)
class UserSnapshot:
    id: UserId
    name: str | None = None
    email: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class ProfileSnapshot:
    """A user's self-reported roommate attributes."""
    id: ProfileId
    user_id: UserId
    user: UserSnapshot
    school: School
    assigned_sex: Sex
    day_volume: Volume
    night_volume: Volume
    status: Status
    neatness: int
    social_energy_level: int
    alcohol: bool = False
    committed: bool = False
    drugs: bool = False
    snore: bool = False
    pronouns: str | None = None


@dataclass(frozen=True)
class FilterCriteria:
    """Partially specified search constraints. Unset (None) never excludes."""

    # "must not have X" filters — only an explicit False excludes
    alcohol: bool | None = None
    committed: bool | None = None
    drugs: bool | None = None
    snore: bool | None = None

    # equality filters — compared only when both sides are present
    assigned_sex: Sex | None = None
    day_volume: Volume | None = None
    night_volume: Volume | None = None
    school: School | None = None
    status: Status | None = None

    # inclusive lower bounds, offset by +10 (see core/filter_profiles.py)
    minimum_neatness: int | None = None
    minimum_social_energy_level: int | None = None


@dataclass(frozen=True)
class MemberSnapshot:
    id: MembershipId
    role: Role
    user_id: UserId
    user_name: str | None = None


@dataclass(frozen=True)
class GroupSnapshot:
    id: GroupId
    members: tuple[MemberSnapshot, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MembershipSnapshot:
    """The caller's membership, with the group it belongs to."""
    id: MembershipId
    role: Role
    user_id: UserId
    group_id: GroupId
    group: GroupSnapshot

    def find_member(self, membership_id: str) -> MemberSnapshot | None:
        """Return the group member with the given membership id, if any."""
        for member in self.group.members:
            if member.id == membership_id:
                return member
        return None
