"""Membership Schemas — group dashboard responses.

Invariants:
    - members keep group order
    - permissions are computed by core/enforce_membership.py, never by clients
"""

from pydantic import BaseModel

from roommates.core.domain_types import Role
from roommates.core.enforce_membership import membership_permissions
from roommates.core.snapshots import MembershipSnapshot


class MemberResponse(BaseModel):
    id: str
    role: Role
    user_id: str
    user_name: str | None = None
    can_remove: bool = False


class MembershipResponse(BaseModel):
    """The caller's membership with group members and action flags."""
    id: str
    role: Role
    user_id: str
    group_id: str
    members: list[MemberResponse]
    can_leave: bool
    can_delete_group: bool

    @classmethod
    def from_snapshot(cls, membership: MembershipSnapshot) -> "MembershipResponse":
        permissions = membership_permissions(membership)
        removable = {
            p["membership_id"]: p["can_remove"] for p in permissions["members"]
        }
        return cls(
            id=membership.id,
            role=membership.role,
            user_id=membership.user_id,
            group_id=membership.group_id,
            members=[
                MemberResponse(
                    id=m.id,
                    role=m.role,
                    user_id=m.user_id,
                    user_name=m.user_name,
                    can_remove=removable[m.id],
                )
                for m in membership.group.members
            ],
            can_leave=permissions["can_leave"],
            can_delete_group=permissions["can_delete_group"],
        )


class CurrentMembershipResponse(BaseModel):
    """membership is None for a groupless user."""
    membership: MembershipResponse | None = None


class MutationResponse(BaseModel):
    status: str = "ok"
    message: str
