"""Membership Action Enforcement — decides whether a group dashboard action is permitted.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - can_* predicates return bool; check_* functions return an error dict on
      violation and None on success
    - An ADMIN member can never be removed, and nobody removes themself via remove
    - Only an ADMIN who is the sole member may delete the group
    - An ADMIN may not leave; the group must be deleted instead
    - validate_membership_action chains all checks for an action — first error wins

Design Decisions:
    - Rules enforced here AND re-checked by services/membership_actions.py before
      any mutation executes, so a disabled client control is never the only guard
    - Return dicts (not exceptions): the service layer decides how to surface them
"""

from roommates.core.domain_types import MembershipAction, Role
from roommates.core.snapshots import MemberSnapshot, MembershipSnapshot


# ─── Predicates ──────────────────────────────────────────────────

def can_remove_member(
    membership: MembershipSnapshot, target: MemberSnapshot,
) -> bool:
    """Admins cannot be removed; a member cannot remove themself."""
    if target.role == Role.ADMIN:
        return False
    return target.user_id != membership.user_id


def can_delete_group(membership: MembershipSnapshot) -> bool:
    """Only a sole ADMIN may delete the group."""
    return membership.role == Role.ADMIN and len(membership.group.members) <= 1


def can_leave_group(membership: MembershipSnapshot) -> bool:
    return membership.role != Role.ADMIN


# ─── Checks ──────────────────────────────────────────────────────

def _error(code: str, message: str) -> dict:
    return {"status": "error", "error_code": code, "message": message}


def check_member_in_group(
    membership: MembershipSnapshot, target: MemberSnapshot | None,
) -> dict | None:
    """Target must be a member of the caller's own group."""
    if target is None or membership.find_member(target.id) is None:
        return _error(
            "MEMBER_NOT_IN_GROUP",
            "The selected member does not belong to your group.",
        )
    return None


def check_remove_member(
    membership: MembershipSnapshot, target: MemberSnapshot,
) -> dict | None:
    if can_remove_member(membership, target):
        return None
    if target.role == Role.ADMIN:
        return _error(
            "ADMIN_CANNOT_BE_REMOVED", "The group admin cannot be removed.",
        )
    return _error(
        "CANNOT_REMOVE_SELF",
        "You cannot remove yourself. Leave the group instead.",
    )


def check_leave_group(membership: MembershipSnapshot) -> dict | None:
    if can_leave_group(membership):
        return None
    return _error(
        "ADMIN_CANNOT_LEAVE",
        "The group admin cannot leave. Delete the group instead.",
    )


def check_delete_group(membership: MembershipSnapshot) -> dict | None:
    if membership.role != Role.ADMIN:
        return _error(
            "NOT_GROUP_ADMIN", "Only the group admin can delete the group.",
        )
    if not can_delete_group(membership):
        return _error(
            "GROUP_HAS_OTHER_MEMBERS",
            f"The group still has {len(membership.group.members) - 1} other "
            f"member(s). Remove them before deleting the group.",
        )
    return None


def validate_membership_action(
    membership: MembershipSnapshot,
    action: MembershipAction,
    target: MemberSnapshot | None = None,
) -> dict | None:
    """Chain all checks for the requested action. Returns first error or None."""
    if action == MembershipAction.REMOVE_MEMBER:
        return (
            check_member_in_group(membership, target)
            or check_remove_member(membership, target)
        )
    if action == MembershipAction.LEAVE_GROUP:
        return check_leave_group(membership)
    if action == MembershipAction.DELETE_GROUP:
        return check_delete_group(membership)
    return _error("UNKNOWN_ACTION", f"Unsupported membership action: {action}")


# ─── Dashboard view ──────────────────────────────────────────────

def membership_permissions(membership: MembershipSnapshot) -> dict:
    """Flags for every dashboard control, in group member order."""
    return {
        "can_leave": can_leave_group(membership),
        "can_delete_group": can_delete_group(membership),
        "members": [
            {
                "membership_id": m.id,
                "can_remove": can_remove_member(membership, m),
            }
            for m in membership.group.members
        ],
    }
