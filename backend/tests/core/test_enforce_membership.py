"""Membership Enforcement — tests for pure group action permission checks.

Tests cover:
    - can_remove_member blocks admin targets and self-removal
    - can_delete_group requires a sole ADMIN
    - can_leave_group blocks admins
    - check_* functions return error dicts with stable codes
    - validate_membership_action chains scope + rule checks
    - membership_permissions exposes flags in member order
"""

from roommates.core.domain_types import MembershipAction, Role
from roommates.core.enforce_membership import (
    can_delete_group,
    can_leave_group,
    can_remove_member,
    check_delete_group,
    check_leave_group,
    check_member_in_group,
    check_remove_member,
    membership_permissions,
    validate_membership_action,
)
from roommates.core.snapshots import GroupSnapshot, MemberSnapshot, MembershipSnapshot

ADMIN = MemberSnapshot(id="m-admin", role=Role.ADMIN, user_id="u-admin", user_name="Ada")
BOB = MemberSnapshot(id="m-bob", role=Role.MEMBER, user_id="u-bob", user_name="Bob")
CAROL = MemberSnapshot(id="m-carol", role=Role.MEMBER, user_id="u-carol", user_name="Carol")


def _membership_of(me: MemberSnapshot, *members: MemberSnapshot) -> MembershipSnapshot:
    """Helper: `me`'s membership in a group made of `members` (in order)."""
    return MembershipSnapshot(
        id=me.id,
        role=me.role,
        user_id=me.user_id,
        group_id="g1",
        group=GroupSnapshot(id="g1", members=tuple(members)),
    )


# ─── can_remove_member ──────────────────────────────────────────

def test_member_can_remove_other_member():
    bob = _membership_of(BOB, ADMIN, BOB, CAROL)
    assert can_remove_member(bob, CAROL)


def test_admin_can_remove_member():
    admin = _membership_of(ADMIN, ADMIN, BOB)
    assert can_remove_member(admin, BOB)


def test_admin_target_never_removable():
    assert not can_remove_member(_membership_of(BOB, ADMIN, BOB), ADMIN)
    assert not can_remove_member(_membership_of(ADMIN, ADMIN, BOB), ADMIN)


def test_cannot_remove_self():
    bob = _membership_of(BOB, ADMIN, BOB)
    assert not can_remove_member(bob, BOB)


# ─── can_delete_group ───────────────────────────────────────────

def test_sole_admin_can_delete_group():
    assert can_delete_group(_membership_of(ADMIN, ADMIN))


def test_admin_with_other_members_cannot_delete_group():
    assert not can_delete_group(_membership_of(ADMIN, ADMIN, BOB))


def test_member_cannot_delete_group_even_when_alone():
    assert not can_delete_group(_membership_of(BOB, BOB))


# ─── can_leave_group ────────────────────────────────────────────

def test_member_can_leave():
    assert can_leave_group(_membership_of(BOB, ADMIN, BOB))


def test_admin_cannot_leave():
    assert not can_leave_group(_membership_of(ADMIN, ADMIN, BOB))
    assert not can_leave_group(_membership_of(ADMIN, ADMIN))


# ─── check_* error dicts ────────────────────────────────────────

def test_check_remove_member_codes():
    bob = _membership_of(BOB, ADMIN, BOB, CAROL)
    assert check_remove_member(bob, CAROL) is None
    assert check_remove_member(bob, ADMIN)["error_code"] == "ADMIN_CANNOT_BE_REMOVED"
    assert check_remove_member(bob, BOB)["error_code"] == "CANNOT_REMOVE_SELF"


def test_check_leave_group_code():
    error = check_leave_group(_membership_of(ADMIN, ADMIN, BOB))
    assert error["status"] == "error"
    assert error["error_code"] == "ADMIN_CANNOT_LEAVE"


def test_check_delete_group_codes():
    assert check_delete_group(_membership_of(ADMIN, ADMIN)) is None
    assert check_delete_group(_membership_of(BOB, ADMIN, BOB))["error_code"] == "NOT_GROUP_ADMIN"
    error = check_delete_group(_membership_of(ADMIN, ADMIN, BOB, CAROL))
    assert error["error_code"] == "GROUP_HAS_OTHER_MEMBERS"
    assert "2 other" in error["message"]


def test_check_member_in_group_rejects_outsider():
    stranger = MemberSnapshot(id="m-x", role=Role.MEMBER, user_id="u-x")
    bob = _membership_of(BOB, ADMIN, BOB)
    assert check_member_in_group(bob, stranger)["error_code"] == "MEMBER_NOT_IN_GROUP"
    assert check_member_in_group(bob, None)["error_code"] == "MEMBER_NOT_IN_GROUP"


# ─── validate_membership_action ─────────────────────────────────

def test_validate_remove_scope_checked_before_rules():
    outsider_admin = MemberSnapshot(id="m-y", role=Role.ADMIN, user_id="u-y")
    bob = _membership_of(BOB, ADMIN, BOB)
    error = validate_membership_action(bob, MembershipAction.REMOVE_MEMBER, outsider_admin)
    assert error["error_code"] == "MEMBER_NOT_IN_GROUP"


def test_validate_remove_allowed():
    admin = _membership_of(ADMIN, ADMIN, BOB)
    assert validate_membership_action(admin, MembershipAction.REMOVE_MEMBER, BOB) is None


def test_validate_leave_and_delete():
    admin = _membership_of(ADMIN, ADMIN)
    assert validate_membership_action(admin, MembershipAction.LEAVE_GROUP)["error_code"] == "ADMIN_CANNOT_LEAVE"
    assert validate_membership_action(admin, MembershipAction.DELETE_GROUP) is None


# ─── membership_permissions ─────────────────────────────────────

def test_membership_permissions_for_member():
    perms = membership_permissions(_membership_of(BOB, ADMIN, BOB, CAROL))
    assert perms["can_leave"] is True
    assert perms["can_delete_group"] is False
    assert perms["members"] == [
        {"membership_id": "m-admin", "can_remove": False},
        {"membership_id": "m-bob", "can_remove": False},
        {"membership_id": "m-carol", "can_remove": True},
    ]


def test_membership_permissions_for_sole_admin():
    perms = membership_permissions(_membership_of(ADMIN, ADMIN))
    assert perms["can_leave"] is False
    assert perms["can_delete_group"] is True
