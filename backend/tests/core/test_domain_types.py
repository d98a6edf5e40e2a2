"""Domain Types — verifies enum members and string serialization."""

from roommates.core.domain_types import (
    GroupId, MembershipAction, Role, School, Sex, Status, UserId, Volume,
)


def test_identity_types_wrap_str():
    assert UserId("abc") == "abc"
    assert GroupId("g1") == "g1"


def test_role_has_exactly_two_members():
    assert set(Role) == {Role.ADMIN, Role.MEMBER}


def test_enums_serialize_to_db_values():
    assert Role.ADMIN.value == "ADMIN"
    assert School("UCLA") is School.UCLA
    assert Sex("FEMALE") is Sex.FEMALE
    assert Volume("QUIET") is Volume.QUIET
    assert Status("NOT_LOOKING") is Status.NOT_LOOKING


def test_str_enum_compares_equal_to_value():
    assert Role.MEMBER == "MEMBER"
    assert School.USC == "USC"


def test_membership_actions():
    assert {a.value for a in MembershipAction} == {
        "remove_member", "leave_group", "delete_group",
    }
