"""Membership Actions — executes remove-member, leave-group, delete-group and create-group.

Invariants:
    - Every mutation re-validates with core/enforce_membership.py against a fresh
      snapshot before touching the DB; a rejected action raises ActionNotPermittedError
    - delete_membership on the caller's own membership is a LEAVE, on anyone
      else's it is a REMOVE
    - Mutations only act on the caller's own group
    - Deleting a group cascades to its (single) membership
    - A user belongs to at most one group; create_group refuses a second one,
      including when a concurrent request wins the unique memberships.user_id race
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from roommates.core.domain_types import (
    GroupId, MembershipAction, MembershipId, Role, UserId,
)
from roommates.core.enforce_membership import validate_membership_action
from roommates.core.errors import (
    ActionNotPermittedError, AlreadyInGroupError, ErrorContext,
    ResourceNotFoundError,
)
from roommates.core.snapshots import (
    GroupSnapshot, MemberSnapshot, MembershipSnapshot,
)
from roommates.models.group import Group
from roommates.models.membership import Membership

logger = logging.getLogger(__name__)


def to_member_snapshot(membership: Membership) -> MemberSnapshot:
    return MemberSnapshot(
        id=MembershipId(membership.id),
        role=Role(membership.role),
        user_id=UserId(membership.user_id),
        user_name=membership.user.name if membership.user else None,
    )


def to_membership_snapshot(membership: Membership) -> MembershipSnapshot:
    return MembershipSnapshot(
        id=MembershipId(membership.id),
        role=Role(membership.role),
        user_id=UserId(membership.user_id),
        group_id=GroupId(membership.group_id),
        group=GroupSnapshot(
            id=GroupId(membership.group.id),
            members=tuple(to_member_snapshot(m) for m in membership.group.members),
        ),
    )


async def get_current_membership(
    db: AsyncSession, user_id: str,
) -> Membership | None:
    """The caller's membership with group members and their users loaded."""
    result = await db.execute(
        select(Membership)
        .where(Membership.user_id == user_id)
        .options(
            selectinload(Membership.group)
            .selectinload(Group.members)
            .selectinload(Membership.user),
        ),
    )
    return result.scalar_one_or_none()


def _enforce(
    snapshot: MembershipSnapshot,
    action: MembershipAction,
    context: ErrorContext,
    target: MemberSnapshot | None = None,
) -> None:
    error = validate_membership_action(snapshot, action, target)
    if error:
        logger.warning(
            f"Membership action rejected: {error['message']}",
            extra={
                "user_id": context.user_id,
                "action": action.value,
                "error_code": error["error_code"],
            },
        )
        raise ActionNotPermittedError.from_check(error, context)


async def delete_membership(
    db: AsyncSession, user_id: str, membership_id: str,
) -> str:
    """Remove another member, or leave the group when membership_id is the caller's."""
    target_row = await db.get(Membership, membership_id)
    if target_row is None:
        raise ResourceNotFoundError("Membership", membership_id)

    current = await get_current_membership(db, user_id)
    if current is None:
        raise ResourceNotFoundError("Membership", membership_id)
    snapshot = to_membership_snapshot(current)

    if membership_id == current.id:
        action = MembershipAction.LEAVE_GROUP
        target = None
        message = "Membership deleted"
    else:
        action = MembershipAction.REMOVE_MEMBER
        target = snapshot.find_member(membership_id)
        message = "Member removed"

    context = ErrorContext(
        user_id=user_id, group_id=current.group_id,
        membership_id=membership_id, action=action.value,
    )
    _enforce(snapshot, action, context, target)

    await db.delete(target_row)
    await db.commit()
    logger.info(
        message,
        extra={
            "user_id": user_id, "group_id": current.group_id,
            "membership_id": membership_id, "action": action.value,
        },
    )
    return message


async def delete_group(db: AsyncSession, user_id: str, group_id: str) -> str:
    """Delete the caller's group. Only a sole ADMIN may do this."""
    group = await db.get(Group, group_id)
    if group is None:
        raise ResourceNotFoundError("Group", group_id)

    context = ErrorContext(
        user_id=user_id, group_id=group_id,
        action=MembershipAction.DELETE_GROUP.value,
    )
    current = await get_current_membership(db, user_id)
    if current is None or current.group_id != group_id:
        raise ActionNotPermittedError(
            "MEMBER_NOT_IN_GROUP", "You are not a member of this group.", context,
        )
    _enforce(to_membership_snapshot(current), MembershipAction.DELETE_GROUP, context)

    await db.delete(current.group)
    await db.commit()
    logger.info(
        "Group deleted",
        extra={
            "user_id": user_id, "group_id": group_id,
            "action": MembershipAction.DELETE_GROUP.value,
        },
    )
    return "Group deleted"


async def create_group(db: AsyncSession, user_id: str) -> MembershipSnapshot:
    """Create a group with the caller as its ADMIN."""
    if await get_current_membership(db, user_id) is not None:
        raise AlreadyInGroupError(ErrorContext(user_id=user_id))

    group = Group()
    db.add(group)
    await db.flush()
    db.add(Membership(role=Role.ADMIN.value, user_id=user_id, group_id=group.id))
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(
            "Group creation lost a race: user already has a membership",
            extra={"user_id": user_id, "action": "create_group"},
        )
        raise AlreadyInGroupError(ErrorContext(user_id=user_id))

    membership = await get_current_membership(db, user_id)
    logger.info(
        "Group created",
        extra={"user_id": user_id, "group_id": group.id},
    )
    return to_membership_snapshot(membership)
