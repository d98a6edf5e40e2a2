"""Membership Routes — group dashboard: current membership, remove member, leave group.

Invariants:
    - Caller must have a completed profile (require_profile)
    - DELETE on the caller's own membership leaves the group; on another
      member's membership it removes that member
    - Permission rules are enforced server-side by services/membership_actions.py
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roommates.api.dependencies import require_profile
from roommates.infrastructure.database import get_db
from roommates.schemas.membership import (
    CurrentMembershipResponse, MembershipResponse, MutationResponse,
)
from roommates.services import membership_actions

router = APIRouter(prefix="/api/v1/memberships", tags=["memberships"])


@router.get("/current", response_model=CurrentMembershipResponse)
async def get_current_membership(
    user_id: str = Depends(require_profile),
    db: AsyncSession = Depends(get_db),
):
    """The caller's membership, or null when the caller has no group."""
    membership = await membership_actions.get_current_membership(db, user_id)
    if membership is None:
        return CurrentMembershipResponse(membership=None)
    snapshot = membership_actions.to_membership_snapshot(membership)
    return CurrentMembershipResponse(
        membership=MembershipResponse.from_snapshot(snapshot),
    )


@router.delete("/{membership_id}", response_model=MutationResponse)
async def delete_membership(
    membership_id: str,
    user_id: str = Depends(require_profile),
    db: AsyncSession = Depends(get_db),
):
    message = await membership_actions.delete_membership(db, user_id, membership_id)
    return MutationResponse(message=message)
