"""Group Routes — create and delete roommate groups.

Invariants:
    - Caller must have a completed profile (require_profile)
    - POST creates a group with the caller as ADMIN (409 if already grouped)
    - DELETE is allowed only for a sole ADMIN of that group
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from roommates.api.dependencies import require_profile
from roommates.infrastructure.database import get_db
from roommates.schemas.membership import MembershipResponse, MutationResponse
from roommates.services import membership_actions

router = APIRouter(prefix="/api/v1/groups", tags=["groups"])


@router.post(
    "", response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_group(
    user_id: str = Depends(require_profile),
    db: AsyncSession = Depends(get_db),
):
    snapshot = await membership_actions.create_group(db, user_id)
    return MembershipResponse.from_snapshot(snapshot)


@router.delete("/{group_id}", response_model=MutationResponse)
async def delete_group(
    group_id: str,
    user_id: str = Depends(require_profile),
    db: AsyncSession = Depends(get_db),
):
    message = await membership_actions.delete_group(db, user_id, group_id)
    return MutationResponse(message=message)
