"""Profile Routes — list, fetch and search roommate profiles.

Invariants:
    - All endpoints require an identified caller
    - Search results keep profile creation order
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roommates.api.dependencies import get_current_user_id
from roommates.infrastructure.database import get_db
from roommates.schemas.profile import (
    ProfileResponse, ProfileSearchRequest, ProfileSearchResponse,
)
from roommates.services import profile_search

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/profiles", tags=["profiles"],
    dependencies=[Depends(get_current_user_id)],
)


@router.get("", response_model=list[ProfileResponse])
async def list_profiles(db: AsyncSession = Depends(get_db)):
    profiles = await profile_search.list_profiles(db)
    return [ProfileResponse.from_snapshot(p) for p in profiles]


@router.post("/search", response_model=ProfileSearchResponse)
async def search_profiles(
    body: ProfileSearchRequest, db: AsyncSession = Depends(get_db),
):
    """Filter profiles by free-text query and structured criteria."""
    matches = await profile_search.search_profiles(
        db, body.query, body.filter.to_criteria(),
    )
    return ProfileSearchResponse(
        profiles=[ProfileResponse.from_snapshot(p) for p in matches],
        total=len(matches),
    )


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: str, db: AsyncSession = Depends(get_db)):
    profile = await profile_search.get_profile(db, profile_id)
    return ProfileResponse.from_snapshot(profile)
