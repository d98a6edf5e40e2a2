"""Profile Search — loads profiles from the DB and runs the pure match filter.

Invariants:
    - Profiles are loaded in creation order; filter_profiles keeps that order
    - ORM rows are converted to ProfileSnapshot before reaching core/
    - An unknown enum value in the DB fails fast (ValueError) rather than
      being silently included or excluded

Design Decisions:
    - Filtering happens in Python over the full list, not in SQL: the core
      predicate is the single definition of a match
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from roommates.core.domain_types import (
    ProfileId, UserId, School, Sex, Status, Volume,
)
from roommates.core.errors import ResourceNotFoundError
from roommates.core.filter_profiles import filter_profiles
from roommates.core.snapshots import FilterCriteria, ProfileSnapshot, UserSnapshot
from roommates.models.profile import Profile

logger = logging.getLogger(__name__)


def to_profile_snapshot(profile: Profile) -> ProfileSnapshot:
    user = profile.user
    return ProfileSnapshot(
        id=ProfileId(profile.id),
        user_id=UserId(profile.user_id),
        user=UserSnapshot(
            id=UserId(user.id), name=user.name, email=user.email, image=user.image,
        ),
        school=School(profile.school),
        assigned_sex=Sex(profile.assigned_sex),
        pronouns=profile.pronouns,
        alcohol=profile.alcohol,
        committed=profile.committed,
        day_volume=Volume(profile.day_volume),
        night_volume=Volume(profile.night_volume),
        drugs=profile.drugs,
        neatness=profile.neatness,
        snore=profile.snore,
        social_energy_level=profile.social_energy_level,
        status=Status(profile.status),
    )


async def list_profiles(db: AsyncSession) -> list[ProfileSnapshot]:
    result = await db.execute(
        select(Profile).order_by(Profile.created_at, Profile.id),
    )
    return [to_profile_snapshot(p) for p in result.scalars().all()]


async def search_profiles(
    db: AsyncSession, query: str, criteria: FilterCriteria,
) -> list[ProfileSnapshot]:
    """Load every profile and keep those matching query and criteria."""
    profiles = await list_profiles(db)
    matches = filter_profiles(profiles, query, criteria)
    logger.info(
        f"Profile search matched {len(matches)}/{len(profiles)}",
        extra={"result_count": len(matches)},
    )
    return matches


async def get_profile_for_user(db: AsyncSession, user_id: str) -> Profile | None:
    result = await db.execute(select(Profile).where(Profile.user_id == user_id))
    return result.scalar_one_or_none()


async def get_profile(db: AsyncSession, profile_id: str) -> ProfileSnapshot:
    """Get one profile or raise ResourceNotFoundError."""
    profile = await db.get(Profile, profile_id)
    if profile is None:
        raise ResourceNotFoundError("Profile", profile_id)
    return to_profile_snapshot(profile)
