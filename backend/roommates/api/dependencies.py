"""Request Dependencies — caller identity and profile gating.

Invariants:
    - The caller is identified by the configured header (default X-User-Id),
      set by the auth proxy in front of the API
    - Missing header or unknown user -> AuthenticationRequiredError (401)
    - require_profile -> ProfileRequiredError (403) until the user completes setup

Design Decisions:
    - Authentication itself lives outside this service; only its result is consumed
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from roommates.config import get_settings
from roommates.core.errors import AuthenticationRequiredError, ProfileRequiredError
from roommates.infrastructure.database import get_db
from roommates.models.user import User
from roommates.services.profile_search import get_profile_for_user


async def get_current_user_id(
    request: Request, db: AsyncSession = Depends(get_db),
) -> str:
    user_id = request.headers.get(get_settings().user_header)
    if not user_id:
        raise AuthenticationRequiredError()
    user = await db.get(User, user_id)
    if user is None:
        raise AuthenticationRequiredError("Unknown user")
    return user.id


async def require_profile(
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> str:
    """Caller id, provided the caller has a profile."""
    if await get_profile_for_user(db, user_id) is None:
        raise ProfileRequiredError(get_settings().profile_setup_url)
    return user_id
