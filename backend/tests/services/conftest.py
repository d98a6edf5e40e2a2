"""Service test fixtures — async DB + FastAPI test client + seed factories.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched for code that bypasses get_db (readiness probe)
    - Seeded rows get strictly increasing created_at so list order is deterministic
"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from roommates.db.base import Base
from roommates.infrastructure.database import get_db, DatabaseSessionManager
import roommates.infrastructure.database as db_module
from roommates.main import app
from roommates.models import Group, Membership, Profile, User

_EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)

PROFILE_DEFAULTS = {
    "school": "UCLA",
    "assigned_sex": "FEMALE",
    "pronouns": None,
    "alcohol": False,
    "committed": True,
    "day_volume": "MODERATE",
    "night_volume": "QUIET",
    "drugs": False,
    "neatness": 50,
    "snore": False,
    "social_energy_level": 50,
    "status": "LOOKING",
}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def auth():
    """Build request headers identifying a user."""
    def _headers(user: User) -> dict:
        return {"X-User-Id": user.id}
    return _headers


@pytest.fixture
def make_user(test_db):
    """Factory: insert a user, with a profile unless with_profile=False."""
    ticks = count()

    async def _make(
        name: str | None = "Alex",
        email: str | None = None,
        with_profile: bool = True,
        **profile_fields,
    ) -> User:
        created_at = _EPOCH + timedelta(seconds=next(ticks))
        user = User(
            name=name,
            email=email if email is not None else f"{(name or 'anon').lower()}@example.com",
            created_at=created_at,
        )
        test_db.add(user)
        await test_db.flush()
        if with_profile:
            test_db.add(Profile(
                user_id=user.id, created_at=created_at,
                **{**PROFILE_DEFAULTS, **profile_fields},
            ))
        await test_db.commit()
        return user

    return _make


@pytest.fixture
def make_group(test_db):
    """Factory: group with the first user as ADMIN, the rest as MEMBERs, in join order."""

    async def _make(admin: User, *members: User) -> tuple[Group, list[Membership]]:
        group = Group()
        test_db.add(group)
        await test_db.flush()
        memberships = []
        for i, user in enumerate((admin, *members)):
            membership = Membership(
                role="ADMIN" if i == 0 else "MEMBER",
                user_id=user.id,
                group_id=group.id,
                created_at=_EPOCH + timedelta(minutes=i),
            )
            test_db.add(membership)
            memberships.append(membership)
        await test_db.commit()
        return group, memberships

    return _make
