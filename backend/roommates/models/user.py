"""User ORM — account identity supplied by the auth provider.

Invariants:
    - email is unique when present
    - profile and membership are optional one-to-one relationships
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roommates.db.base import Base, new_id


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    email: Mapped[str | None] = mapped_column(
        String(320), nullable=True, unique=True,
    )
    image: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    profile: Mapped["Profile"] = relationship(
        "Profile", back_populates="user", uselist=False,
        cascade="all, delete-orphan",
    )
    membership: Mapped["Membership"] = relationship(
        "Membership", back_populates="user", uselist=False,
    )
