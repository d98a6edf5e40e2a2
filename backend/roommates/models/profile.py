"""Profile ORM — a user's self-reported roommate attributes.

Invariants:
    - Exactly one profile per user (user_id unique)
    - Enum attributes stored as their core/domain_types.py string values
    - neatness and social_energy_level are integer scores (0-100 on the setup form)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roommates.db.base import Base, new_id


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    school: Mapped[str] = mapped_column(String(20), nullable=False)
    assigned_sex: Mapped[str] = mapped_column(String(20), nullable=False)
    pronouns: Mapped[str | None] = mapped_column(String(50), nullable=True)
    alcohol: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    committed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    day_volume: Mapped[str] = mapped_column(String(20), nullable=False)
    night_volume: Mapped[str] = mapped_column(String(20), nullable=False)
    drugs: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    neatness: Mapped[int] = mapped_column(Integer, nullable=False, default=50)
    snore: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    social_energy_level: Mapped[int] = mapped_column(
        Integer, nullable=False, default=50,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User", back_populates="profile", lazy="selectin",
    )
