"""Group ORM — a roommate group, the aggregate root for memberships.

Invariants:
    - A live group has at least one membership (its ADMIN)
    - Deleting a group cascades to its memberships
    - members are ordered by join time
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roommates.db.base import Base, new_id


class Group(Base):
    __tablename__ = "groups"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    members: Mapped[list["Membership"]] = relationship(
        "Membership", back_populates="group",
        cascade="all, delete-orphan", passive_deletes=True,
        order_by="Membership.created_at",
    )
