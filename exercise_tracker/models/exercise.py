"""Exercise ORM: one logged activity for a user.

Invariants:
    - user_id holds the owning user's id as canonical UUID text
    - duration is whole minutes, no range constraint
    - date is a calendar date, defaulting to today (UTC)

Design Decisions:
    - No ForeignKey on user_id: the reference is by convention, mirroring a
      document store where the handler checks the user exists first
    - user_id indexed: every log query filters on it
"""

import datetime
import uuid

from sqlalchemy import String, Text, Integer, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.core.dates import today
from exercise_tracker.db.base import Base


class Exercise(Base):
    """An exercise entry; created once, never updated or deleted."""
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[str] = mapped_column(
        String(36), nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[datetime.date] = mapped_column(
        Date, nullable=False, default=today,
    )
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.datetime.now(datetime.timezone.utc),
    )
