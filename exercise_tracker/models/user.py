"""User ORM: persists the people exercises are logged against.

Invariants:
    - id is a UUID primary key generated on insert
    - username is required but neither unique nor format-checked
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class User(Base):
    """A user; created once, never updated or deleted."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
