"""User Persistence: create, list and resolve users.

Invariants:
    - Every store call runs under translate_db_errors (failures become DatabaseError)
    - get_user_or_404 raises NotFoundError for unknown or malformed ids
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.errors import NotFoundError
from exercise_tracker.infrastructure.database import translate_db_errors
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, username: str) -> User:
    with translate_db_errors("insert user"):
        user = User(username=username)
        db.add(user)
        await db.commit()
        await db.refresh(user)
    logger.info(f"User created: {user.id}", extra={"user_id": str(user.id)})
    return user


async def list_users(db: AsyncSession) -> list[User]:
    with translate_db_errors("list users"):
        result = await db.execute(select(User))
        users = list(result.scalars().all())
    logger.info(f"Found users: {len(users)}", extra={"count": len(users)})
    return users


async def get_user(db: AsyncSession, user_id: str) -> User | None:
    """Look up a user by id text. Ids that are not UUIDs match nothing."""
    try:
        key = uuid.UUID(user_id)
    except ValueError:
        return None
    with translate_db_errors("find user"):
        result = await db.execute(select(User).where(User.id == key))
        return result.scalar_one_or_none()


async def get_user_or_404(db: AsyncSession, user_id: str) -> User:
    user = await get_user(db, user_id)
    if not user:
        raise NotFoundError("User", user_id)
    return user
