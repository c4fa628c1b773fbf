"""Exercise Persistence: log an exercise and query a user's history.

Invariants:
    - Exercises are only written for a user the caller has already resolved
    - Log filters are inclusive on both ends (from <= date <= to)
    - No ORDER BY: the store's natural order applies before the limit

Design Decisions:
    - Filters built with SQLAlchemy expressions, one where() per supplied bound
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.dates import today
from exercise_tracker.infrastructure.database import translate_db_errors
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User
from exercise_tracker.schemas.exercise import ExerciseCreate, LogQuery

logger = logging.getLogger(__name__)


async def log_exercise(
    db: AsyncSession, user: User, body: ExerciseCreate,
) -> Exercise:
    with translate_db_errors("insert exercise"):
        exercise = Exercise(
            user_id=str(user.id),
            description=body.description,
            duration=body.duration,
            date=body.date or today(),
        )
        db.add(exercise)
        await db.commit()
        await db.refresh(exercise)
    logger.info(
        f"Exercise created: {exercise.id}", extra={"user_id": str(user.id)},
    )
    return exercise


def build_log_query(user_id: str, query: LogQuery):
    """Select the user's exercises, narrowed by the optional date range and limit."""
    stmt = select(Exercise).where(Exercise.user_id == user_id)
    if query.date_from:
        stmt = stmt.where(Exercise.date >= query.date_from)
    if query.date_to:
        stmt = stmt.where(Exercise.date <= query.date_to)
    if query.limit:
        stmt = stmt.limit(query.limit)
    return stmt


async def fetch_exercise_log(
    db: AsyncSession, user: User, query: LogQuery,
) -> list[Exercise]:
    with translate_db_errors("query exercise log"):
        result = await db.execute(build_log_query(str(user.id), query))
        exercises = list(result.scalars().all())
    logger.info(
        f"Found exercises: {len(exercises)}",
        extra={"user_id": str(user.id), "count": len(exercises)},
    )
    return exercises
