"""Exercise Routes: log an exercise and read a user's exercise log.

Invariants:
    - Body/query validation (400) runs before the user lookup (404)
    - The user is resolved before any exercise is written or read
    - count in the log response is the length of the returned log
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.request_body import read_body, validate_schema
from exercise_tracker.core.dates import format_date
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.schemas.exercise import (
    ExerciseCreate, ExerciseLogResponse, ExerciseResponse, LogEntry, LogQuery,
)
from exercise_tracker.services import exercises as exercise_service
from exercise_tracker.services.users import get_user_or_404

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["exercises"])


async def exercise_create_body(request: Request) -> ExerciseCreate:
    return validate_schema(ExerciseCreate, await read_body(request))


def log_query_params(request: Request) -> LogQuery:
    return validate_schema(LogQuery, dict(request.query_params))


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    body: ExerciseCreate = Depends(exercise_create_body),
    db: AsyncSession = Depends(get_db),
):
    """Log an exercise for an existing user."""
    logger.info(
        "POST /api/users/{id}/exercises",
        extra={"method": "POST", "user_id": user_id},
    )
    user = await get_user_or_404(db, user_id)
    exercise = await exercise_service.log_exercise(db, user, body)
    return ExerciseResponse(
        id=str(user.id),
        username=user.username,
        date=format_date(exercise.date),
        duration=exercise.duration,
        description=exercise.description,
    )


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_logs(
    user_id: str,
    query: LogQuery = Depends(log_query_params),
    db: AsyncSession = Depends(get_db),
):
    """Return the user's exercises, filtered by from/to and capped by limit."""
    logger.info(
        "GET /api/users/{id}/logs",
        extra={"method": "GET", "user_id": user_id},
    )
    user = await get_user_or_404(db, user_id)
    exercises = await exercise_service.fetch_exercise_log(db, user, query)
    log = [
        LogEntry(
            description=ex.description,
            duration=ex.duration,
            date=format_date(ex.date),
        )
        for ex in exercises
    ]
    return ExerciseLogResponse(
        id=str(user.id), username=user.username, count=len(log), log=log,
    )
