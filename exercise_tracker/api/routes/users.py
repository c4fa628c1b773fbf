"""User Routes: create and list users.

Invariants:
    - Body validated into UserCreate before any store access
    - Responses carry id as canonical UUID text
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.request_body import read_body, validate_schema
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.schemas.user import UserCreate, UserResponse
from exercise_tracker.services import users as user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


async def user_create_body(request: Request) -> UserCreate:
    return validate_schema(UserCreate, await read_body(request))


@router.post("", response_model=UserResponse)
async def create_user(
    body: UserCreate = Depends(user_create_body),
    db: AsyncSession = Depends(get_db),
):
    """Create a user from a non-empty username."""
    logger.info("POST /api/users", extra={"method": "POST", "path": "/api/users"})
    user = await user_service.create_user(db, body.username)
    return UserResponse(id=str(user.id), username=user.username)


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List every user in store order."""
    logger.info("GET /api/users", extra={"method": "GET", "path": "/api/users"})
    users = await user_service.list_users(db)
    return [UserResponse(id=str(u.id), username=u.username) for u in users]
