"""User Schemas: request/response contracts for /api/users.

Invariants:
    - UserCreate.username must be present and non-empty (not stripped)
    - UserResponse.id is the canonical UUID text
"""

from pydantic import BaseModel, model_validator
from pydantic_core import PydanticCustomError


class UserCreate(BaseModel):
    """User creation body."""
    username: str | None = None

    @model_validator(mode="after")
    def require_username(self):
        if not self.username:
            raise PydanticCustomError("missing_username", "Username is required")
        return self


class UserResponse(BaseModel):
    id: str
    username: str
