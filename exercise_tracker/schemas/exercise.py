"""Exercise Schemas: request/response contracts for logging and log retrieval.

Invariants:
    - ExerciseCreate checks presence of description and duration before any parsing
    - duration is strict integer minutes (core/durations.py); date is a calendar date
    - LogQuery treats empty query values as absent; limit=0 means no limit
    - ExerciseLogResponse.count always equals len(log)

Design Decisions:
    - PydanticCustomError for client-facing messages: the error handler can show
      msg verbatim without pydantic's "Value error, " prefix
    - Dates rendered to display strings in the route, schemas carry plain str
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from exercise_tracker.core.dates import parse_date
from exercise_tracker.core.durations import parse_duration


def _blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _to_date(value: object) -> datetime.date | None:
    if _blank(value):
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        raise PydanticCustomError("invalid_date", str(e)) from None


class ExerciseCreate(BaseModel):
    """Exercise logging body."""
    description: str
    duration: int
    date: datetime.date | None = None

    @model_validator(mode="before")
    @classmethod
    def require_fields(cls, data):
        if isinstance(data, dict) and (
            _blank(data.get("description")) or _blank(data.get("duration"))
        ):
            raise PydanticCustomError(
                "missing_fields", "Description and duration are required",
            )
        return data

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, v):
        try:
            return parse_duration(v)
        except ValueError as e:
            raise PydanticCustomError("invalid_duration", str(e)) from None

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        return _to_date(v)


class LogQuery(BaseModel):
    """Optional filters for the exercise log, keyed by query names from/to/limit."""
    model_config = ConfigDict(populate_by_name=True)

    date_from: datetime.date | None = Field(None, alias="from")
    date_to: datetime.date | None = Field(None, alias="to")
    limit: int | None = None

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def coerce_dates(cls, v):
        return _to_date(v)

    @field_validator("limit", mode="before")
    @classmethod
    def coerce_limit(cls, v):
        if _blank(v):
            return None
        try:
            limit = parse_duration(v)
        except ValueError:
            raise PydanticCustomError(
                "invalid_limit", "must be a non-negative integer",
            ) from None
        if limit < 0:
            raise PydanticCustomError(
                "invalid_limit", "must be a non-negative integer",
            )
        return limit or None


class ExerciseResponse(BaseModel):
    id: str
    username: str
    date: str
    duration: int
    description: str


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLogResponse(BaseModel):
    id: str
    username: str
    count: int
    log: list[LogEntry]
