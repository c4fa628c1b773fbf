"""Request schemas: presence checks, coercion and query parsing."""

from datetime import date

import pytest
from pydantic import ValidationError

from exercise_tracker.schemas.exercise import ExerciseCreate, LogQuery
from exercise_tracker.schemas.user import UserCreate


def test_user_create_requires_username():
    with pytest.raises(ValidationError) as exc:
        UserCreate.model_validate({})
    assert exc.value.errors()[0]["msg"] == "Username is required"


def test_user_create_keeps_username_verbatim():
    assert UserCreate(username=" alice ").username == " alice "


def test_exercise_create_coerces_duration_and_date():
    body = ExerciseCreate.model_validate(
        {"description": "run", "duration": "30", "date": "2020-05-05"},
    )
    assert body.duration == 30
    assert body.date == date(2020, 5, 5)


def test_exercise_create_blank_date_is_absent():
    body = ExerciseCreate.model_validate(
        {"description": "run", "duration": 30, "date": ""},
    )
    assert body.date is None


@pytest.mark.parametrize("data", [
    {"duration": 30},
    {"description": "run"},
    {"description": "", "duration": 30},
    {"description": "run", "duration": ""},
])
def test_exercise_create_missing_fields_message(data):
    with pytest.raises(ValidationError) as exc:
        ExerciseCreate.model_validate(data)
    assert exc.value.errors()[0]["msg"] == "Description and duration are required"


def test_exercise_create_rejects_fractional_duration():
    with pytest.raises(ValidationError) as exc:
        ExerciseCreate.model_validate({"description": "run", "duration": "12.5"})
    assert exc.value.errors()[0]["loc"] == ("duration",)


def test_log_query_reads_query_names():
    query = LogQuery.model_validate(
        {"from": "2020-01-01", "to": "2020-12-31", "limit": "2"},
    )
    assert query.date_from == date(2020, 1, 1)
    assert query.date_to == date(2020, 12, 31)
    assert query.limit == 2


def test_log_query_zero_limit_means_no_limit():
    assert LogQuery.model_validate({"limit": "0"}).limit is None


def test_log_query_errors_use_query_names():
    with pytest.raises(ValidationError) as exc:
        LogQuery.model_validate({"from": "soon"})
    assert exc.value.errors()[0]["loc"] == ("from",)


def test_log_query_rejects_limit_beyond_integer_range():
    with pytest.raises(ValidationError) as exc:
        LogQuery.model_validate({"limit": str(10**20)})
    assert exc.value.errors()[0]["loc"] == ("limit",)
