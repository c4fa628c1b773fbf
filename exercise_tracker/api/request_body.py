"""Request Body Parsing: untyped JSON or form input into explicit schemas.

Invariants:
    - JSON objects, urlencoded forms and multipart forms yield the same dict
    - A body that cannot be read as an object raises ValidationError (400)
    - Schema failures raise ValidationError with the first error's message

Design Decisions:
    - Bodies parsed by dependencies, not FastAPI body params: browser forms and
      JSON clients share one endpoint, and missing fields get domain messages
"""

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from exercise_tracker.core.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> dict:
    """Read the request body as a flat dict, whatever its encoding."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items()}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = await request.json()
    except ValueError:
        raise ValidationError("Malformed JSON body") from None
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def validate_schema(schema: type[SchemaT], data: dict) -> SchemaT:
    """Validate data against schema, mapping pydantic errors to ValidationError."""
    try:
        return schema.model_validate(data)
    except SchemaValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"])
        message = f"{field}: {first['msg']}" if field else first["msg"]
        raise ValidationError(message, field=field or None) from None
