"""Exercise Durations: strict integer-minutes coercion.

Invariants:
    - Result is always an int within the signed 32-bit range of the Integer column
    - Zero and negatives pass; out-of-range values raise ValueError
    - Non-integer input raises ValueError instead of being stored as not-a-number

Design Decisions:
    - Reject over coerce: a duration of "abc" is a client error, not data
    - Integral floats (30.0) accepted because JSON clients often send them
"""

import re

_INTEGER_TEXT = re.compile(r"^[+-]?\d+$")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_MESSAGE = "must be an integer number of minutes"


def _to_int(value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(_MESSAGE)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValueError(_MESSAGE)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_TEXT.match(text):
            return int(text)
        try:
            number = float(text)
        except ValueError:
            raise ValueError(_MESSAGE) from None
        if number.is_integer():
            return int(number)
    raise ValueError(_MESSAGE)


def parse_duration(value: object) -> int:
    """Coerce a body value to whole minutes or raise ValueError."""
    number = _to_int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        raise ValueError(_MESSAGE)
    return number
