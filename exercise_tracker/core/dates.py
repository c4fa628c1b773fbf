"""Calendar Dates: parsing client input and rendering log dates.

Invariants:
    - parse_date returns a datetime.date or raises ValueError (never None)
    - format_date renders "Www Mmm DD YYYY" (e.g. "Mon Jan 01 2024")
    - today() is the current UTC calendar date
"""

from datetime import date, datetime, timezone

# Fixed English names: the rendering must not follow the process locale
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def today() -> date:
    return datetime.now(timezone.utc).date()


def parse_date(value: object) -> date:
    """Parse an ISO date ("2024-01-31") or ISO datetime into a calendar date.

    Datetimes keep only their date part. Anything else raises ValueError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("must be a calendar date (YYYY-MM-DD)")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValueError("must be a calendar date (YYYY-MM-DD)") from None


def format_date(value: date) -> str:
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )
