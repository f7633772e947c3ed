"""Calendar-date helpers for the resolution engine.

All arithmetic here is on `datetime.date` values: there is no time of day and
no timezone, so a deadline is a whole calendar day.
"""

import math
import re
from datetime import date, timedelta

from .errors import DateOutOfRangeError, InvalidDateError

ONE_DAY = timedelta(days=1)
ZERO = timedelta()

# YYYY-MM-DD, YYYY/MM/DD or YYYY.MM.DD, optionally followed by an ISO time
# part (HH:MM[:SS[.fff]]) and a UTC offset or "Z"
_DATE_RE = re.compile(
    r"^(?P<year>\d{4})[-/.](?P<month>\d{1,2})[-/.](?P<day>\d{1,2})"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)


def parse_date(value: str, field: str = "date") -> date:
    """Parse an ISO-like date string into a calendar date.

    Accepts ``2025-06-01``, ``2025/6/1``, ``2025.06.01`` and full ISO
    datetimes such as ``2025-06-01T00:00:00Z`` (the date part is used).

    Args:
        value: The string to parse.
        field: Name of the input, used in the error message.

    Returns:
        The parsed date.

    Raises:
        InvalidDateError: If the string is not a valid calendar date.
    """
    if not isinstance(value, str) or not (match := _DATE_RE.match(value.strip())):
        raise InvalidDateError(value, field)
    try:
        return date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError as e:
        raise InvalidDateError(value, field) from e


def parse_optional_date(value: str | None, field: str = "date") -> date | None:
    """Like `parse_date`, but None and blank strings mean "not supplied"."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidDateError(value, field)
    if not value.strip():
        return None
    return parse_date(value, field)


def format_ymd(value: date) -> str:
    """Render a date as YYYY-MM-DD."""
    return value.isoformat()


def whole_days(window: float) -> timedelta:
    """Return the whole-day part of a window as a timedelta.

    Deadlines are compared at day granularity, so a half day never moves a
    deadline: ``D+1.5`` lands on the same day as ``D+1``.
    """
    return timedelta(days=math.floor(window))


def _shift(anchor: date, days: float, extra: timedelta = ZERO) -> date:
    # date and timedelta both raise OverflowError outside year 1..9999
    try:
        return anchor + (whole_days(days) + extra)
    except OverflowError as e:
        raise DateOutOfRangeError(anchor, math.floor(days) + extra.days) from e


def derive_manufacture_date(expiry: date, total_shelf_life_days: int) -> date:
    """Derive the manufacture date from the expiry date.

    The expiry day counts as a day of shelf-life, so a product with a 20-day
    shelf-life expiring on the 20th was made on the 1st:
    ``expiry - total_shelf_life_days + 1 day``.

    Raises:
        DateOutOfRangeError: If the result falls before year 1.
    """
    return _shift(expiry, -total_shelf_life_days, ONE_DAY)


def count_forward(anchor: date, window: float) -> date:
    """Deadline that falls `window` days after `anchor`."""
    return _shift(anchor, window)


def count_back(expiry: date, window: float) -> date:
    """Deadline for a window counted back from the expiry date.

    The deadline day is still acceptable, hence the extra day:
    ``expiry - window + 1 day``.
    """
    return _shift(expiry, -window, ONE_DAY)
