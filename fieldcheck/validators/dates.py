"""Date of birth and ISO-8601 datetime validation."""

import logging
import re
from datetime import date

logger = logging.getLogger(__name__)

EARLIEST_DATE_OF_BIRTH = date(1900, 1, 1)

DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

# Shape only: month 13 or hour 99 still match
ISO8601_DATETIME_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]+)?(?:Z|[+-][0-9]{2}:[0-9]{2})"
)


def parse_date(value: str) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    Returns None when the shape is wrong or the date does not exist
    (month 13, February 30, February 29 outside a leap year).
    """
    match = DATE_PATTERN.fullmatch(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def validate_date_of_birth(dob: str | None, today: date | None = None) -> bool:
    """Check that the input is a ``YYYY-MM-DD`` date in the past.

    The date must be on or after 1900-01-01 and strictly before ``today``.

    Args:
        dob: Date of birth string
        today: Reference date, defaults to the current date at call time

    Returns:
        True if the date parses and lies inside the accepted range

    Examples:
        >>> validate_date_of_birth("2000-01-01")
        True
        >>> validate_date_of_birth("2000-13-01")
        False

    """
    if not isinstance(dob, str) or not dob.strip():
        return False

    parsed = parse_date(dob.strip())
    if parsed is None:
        logger.debug(f"Date of birth rejected, not a YYYY-MM-DD date: {dob!r}")
        return False

    today = today or date.today()
    if not EARLIEST_DATE_OF_BIRTH <= parsed < today:
        logger.debug(f"Date of birth rejected, outside {EARLIEST_DATE_OF_BIRTH} to {today}: {parsed}")
        return False
    return True


def validate_datetime(value: str | None) -> bool:
    """Check that the input has the ISO-8601 datetime shape.

    A timezone is required, either ``Z`` or ``+HH:MM``/``-HH:MM``; fractional
    seconds are optional. Field values are not range checked.

    Examples:
        >>> validate_datetime("2023-11-19T12:45:30+01:00")
        True
        >>> validate_datetime("2023/11/19 12:45:30")
        False

    """
    if not isinstance(value, str):
        return False
    if ISO8601_DATETIME_PATTERN.fullmatch(value.strip()) is None:
        logger.debug(f"Datetime rejected: {value!r}")
        return False
    return True
