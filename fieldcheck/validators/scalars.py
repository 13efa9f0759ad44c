"""Generic string and numeric string validation."""

import logging
import re

logger = logging.getLogger(__name__)

# Decimal floating-point literal in ASCII, plus the NaN and Infinity spellings
NUMBER_PATTERN = re.compile(r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def validate_string(value: str | None) -> bool:
    """Check that the input is a string with non-whitespace content."""
    return isinstance(value, str) and bool(value.strip())


def validate_number(number: str | None) -> bool:
    """Check that the input is a floating-point number literal.

    Integers, decimals, a sign and an exponent are accepted, as are the exact
    spellings ``NaN`` and ``Infinity``. Only ASCII digits count; digit-group
    underscores and other spellings ``float()`` tolerates (``inf``, ``nan``,
    full-width digits) are rejected.

    Examples:
        >>> validate_number("123.45")
        True
        >>> validate_number("123abc")
        False

    """
    if not isinstance(number, str) or not number.strip():
        return False
    if NUMBER_PATTERN.fullmatch(number.strip()) is None:
        logger.debug(f"Number rejected: {number!r}")
        return False
    return True
