"""Password validation functions."""

import logging
import re

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>?/`~"

# Uppercase, lowercase, digit and special character each at least once, no whitespace
PASSWORD_PATTERN = re.compile(
    r"(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])(?=.*[" + re.escape(SPECIAL_CHARACTERS) + r"])\S+"
)

REPEATED_CHARACTER_PATTERN = re.compile(r"(.)\1\1", re.DOTALL)

WEAK_PASSWORDS = frozenset(
    {
        "password",
        "123456",
        "qwerty",
        "letmein",
        "12345678",
        "password1",
        "password1!",
    }
)


def validate_password(password: str | None) -> bool:
    """Check password strength requirements.

    Requirements:
    - Between 8 and 128 characters, counted on the raw (untrimmed) value
    - Not blank
    - At least one uppercase letter (A-Z)
    - At least one lowercase letter (a-z)
    - At least one digit (0-9)
    - At least one special character from ``SPECIAL_CHARACTERS``
    - No whitespace anywhere
    - No character repeated three or more times in a row
    - Not one of the well-known weak passwords, ignoring case

    Checks run in that order and the first failing one decides. Characters
    outside ASCII (e.g. emoji) are allowed as long as the required classes are
    present.

    Args:
        password: Password string to validate

    Returns:
        True if the password is strong enough

    Examples:
        >>> validate_password("Aa1!secure")
        True
        >>> validate_password("password1!")
        False

    """
    if not isinstance(password, str) or not password.strip():
        logger.debug("Password rejected: empty")
        return False
    if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
        logger.debug(f"Password rejected: length {len(password)} outside {MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}")
        return False

    if PASSWORD_PATTERN.fullmatch(password) is None:
        logger.debug("Password rejected: missing character class or contains whitespace")
        return False

    if REPEATED_CHARACTER_PATTERN.search(password):
        logger.debug("Password rejected: three identical consecutive characters")
        return False

    if password.lower() in WEAK_PASSWORDS:
        logger.debug("Password rejected: common weak password")
        return False

    return True
