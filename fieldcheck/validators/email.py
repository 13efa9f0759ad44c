"""Email address validation."""

import logging
import re

logger = logging.getLogger(__name__)

# One domain label (no leading/trailing hyphen), an extension of 2+ letters
# and at most one more extension, e.g. example.com or example.co.uk
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?\.[a-zA-Z]{2,}(\.[a-zA-Z]{2,})?"
)


def validate_email(email: str | None) -> bool:
    """Check that the input is a correctly formatted email address.

    Leading and trailing whitespace is ignored; the rest must match
    ``local-part@domain.extension`` in full.

    Examples:
        >>> validate_email("test@example.com")
        True
        >>> validate_email("invalid-email")
        False

    """
    if not isinstance(email, str):
        return False
    if EMAIL_PATTERN.fullmatch(email.strip()) is None:
        logger.debug(f"Email rejected: {email!r}")
        return False
    return True
