"""Website URL validation."""

import logging
import re

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(
    r"(https?://)([\w-]+\.)+[a-zA-Z]{2,6}(:[0-9]{1,5})?(?:/[\w\-.~:@!$&'()*+,;=%]*)?",
    re.IGNORECASE | re.ASCII,
)


def validate_website_url(url: str | None) -> bool:
    """Check that the input is an http(s) website URL.

    The scheme is mandatory. A port and a path are optional.

    Examples:
        >>> validate_website_url("http://example.com")
        True
        >>> validate_website_url("htp://example.com")
        False

    """
    if not isinstance(url, str):
        return False
    if URL_PATTERN.fullmatch(url.strip()) is None:
        logger.debug(f"Website URL rejected: {url!r}")
        return False
    return True
