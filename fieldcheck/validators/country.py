"""Country name validation."""

import logging

logger = logging.getLogger(__name__)

VALID_COUNTRIES = (
    "United States",
    "Canada",
    "United Kingdom",
    "Sri Lanka",
    "India",
    "Australia",
    "Germany",
    "France",
    "Italy",
    "Spain",
    "Japan",
    "China",
    "Brazil",
    "South Africa",
    "New Zealand",
)

_NORMALIZED_COUNTRIES = frozenset(country.lower() for country in VALID_COUNTRIES)


def validate_country(country: str | None) -> bool:
    """Check the input against the supported country names.

    Case and surrounding whitespace are ignored; spelling is not.
    """
    if not isinstance(country, str) or not country.strip():
        return False
    if country.strip().lower() not in _NORMALIZED_COUNTRIES:
        logger.debug(f"Country rejected: {country!r}")
        return False
    return True
