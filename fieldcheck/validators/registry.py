"""Lookup of validators by field kind."""

import logging
from collections.abc import Callable
from enum import StrEnum
from types import MappingProxyType

from .country import validate_country
from .dates import validate_date_of_birth, validate_datetime
from .email import validate_email
from .exceptions import (
    EmptyString,
    FieldValidationError,
    InvalidDateOfBirth,
    InvalidDateTime,
    InvalidEmail,
    InvalidNumber,
    InvalidWebsiteURL,
    UnknownCountry,
    UnknownFieldKind,
    WeakPassword,
)
from .password import validate_password
from .scalars import validate_number, validate_string
from .url import validate_website_url

logger = logging.getLogger(__name__)


class FieldKind(StrEnum):
    """Kinds of field the library can validate."""

    EMAIL = "email"
    PASSWORD = "password"
    DATE_OF_BIRTH = "date_of_birth"
    DATETIME = "datetime"
    COUNTRY = "country"
    WEBSITE_URL = "website_url"
    STRING = "string"
    NUMBER = "number"


VALIDATORS: MappingProxyType[FieldKind, Callable[[str | None], bool]] = MappingProxyType(
    {
        FieldKind.EMAIL: validate_email,
        FieldKind.PASSWORD: validate_password,
        FieldKind.DATE_OF_BIRTH: validate_date_of_birth,
        FieldKind.DATETIME: validate_datetime,
        FieldKind.COUNTRY: validate_country,
        FieldKind.WEBSITE_URL: validate_website_url,
        FieldKind.STRING: validate_string,
        FieldKind.NUMBER: validate_number,
    }
)

ERRORS: MappingProxyType[FieldKind, type[FieldValidationError]] = MappingProxyType(
    {
        FieldKind.EMAIL: InvalidEmail,
        FieldKind.PASSWORD: WeakPassword,
        FieldKind.DATE_OF_BIRTH: InvalidDateOfBirth,
        FieldKind.DATETIME: InvalidDateTime,
        FieldKind.COUNTRY: UnknownCountry,
        FieldKind.WEBSITE_URL: InvalidWebsiteURL,
        FieldKind.STRING: EmptyString,
        FieldKind.NUMBER: InvalidNumber,
    }
)


def _resolve(kind: FieldKind | str) -> FieldKind:
    try:
        return FieldKind(kind)
    except ValueError as exc:
        raise UnknownFieldKind(str(kind)) from exc


def is_valid(kind: FieldKind | str, value: str | None) -> bool:
    """Run the validator registered for ``kind``.

    Raises:
        UnknownFieldKind: If ``kind`` is not a known field kind.

    """
    return VALIDATORS[_resolve(kind)](value)


def ensure_valid(kind: FieldKind | str, value: str | None) -> str:
    """Return ``value`` unchanged if it passes the ``kind`` validator.

    Args:
        kind: Field kind, as a FieldKind or its string value
        value: Input to check

    Returns:
        The validated value

    Raises:
        FieldValidationError: The kind-specific subclass, if validation fails
        UnknownFieldKind: If ``kind`` is not a known field kind

    Examples:
        >>> ensure_valid("country", "Sri Lanka")
        'Sri Lanka'
        >>> ensure_valid(FieldKind.EMAIL, "nope")
        Traceback (most recent call last):
        ...
        fieldcheck.validators.exceptions.InvalidEmail: Invalid email address

    """
    field_kind = _resolve(kind)
    if not VALIDATORS[field_kind](value):
        logger.debug(f"Validation failed for {field_kind.value} field")
        raise ERRORS[field_kind]()
    return value  # type: ignore[return-value]
