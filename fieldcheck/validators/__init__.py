"""Field-level input validators.

Every ``validate_*`` function is a total predicate: it takes a string (or
None) and returns a bool, never raising for malformed input.

Available validators:
- email.py: Email address format
- password.py: Password strength
- dates.py: Date of birth and ISO-8601 datetime
- country.py: Supported country names
- url.py: http(s) website URLs
- scalars.py: Non-empty strings and numeric strings

registry.py maps field kinds to validators and raises the exceptions from
exceptions.py for callers that prefer errors.
"""

from .country import validate_country
from .dates import validate_date_of_birth, validate_datetime
from .email import validate_email
from .password import validate_password
from .registry import FieldKind, ensure_valid, is_valid
from .scalars import validate_number, validate_string
from .url import validate_website_url

__all__ = [
    "FieldKind",
    "ensure_valid",
    "is_valid",
    "validate_country",
    "validate_date_of_birth",
    "validate_datetime",
    "validate_email",
    "validate_number",
    "validate_password",
    "validate_string",
    "validate_website_url",
]
