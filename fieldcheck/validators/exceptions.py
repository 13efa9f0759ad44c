"""Validation exceptions for callers that want errors instead of booleans."""


class FieldValidationError(ValueError):
    """Base field validation exception."""

    def __init__(self, field: str = "value", detail: str | None = None):
        self.field = field
        self.detail = detail or f"Invalid {field}"
        super().__init__(self.detail)


class InvalidEmail(FieldValidationError):
    """Raised when an email address is malformed."""

    def __init__(self):
        super().__init__(field="email", detail="Invalid email address")


class WeakPassword(FieldValidationError):
    """Raised when a password does not meet strength requirements."""

    def __init__(self):
        super().__init__(field="password", detail="Password does not meet strength requirements")


class InvalidDateOfBirth(FieldValidationError):
    """Raised when a date of birth is malformed or out of range."""

    def __init__(self):
        super().__init__(
            field="date_of_birth", detail="Date of birth must be a YYYY-MM-DD date between 1900-01-01 and today"
        )


class InvalidDateTime(FieldValidationError):
    """Raised when a datetime is not ISO-8601 with a timezone."""

    def __init__(self):
        super().__init__(field="datetime", detail="Datetime must be ISO-8601 with a timezone offset")


class UnknownCountry(FieldValidationError):
    """Raised when a country is not in the supported list."""

    def __init__(self):
        super().__init__(field="country", detail="Country is not supported")


class InvalidWebsiteURL(FieldValidationError):
    """Raised when a website URL is malformed."""

    def __init__(self):
        super().__init__(field="website_url", detail="Website URL must start with http:// or https://")


class EmptyString(FieldValidationError):
    """Raised when a required string is missing or blank."""

    def __init__(self):
        super().__init__(field="string", detail="Value cannot be empty")


class InvalidNumber(FieldValidationError):
    """Raised when a value is not numeric."""

    def __init__(self):
        super().__init__(field="number", detail="Value must be a number")


class UnknownFieldKind(FieldValidationError):
    """Raised when no validator is registered for a field kind."""

    def __init__(self, kind: str):
        super().__init__(field="kind", detail=f"No validator registered for '{kind}'")
