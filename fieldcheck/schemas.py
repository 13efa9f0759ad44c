"""Annotated pydantic field types backed by the validators.

Usage:
    class SignupRequest(BaseModel):
        email: Email
        password: Password
        country: Country
"""

from functools import partial
from typing import Annotated

from pydantic import AfterValidator

from fieldcheck.validators.registry import FieldKind, ensure_valid

Email = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.EMAIL))]
Password = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.PASSWORD))]
DateOfBirth = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.DATE_OF_BIRTH))]
DateTimeString = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.DATETIME))]
Country = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.COUNTRY))]
WebsiteURL = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.WEBSITE_URL))]
NonEmptyString = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.STRING))]
NumericString = Annotated[str, AfterValidator(partial(ensure_valid, FieldKind.NUMBER))]
