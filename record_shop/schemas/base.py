"""Base schema classes and shared field validators."""

from typing import Any

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Reserved names such as localhost or .test are well-formed addresses here
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


class CamelModel(BaseModel):
    """Schema exchanged as camelCase JSON (``firstName``), built from ORM attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def required(message: str) -> BeforeValidator:
    """Reject missing, null and whitespace-only values with ``message``.

    Pair with ``Field(validate_default=True)`` and a ``None`` default so an absent
    key reaches the validator instead of pydantic's generic "Field required".
    """

    def check(value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("required", message)
        return value

    return BeforeValidator(check)


def min_length(limit: int, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if len(value) < limit:
            raise PydanticCustomError("too_short", message)
        return value

    return AfterValidator(check)


def max_length(limit: int, message: str) -> AfterValidator:
    def check(value: str) -> str:
        if len(value) > limit:
            raise PydanticCustomError("too_long", message)
        return value

    return AfterValidator(check)


def email_address(message: str) -> AfterValidator:
    """Check RFC 5322 shape only; the address is kept exactly as submitted."""

    def check(value: str) -> str:
        try:
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            raise PydanticCustomError("email", message) from None
        return value

    return AfterValidator(check)
