"""Pydantic schemas for authentication."""

from typing import Annotated
from uuid import UUID

from pydantic import Field

from record_shop.schemas.base import CamelModel, email_address, min_length, required

PASSWORD_MIN_LENGTH = 8

# A None default plus validate_default routes missing keys through ``required``.
Email = Annotated[
    str,
    Field(validate_default=True),
    required("Email is required"),
    email_address("Email should be a valid email address"),
]
Password = Annotated[
    str,
    Field(validate_default=True),
    required("Password is required"),
    min_length(PASSWORD_MIN_LENGTH, "Password must be at least 8 characters long"),
]


class RegisterRequest(CamelModel):
    """Schema for user registration. Role and activation are never client-controlled."""

    first_name: Annotated[
        str, Field(validate_default=True), required("First name is required")
    ] = None
    last_name: Annotated[
        str, Field(validate_default=True), required("Last name is required")
    ] = None
    email: Email = None
    password: Password = None


class LoginRequest(CamelModel):
    """Schema for user login."""

    email: Email = None
    password: Password = None


class RegisterResponse(CamelModel):
    """Registered user as returned to the client (no password material)."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    active: bool


class LoginResponse(CamelModel):
    token: str
