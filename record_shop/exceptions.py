"""Domain exceptions raised by services and the access policy.

Each HTTP-facing error carries the status code it maps to; the mapping to a
response body lives in ``record_shop.errors``.
"""

from fastapi import status


class RecordShopError(Exception):
    """Base class for errors that translate to an HTTP error envelope."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AlreadyExistsError(RecordShopError):
    """Uniqueness violation on a user email or genre name."""

    status_code = status.HTTP_400_BAD_REQUEST


class ResourceNotFoundError(RecordShopError):
    status_code = status.HTTP_404_NOT_FOUND


class BadCredentialsError(RecordShopError):
    """Login failed; never says whether the email or the password was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Bad credentials") -> None:
        super().__init__(message)


class AuthenticationRequiredError(RecordShopError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(
        self, message: str = "Full authentication is required to access this resource"
    ) -> None:
        super().__init__(message)


class AccessDeniedError(RecordShopError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access Denied") -> None:
        super().__init__(message)


class DuplicateRecordError(Exception):
    """A store write hit a unique index. Services translate this."""
