"""Security utilities for JWT and password hashing."""

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from record_shop.config import settings
from record_shop.logger import get_logger

if TYPE_CHECKING:
    from record_shop.models import User

logger = get_logger(__name__)

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """Hash a password using bcrypt with a fresh salt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash (constant-time)."""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Password hash has an invalid format")
        return False


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Issue a signed token whose subject is the user's email."""
    issued_at = datetime.now(UTC)
    if expires_delta is not None:
        expire = issued_at + expires_delta
    else:
        expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {"sub": subject, "iat": issued_at, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Decode and validate a JWT access token."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
        return payload
    except jwt.ExpiredSignatureError:
        logger.debug("JWT token expired")
        return None
    except jwt.PyJWTError as exc:
        logger.warning(
            "JWT decode failed",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return None


def get_token_subject(token: str) -> str | None:
    """Return the subject email of a decodable token, or None."""
    payload = decode_access_token(token)
    if not payload:
        return None
    subject = payload.get("sub")
    return subject if isinstance(subject, str) and subject else None


def is_token_valid(token: str, user: "User") -> bool:
    """True iff the signature verifies, the token is unexpired and belongs to ``user``."""
    return get_token_subject(token) == user.email
