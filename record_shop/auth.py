"""Authentication filter: resolves the request's principal from its bearer token.

The filter never rejects a request. It either attaches a ``Principal`` to
``request.state.principal`` or leaves it unset; ``record_shop.policy`` decides
what an anonymous request may reach.
"""

from dataclasses import dataclass, field

from starlette.requests import HTTPConnection

from record_shop.database import get_session_maker
from record_shop.models import User, UserRole
from record_shop.repositories import UserRepository
from record_shop.security import get_token_subject, is_token_valid

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Principal:
    """Authenticated identity for the lifetime of one request."""

    user: User
    authorities: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def for_user(cls, user: User) -> "Principal":
        return cls(user=user, authorities=frozenset({user.role.value}))

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def role(self) -> UserRole:
        return self.user.role

    def has_authority(self, authority: str) -> bool:
        return authority in self.authorities


def extract_bearer_token(request: HTTPConnection) -> str | None:
    """Return the token after ``Bearer `` in the Authorization header, if any."""
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return None
    return auth_header[len(BEARER_PREFIX) :]


async def resolve_principal(token: str, users: UserRepository) -> Principal | None:
    subject = get_token_subject(token)
    if subject is None:
        return None

    user = await users.find_by_email(subject)
    if user is None or not is_token_valid(token, user):
        return None
    return Principal.for_user(user)


async def authenticate_request(request: HTTPConnection) -> None:
    """Attach the principal for a valid bearer token to ``request.state``."""
    request.state.principal = None
    token = extract_bearer_token(request)
    if token is None:
        return
    async with get_session_maker()() as db:
        request.state.principal = await resolve_principal(token, UserRepository(db))


def get_principal(request: HTTPConnection) -> Principal | None:
    return getattr(request.state, "principal", None)
