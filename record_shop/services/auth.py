"""User registration and credential login."""

from functools import cache

from starlette.concurrency import run_in_threadpool

from record_shop.exceptions import AlreadyExistsError, BadCredentialsError, DuplicateRecordError
from record_shop.logger import get_logger
from record_shop.models import User, UserRole
from record_shop.repositories import UserRepository
from record_shop.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from record_shop.security import create_access_token, hash_password, verify_password

logger = get_logger(__name__)


@cache
def _unknown_user_hash() -> str:
    """Hash checked when the email is unknown so both login failures cost one bcrypt run."""
    return hash_password("unknown-user-placeholder")


class AuthService:
    """Registers users and exchanges credentials for bearer tokens."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    async def register(self, request: RegisterRequest) -> RegisterResponse:
        """Create an inactive USER account.

        Raises:
            AlreadyExistsError: If a user with this email already exists.
        """
        if await self.users.exists_by_email(request.email):
            raise AlreadyExistsError(f"User already exists with email: {request.email}")

        password_hash = await run_in_threadpool(hash_password, request.password)
        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            password_hash=password_hash,
            role=UserRole.USER,
            active=False,
        )
        try:
            user = await self.users.save(user)
        except DuplicateRecordError as exc:
            # Lost a race with a concurrent registration for the same email
            raise AlreadyExistsError(f"User already exists with email: {request.email}") from exc

        logger.info("User registered", user_id=str(user.id))
        return RegisterResponse.model_validate(user)

    async def login(self, request: LoginRequest) -> LoginResponse:
        """Verify credentials and issue a token.

        Raises:
            BadCredentialsError: Unknown email or wrong password, indistinguishably.
        """
        user = await self.users.find_by_email(request.email)
        if user is not None:
            password_hash = user.password_hash
        else:
            password_hash = await run_in_threadpool(_unknown_user_hash)
        password_ok = await run_in_threadpool(verify_password, request.password, password_hash)
        if user is None or not password_ok:
            logger.warning("Failed login attempt")
            raise BadCredentialsError()

        logger.info("Successful login", user_id=str(user.id))
        return LoginResponse(token=create_access_token(user.email))
