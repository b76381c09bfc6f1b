"""Authentication API router."""

from fastapi import APIRouter

from record_shop.deps import AuthServiceDep
from record_shop.policy import AccessControlledRoute
from record_shop.schemas import ApiError, LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

router = APIRouter(prefix="/auth", tags=["auth"], route_class=AccessControlledRoute)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ApiError}, 401: {"model": ApiError}},
)
async def login(data: LoginRequest, service: AuthServiceDep) -> LoginResponse:
    """Login existing user and return token."""
    return await service.login(data)


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={400: {"model": ApiError}},
)
async def register(data: RegisterRequest, service: AuthServiceDep) -> RegisterResponse:
    """Register new user."""
    return await service.register(data)
