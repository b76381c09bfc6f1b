from record_shop.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from record_shop.schemas.error import ApiError
from record_shop.schemas.genre import GenreRequest, GenreResponse

__all__ = [
    "ApiError",
    "GenreRequest",
    "GenreResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
]
