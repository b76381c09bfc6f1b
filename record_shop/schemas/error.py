"""Error envelope returned with every non-2xx response."""

from record_shop.schemas.base import CamelModel


class ApiError(CamelModel):
    """``{"statusCode": 404, "message": "NOT_FOUND", "errors": {"message": "..."}}``"""

    status_code: int
    message: str
    errors: dict[str, str]
