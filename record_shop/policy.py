"""Authorization policy declared as a route table.

Each rule names a method and a route path template exactly as registered on
the app. ``AccessControlledRoute`` runs the authentication filter and then
``enforce_access_policy`` before FastAPI reads the body, so a request the
policy rejects never reaches validation. Routes missing from the table
require an authenticated principal.
"""

from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

from fastapi import Request, Response
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute

from record_shop.auth import Principal, authenticate_request, get_principal
from record_shop.exceptions import AccessDeniedError, AuthenticationRequiredError
from record_shop.models import UserRole


@dataclass(frozen=True)
class AccessRule:
    method: str
    path: str
    authenticated: bool = False
    role: UserRole | None = None

    @property
    def requires_authentication(self) -> bool:
        return self.authenticated or self.role is not None


ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule("POST", "/auth/login"),
    AccessRule("POST", "/auth/register"),
    AccessRule("GET", "/genres/"),
    AccessRule("GET", "/genres/{genre_id}"),
    AccessRule("POST", "/genres/", role=UserRole.ADMIN),
    AccessRule("PUT", "/genres/{genre_id}", role=UserRole.ADMIN),
    AccessRule("DELETE", "/genres/{genre_id}", role=UserRole.ADMIN),
    AccessRule("GET", "/health"),
)

_RULES_BY_ROUTE = {(rule.method, rule.path): rule for rule in ACCESS_RULES}


def find_rule(method: str, path: str) -> AccessRule:
    """Rule for a route template; unlisted routes need authentication."""
    return _RULES_BY_ROUTE.get((method.upper(), path)) or AccessRule(
        method.upper(), path, authenticated=True
    )


def check_access(rule: AccessRule, principal: Principal | None) -> None:
    """Raise when ``principal`` may not use the route."""
    if not rule.requires_authentication:
        return
    if principal is None:
        raise AuthenticationRequiredError()
    if rule.role is not None and not principal.has_authority(rule.role.value):
        raise AccessDeniedError()


def enforce_access_policy(request: Request) -> None:
    """Apply ``ACCESS_RULES`` to the matched route."""
    route: BaseRoute | None = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    check_access(find_rule(request.method, path), get_principal(request))


class AccessControlledRoute(APIRoute):
    """API route that authenticates and authorizes before the endpoint runs.

    The check wraps the whole route handler, ahead of body parsing and
    dependency resolution.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def access_controlled_handler(request: Request) -> Response:
            await authenticate_request(request)
            enforce_access_policy(request)
            return await handler(request)

        return access_controlled_handler
