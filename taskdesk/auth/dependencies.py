from collections.abc import Callable, Iterable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskdesk.auth import jwt_handler
from taskdesk.auth.jwt_handler import TokenIdentity
from taskdesk.auth.roles import Role
from taskdesk.core.errors import Forbidden, Unauthenticated

security = HTTPBearer(auto_error=False)


def require_roles(allowed_roles: Iterable[Role]) -> Callable[..., TokenIdentity]:
    """Build a request guard admitting only tokens whose role is in ``allowed_roles``.

    The guard never touches the database. On success the resolved identity
    is stored on ``request.state.principal`` and returned to the handler.
    """
    allowed = frozenset(Role(role) for role in allowed_roles)

    def guard(
        request: Request,
        credentials: HTTPAuthorizationCredentials | None = Depends(security),
    ) -> TokenIdentity:
        if credentials is None:
            raise Unauthenticated('Not authorized, no token')

        identity = jwt_handler.validate_access_token(credentials.credentials)
        if identity is None:
            raise Unauthenticated('Not authorized, token failed')

        if identity.role not in allowed:
            raise Forbidden(f"Role '{identity.role.value}' is not authorized to access this route")

        request.state.principal = identity
        return identity

    return guard


admin_only = require_roles({Role.ADMIN})
student_only = require_roles({Role.STUDENT})
