"""Error taxonomy surfaced at the HTTP boundary.

Each error is an ``HTTPException`` with a fixed status code, so FastAPI
renders it as ``{"detail": "<message>"}`` without extra handlers.
"""

from fastapi import HTTPException, status


class ServiceError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, headers: dict[str, str] | None = None) -> None:
        super().__init__(status_code=type(self).status_code, detail=detail, headers=headers)


class InvalidInput(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = 'Not authorized') -> None:
        super().__init__(detail, headers={'WWW-Authenticate': 'Bearer'})


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class InternalError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
