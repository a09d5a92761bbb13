import logging
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from taskdesk.auth.roles import Role
from taskdesk.core import config

logger = logging.getLogger(__name__)


class TokenIdentity(BaseModel):
    """Identity carried by a validated access token."""
    principal_id: int
    role: Role

    class Config:
        frozen = True


def create_access_token(
    principal_id: int,
    role: Role,
    expires_delta: timedelta | None = None,
    now: datetime | None = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(minutes=config.JWT_EXPIRES_MINUTES))
    payload = {"sub": str(principal_id), "role": Role(role).value, "exp": expire}
    return jwt.encode(payload, config.JWT_SECRET_KEY, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.JWT_SECRET_KEY,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["exp", "sub", "role"]},
    )


def validate_access_token(token: str | None) -> TokenIdentity | None:
    """Return the identity encoded in ``token``, or None if it is unusable.

    Missing, malformed, tampered and expired tokens all yield None.
    """
    if not token:
        return None

    try:
        payload = decode_access_token(token)
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
        return None
    except jwt.InvalidTokenError as exc:
        logger.warning("Rejected invalid access token: %s", type(exc).__name__)
        return None

    try:
        return TokenIdentity(principal_id=int(payload["sub"]), role=Role(payload["role"]))
    except (TypeError, ValueError):
        logger.warning("Rejected access token with malformed claims")
        return None
