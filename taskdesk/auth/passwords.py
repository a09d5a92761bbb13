from functools import lru_cache

import bcrypt

from taskdesk.core import config

# bcrypt only reads the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("Password cannot be empty")

    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password exceeds maximum length of {MAX_PASSWORD_BYTES} bytes")

    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(encoded, salt).decode("utf-8")


def verify_password(password: str, hashed: str | None) -> bool:
    if not password or not hashed:
        return False

    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False

    try:
        return bcrypt.checkpw(encoded, hashed.encode("utf-8"))
    except ValueError:
        # Malformed or foreign digest.
        return False


@lru_cache(maxsize=None)
def _placeholder_digest(rounds: int) -> str:
    return bcrypt.hashpw(b"no-such-principal", bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_against_placeholder(password: str) -> bool:
    """Spend the same bcrypt work as a real check when no principal matched.

    Always returns False.
    """
    verify_password(password, _placeholder_digest(config.BCRYPT_ROUNDS))
    return False
