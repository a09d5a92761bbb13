"""Column mixins shared by the principal and task models."""

from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.orm import declared_attr, deferred

from taskdesk.auth.passwords import hash_password, verify_password


class TimestampMixin:
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())


class PasswordMixin:
    """Owns the bcrypt digest of a principal.

    Callers only ever hand over plaintext through ``set_password``; the
    digest column is deferred so ordinary reads never load it.
    """

    @declared_attr
    def password_hash(cls):
        return deferred(Column(String, nullable=False))

    def set_password(self, password: str) -> bool:
        """Hash and store ``password`` unless it matches the current digest.

        Returns True when a new digest was written. Raises ``ValueError``
        from the hasher without touching the stored digest.
        """
        if self.password_hash and verify_password(password, self.password_hash):
            return False
        self.password_hash = hash_password(password)
        return True

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)
