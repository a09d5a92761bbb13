"""Admin model definitions."""

from sqlalchemy import Column, Integer, String

from taskdesk.database import Base
from taskdesk.models.mixins import PasswordMixin, TimestampMixin


class Admin(PasswordMixin, TimestampMixin, Base):
    """Represents an administrator account."""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
