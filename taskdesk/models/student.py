"""Student model definitions."""

from sqlalchemy import Column, Integer, String

from taskdesk.database import Base
from taskdesk.models.mixins import PasswordMixin, TimestampMixin


class Student(PasswordMixin, TimestampMixin, Base):
    """Represents a student account."""
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    department = Column(String, nullable=False)
