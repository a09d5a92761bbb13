"""Task model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from taskdesk.database import Base
from taskdesk.models.mixins import TimestampMixin


class Task(TimestampMixin, Base):
    """Represents a task assigned to a single student."""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    due_date = Column(DateTime, nullable=False)
    status = Column(String, nullable=False, default="pending")  # pending/overdue/completed
