"""Response models shared by the route modules."""

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class TaskResponse(BaseModel):
    id: int
    student_id: int
    title: str
    description: str
    due_date: datetime
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class TaskMessageResponse(BaseModel):
    message: str
    task: TaskResponse


class StudentSummaryResponse(BaseModel):
    id: int
    name: str
    email: str
    department: str

    class Config:
        from_attributes = True
