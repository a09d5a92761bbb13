import re

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator
from sqlalchemy.orm import Session

from taskdesk.auth.dependencies import admin_only
from taskdesk.auth.jwt_handler import TokenIdentity
from taskdesk.auth.passwords import MAX_PASSWORD_BYTES
from taskdesk.database import get_db
from taskdesk.routes.schemas import StudentSummaryResponse, TaskMessageResponse, TaskResponse
from taskdesk.services import accounts, tasks

router = APIRouter(tags=['admin'])

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_PASSWORD_LENGTH = 6


class AddStudentRequest(BaseModel):
    name: str
    email: str
    department: str
    password: str

    @field_validator('name', 'department')
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Please provide all required fields: name, email, department, password')
        return normalized

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError('Please provide all required fields: name, email, department, password')
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError('Invalid email format')
        return normalized

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters long')
        if len(value.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValueError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes long')
        return value


class AddStudentResponse(BaseModel):
    message: str
    student: StudentSummaryResponse


class AssignTaskRequest(BaseModel):
    student_id: int = Field(alias='studentId')
    title: str
    description: str | None = None
    due_date: str = Field(alias='dueDate')

    class Config:
        populate_by_name = True

    @field_validator('title')
    @classmethod
    def validate_title(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Please provide required fields: studentId, title, dueDate')
        return normalized


@router.post('/add-student', response_model=AddStudentResponse, status_code=status.HTTP_201_CREATED)
def add_student(
    data: AddStudentRequest,
    principal: TokenIdentity = Depends(admin_only),
    db: Session = Depends(get_db),
):
    student = accounts.register_student(
        db,
        name=data.name,
        email=data.email,
        department=data.department,
        password=data.password,
    )
    return AddStudentResponse(
        message='Student added successfully',
        student=StudentSummaryResponse.model_validate(student),
    )


@router.post('/assign-task', response_model=TaskMessageResponse, status_code=status.HTTP_201_CREATED)
def assign_task(
    data: AssignTaskRequest,
    principal: TokenIdentity = Depends(admin_only),
    db: Session = Depends(get_db),
):
    task = tasks.assign_task(
        db,
        student_id=data.student_id,
        title=data.title,
        due_date=data.due_date,
        description=data.description,
    )
    return TaskMessageResponse(message='Task assigned successfully', task=TaskResponse.model_validate(task))
