from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from taskdesk.auth import jwt_handler
from taskdesk.auth.roles import Role
from taskdesk.core.errors import Unauthenticated
from taskdesk.database import get_db
from taskdesk.models.admin import Admin
from taskdesk.models.student import Student
from taskdesk.services import accounts

router = APIRouter(tags=['auth'])

INVALID_CREDENTIALS = 'Invalid email or password'


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator('email', 'password')
    @classmethod
    def validate_required(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError('Email and password are required')
        return value


class AdminLoginResponse(BaseModel):
    token: str
    role: Role
    email: str


class StudentLoginResponse(BaseModel):
    token: str
    role: Role
    name: str


@router.post('/admin/login', response_model=AdminLoginResponse)
def admin_login(data: LoginRequest, db: Session = Depends(get_db)):
    admin = accounts.authenticate(db, Admin, data.email, data.password)
    if admin is None:
        raise Unauthenticated(INVALID_CREDENTIALS)

    token = jwt_handler.create_access_token(admin.id, Role.ADMIN)
    return AdminLoginResponse(token=token, role=Role.ADMIN, email=admin.email)


@router.post('/student/login', response_model=StudentLoginResponse)
def student_login(data: LoginRequest, db: Session = Depends(get_db)):
    student = accounts.authenticate(db, Student, data.email, data.password)
    if student is None:
        raise Unauthenticated(INVALID_CREDENTIALS)

    token = jwt_handler.create_access_token(student.id, Role.STUDENT)
    return StudentLoginResponse(token=token, role=Role.STUDENT, name=student.name)
