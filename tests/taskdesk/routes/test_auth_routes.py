import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from taskdesk.auth import jwt_handler
from taskdesk.auth.jwt_handler import TokenIdentity
from taskdesk.auth.roles import Role
from taskdesk.routes.auth_routes import LoginRequest, admin_login, student_login
from taskdesk.services import accounts


def test_login_request_rejects_blank_fields() -> None:
    with pytest.raises(ValidationError):
        LoginRequest(email='  ', password='secret1')

    with pytest.raises(ValidationError):
        LoginRequest(email='a@x.com', password='')


def test_admin_login_returns_admin_token(db) -> None:
    admin = accounts.ensure_initial_admin(db, 'a@x.com', 'secret1')

    response = admin_login(LoginRequest(email='a@x.com', password='secret1'), db=db)

    assert response.role == Role.ADMIN
    assert response.email == 'a@x.com'
    assert jwt_handler.validate_access_token(response.token) == TokenIdentity(principal_id=admin.id, role=Role.ADMIN)


@pytest.mark.parametrize(('email', 'password'), [('a@x.com', 'wrong!'), ('missing@x.com', 'secret1')])
def test_admin_login_rejects_bad_credentials_with_same_message(db, email: str, password: str) -> None:
    accounts.ensure_initial_admin(db, 'a@x.com', 'secret1')

    with pytest.raises(HTTPException) as exception_info:
        admin_login(LoginRequest(email=email, password=password), db=db)

    assert exception_info.value.status_code == 401
    assert exception_info.value.detail == 'Invalid email or password'


def test_student_login_returns_student_token_and_name(db, make_student) -> None:
    student = make_student(email='s@x.com', password='abcdef', name='Sam')

    response = student_login(LoginRequest(email='s@x.com', password='abcdef'), db=db)

    assert response.role == Role.STUDENT
    assert response.name == 'Sam'
    assert jwt_handler.validate_access_token(response.token) == TokenIdentity(
        principal_id=student.id,
        role=Role.STUDENT,
    )


def test_student_credentials_do_not_open_admin_login(db, make_student) -> None:
    make_student(email='s@x.com', password='abcdef')

    with pytest.raises(HTTPException) as exception_info:
        admin_login(LoginRequest(email='s@x.com', password='abcdef'), db=db)

    assert exception_info.value.status_code == 401
