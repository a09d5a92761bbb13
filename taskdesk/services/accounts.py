"""Principal accounts: student registration, login and admin bootstrap."""

import logging

from sqlalchemy.orm import Session

from taskdesk import store
from taskdesk.auth import passwords
from taskdesk.core.errors import Conflict, InvalidInput
from taskdesk.models.admin import Admin
from taskdesk.models.student import Student

logger = logging.getLogger(__name__)


def register_student(db: Session, name: str, email: str, department: str, password: str) -> Student:
    if store.find_by_email(db, Student, email) is not None:
        raise Conflict('Student with this email already exists')

    student = Student(
        name=name.strip(),
        email=store.normalize_email(email),
        department=department.strip(),
    )
    try:
        student.set_password(password)
    except ValueError as exc:
        raise InvalidInput(str(exc)) from exc

    # The lookup above is only a fast path; concurrent registrations are
    # settled by the unique index on students.email.
    try:
        return store.insert(db, student)
    except store.DuplicateRecordError as exc:
        raise Conflict('Student with this email already exists') from exc


def authenticate(db: Session, model: type[Admin] | type[Student], email: str, password: str):
    principal = store.find_by_email(db, model, email)
    if principal is None:
        # Unknown emails still pay for one bcrypt check.
        passwords.verify_against_placeholder(password)
        return None
    if not principal.check_password(password):
        return None
    return principal


def ensure_initial_admin(db: Session, email: str | None, password: str | None) -> Admin | None:
    if not email or not password:
        logger.error('ADMIN_EMAIL or ADMIN_PASSWORD not set; skipping initial admin creation')
        return None

    existing = store.find_by_email(db, Admin, email)
    if existing is not None:
        logger.info('Initial admin already exists')
        return existing

    admin = Admin(email=store.normalize_email(email))
    admin.set_password(password)
    try:
        admin = store.insert(db, admin)
    except store.DuplicateRecordError:
        # Another worker created it between the lookup and the insert.
        logger.info('Initial admin already exists')
        return store.find_by_email(db, Admin, email)

    logger.info('Initial admin created')
    return admin


def clear_admins(db: Session) -> int:
    return store.delete_all(db, Admin)
