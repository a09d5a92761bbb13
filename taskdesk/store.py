"""Generic record-store operations over principals and tasks.

Every SQLAlchemy failure is rolled back and re-raised as ``StoreError`` so
callers never see driver exceptions. A unique-constraint violation on insert
is reported as ``DuplicateRecordError``; other integrity failures stay
plain ``StoreError``s.
"""

import logging
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from taskdesk.database import Base

logger = logging.getLogger(__name__)

RecordT = TypeVar('RecordT', bound=Base)

# Primary keys are INTEGER columns; anything outside that range cannot exist.
MAX_RECORD_ID = 2**31 - 1

UNIQUE_VIOLATION_SQLSTATE = '23505'


class StoreError(Exception):
    """Raised when the record store cannot complete an operation."""


class DuplicateRecordError(StoreError):
    """Raised when an insert violates a uniqueness constraint."""


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_storable_id(record_id: int) -> bool:
    return 1 <= record_id <= MAX_RECORD_ID


def is_unique_violation(exc: IntegrityError) -> bool:
    code = getattr(exc.orig, 'pgcode', None) or getattr(exc.orig, 'sqlstate', None)
    if code:
        return code == UNIQUE_VIOLATION_SQLSTATE
    return 'unique' in str(exc.orig).lower()


def find_by_email(db: Session, model: type[RecordT], email: str) -> RecordT | None:
    try:
        return db.query(model).filter(model.email == normalize_email(email)).first()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f'Failed to look up {model.__tablename__} by email') from exc


def find_by_id(db: Session, model: type[RecordT], record_id: int) -> RecordT | None:
    if not is_storable_id(record_id):
        return None
    try:
        return db.get(model, record_id)
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f'Failed to look up {model.__tablename__} by id') from exc


def insert(db: Session, record: RecordT) -> RecordT:
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            raise DuplicateRecordError(f'Duplicate {record.__tablename__} record') from exc
        raise StoreError(f'Failed to insert {record.__tablename__} record') from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f'Failed to insert {record.__tablename__} record') from exc

    return record


def save(db: Session, record: RecordT) -> RecordT:
    try:
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f'Failed to save {record.__tablename__} record') from exc

    return record


def delete_all(db: Session, model: type[RecordT]) -> int:
    try:
        deleted = db.query(model).delete()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f'Failed to delete {model.__tablename__} records') from exc

    logger.info('Deleted %d %s record(s)', deleted, model.__tablename__)
    return deleted


def find_one(db: Session, model: type[RecordT], *criteria) -> RecordT | None:
    try:
        return db.query(model).filter(*criteria).first()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f'Failed to look up {model.__tablename__} record') from exc


def find_all(db: Session, model: type[RecordT], *criteria, order_by=()) -> list[RecordT]:
    try:
        return db.query(model).filter(*criteria).order_by(*order_by).all()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(f'Failed to list {model.__tablename__} records') from exc
