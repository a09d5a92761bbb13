"""Task lifecycle: creation, listing and student status updates.

Tasks start as ``pending``. A student may move a task they own to any
status in ``TaskStatus``; there is no time-based transition to ``overdue``.
Tasks owned by someone else are reported exactly like missing ones.
"""

from datetime import date, datetime, timezone
from enum import Enum

from sqlalchemy.orm import Session

from taskdesk import store
from taskdesk.core.errors import InvalidInput, NotFound
from taskdesk.models.student import Student
from taskdesk.models.task import Task


class TaskStatus(str, Enum):
    PENDING = 'pending'
    OVERDUE = 'overdue'
    COMPLETED = 'completed'


VALID_STATUSES = tuple(status.value for status in TaskStatus)


def parse_due_date(value: str | datetime | date | None) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith(('Z', 'z')):
            raw = raw[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise InvalidInput('Invalid dueDate format') from exc
    else:
        raise InvalidInput('Invalid dueDate format')

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_status(value: str | None) -> TaskStatus:
    if not value:
        raise InvalidInput('Status field is required')

    try:
        return TaskStatus(value)
    except ValueError as exc:
        raise InvalidInput(
            f"Invalid task status. Must be one of: {', '.join(VALID_STATUSES)}"
        ) from exc


def assign_task(
    db: Session,
    student_id: int,
    title: str,
    due_date: str | datetime | date,
    description: str | None = None,
) -> Task:
    parsed_due_date = parse_due_date(due_date)

    if store.find_by_id(db, Student, student_id) is None:
        raise NotFound('Student not found')

    task = Task(
        student_id=student_id,
        title=title,
        description=description or '',
        due_date=parsed_due_date,
        status=TaskStatus.PENDING.value,
    )
    return store.insert(db, task)


def list_student_tasks(db: Session, student_id: int) -> list[Task]:
    return store.find_all(
        db,
        Task,
        Task.student_id == student_id,
        order_by=(Task.due_date.asc(), Task.id.asc()),
    )


def update_task_status(db: Session, student_id: int, task_id: int, status: str | None) -> Task:
    new_status = parse_status(status)

    task = None
    if store.is_storable_id(task_id):
        task = store.find_one(db, Task, Task.id == task_id, Task.student_id == student_id)
    if task is None:
        raise NotFound('Task not found or not assigned to this student')

    task.status = new_status.value
    return store.save(db, task)
