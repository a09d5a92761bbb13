from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from taskdesk.auth.dependencies import student_only
from taskdesk.auth.jwt_handler import TokenIdentity
from taskdesk.database import get_db
from taskdesk.routes.schemas import TaskMessageResponse, TaskResponse
from taskdesk.services import tasks

router = APIRouter(tags=['student'])


class UpdateTaskStatusRequest(BaseModel):
    status: str | None = None


@router.get('/tasks', response_model=list[TaskResponse])
def list_my_tasks(
    principal: TokenIdentity = Depends(student_only),
    db: Session = Depends(get_db),
):
    return tasks.list_student_tasks(db, principal.principal_id)


@router.put('/tasks/{task_id}', response_model=TaskMessageResponse)
def update_my_task_status(
    task_id: int,
    data: UpdateTaskStatusRequest,
    principal: TokenIdentity = Depends(student_only),
    db: Session = Depends(get_db),
):
    task = tasks.update_task_status(db, principal.principal_id, task_id, data.status)
    return TaskMessageResponse(message='Task status updated successfully', task=TaskResponse.model_validate(task))
