from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..database import get_db
from ..errors import InputValidationError, NotFoundError
from ..models import TaskStatus
from ..schemas.common import MessageResponse
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskDetail, TaskUpdate, TaskWithEmployee
from ..schemas.validation import parse_id
from ..storage import tasks as task_store

router = APIRouter()


def _task_id(raw: str) -> int:
    return parse_id(raw, "Invalid task ID")


def _status_filter(raw: Optional[str]) -> Optional[TaskStatus]:
    if not raw:
        return None
    try:
        return TaskStatus(raw)
    except ValueError:
        raise InputValidationError(["Invalid status value"])


@router.get("/tasks", response_model=List[TaskWithEmployee])
def list_tasks(
    status: Optional[str] = None,
    employee_id: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """List tasks, optionally filtered by status and/or employee.

    Both filters together return only tasks matching both.
    """
    status_filter = _status_filter(status)
    employee_filter = parse_id(employee_id, "Invalid employee_id") if employee_id else None
    return task_store.list_tasks(db, status=status_filter, employee_id=employee_filter)


@router.get("/tasks/{task_id}", response_model=TaskDetail)
def get_task(task_id: str, db: Session = Depends(get_db)):
    task = task_store.get_task(db, _task_id(task_id))
    if task is None:
        raise NotFoundError("Task", task_id)
    return task


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, db: Session = Depends(get_db)):
    """Create a task for an existing employee.

    An unknown employeeId is a 400, not a 404: the task itself was never
    looked up.
    """
    return task_store.create_task(db, task)


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(task_id: str, task_update: TaskUpdate, db: Session = Depends(get_db)):
    task = task_store.update_task(db, _task_id(task_id), task_update)
    if task is None:
        raise NotFoundError("Task", task_id)
    return task


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    if not task_store.delete_task(db, _task_id(task_id)):
        raise NotFoundError("Task", task_id)
    return {"message": "Task deleted successfully"}
