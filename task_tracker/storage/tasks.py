import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..database import ConstraintKind, classify_integrity_error
from ..errors import ReferentialViolationError, StoreError
from ..models import Employee, Task, TaskStatus
from ..models.employee import utcnow
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskDetail, TaskUpdate, TaskWithEmployee

logger = logging.getLogger(__name__)


def _ensure_employee(db: Session, employee_id: int) -> None:
    if db.get(Employee, employee_id) is None:
        raise ReferentialViolationError(employee_id)


def _commit_task(db: Session, task: Task, employee_id: int, operation: str) -> Task:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        # The employee can vanish between the existence check and the commit;
        # the foreign key is the authoritative check.
        if classify_integrity_error(exc) is ConstraintKind.FOREIGN_KEY:
            raise ReferentialViolationError(employee_id) from exc
        logger.error(f"Constraint violation during {operation}: {exc}")
        raise StoreError(operation) from exc
    db.refresh(task)
    return task


def list_tasks(
    db: Session,
    status: Optional[TaskStatus] = None,
    employee_id: Optional[int] = None,
) -> List[TaskWithEmployee]:
    """Tasks with their owner's name, newest first.

    Filters are AND-combined when both are given.
    """
    query = select(Task, Employee.name).join(Employee, Task.employee_id == Employee.id)

    if status is not None:
        query = query.where(Task.status == status)
    if employee_id is not None:
        query = query.where(Task.employee_id == employee_id)

    query = query.order_by(Task.created_at.desc(), Task.id.desc())

    return [
        TaskWithEmployee(**TaskSchema.model_validate(task).model_dump(), employee_name=name)
        for task, name in db.exec(query).all()
    ]


def get_task(db: Session, task_id: int) -> Optional[TaskDetail]:
    """Single task with its owner's name and email."""
    row = db.exec(
        select(Task, Employee.name, Employee.email)
        .join(Employee, Task.employee_id == Employee.id)
        .where(Task.id == task_id)
    ).first()
    if row is None:
        return None

    task, name, email = row
    return TaskDetail(
        **TaskSchema.model_validate(task).model_dump(),
        employee_name=name,
        employee_email=email,
    )


def create_task(db: Session, data: TaskCreate) -> Task:
    """Insert a task owned by an existing employee.

    Raises ReferentialViolationError if the employee does not exist.
    """
    _ensure_employee(db, data.employee_id)

    now = utcnow()
    task = Task(**data.model_dump(), created_at=now, updated_at=now)
    db.add(task)
    task = _commit_task(db, task, data.employee_id, "create task")
    logger.info("Task created", extra={"task_id": task.id, "employee_id": task.employee_id})
    return task


def update_task(db: Session, task_id: int, data: TaskUpdate) -> Optional[Task]:
    """Apply only the supplied fields and refresh updated_at.

    updated_at moves forward even when the payload is empty.
    """
    task = db.get(Task, task_id)
    if task is None:
        return None

    changes = data.changes()
    if "employee_id" in changes:
        _ensure_employee(db, changes["employee_id"])

    for field, value in changes.items():
        setattr(task, field, value)

    task.updated_at = utcnow()

    task = _commit_task(db, task, task.employee_id, "update task")
    logger.info("Task updated", extra={"task_id": task_id})
    return task


def delete_task(db: Session, task_id: int) -> bool:
    task = db.get(Task, task_id)
    if task is None:
        return False

    db.delete(task)
    db.commit()
    logger.info("Task deleted", extra={"task_id": task_id})
    return True
