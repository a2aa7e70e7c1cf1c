"""Employee persistence: CRUD against the employees table.

Every function takes the caller's session; nothing here holds a global
handle. Writes commit once, so a failed write leaves no partial state behind.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..database import ConstraintKind, classify_integrity_error
from ..errors import DuplicateEmailError, StoreError
from ..models import Employee, Task
from ..schemas.employee import Employee as EmployeeSchema, EmployeeCreate, EmployeeUpdate, EmployeeWithTasks
from ..schemas.task import Task as TaskSchema

logger = logging.getLogger(__name__)


def _commit_employee(db: Session, employee: Employee, operation: str) -> Employee:
    email = employee.email
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        kind = classify_integrity_error(exc)
        if kind is ConstraintKind.UNIQUE:
            logger.warning("Duplicate email rejected", extra={"error_code": "DUPLICATE_EMAIL"})
            raise DuplicateEmailError(email) from exc
        logger.error(f"Constraint violation during {operation}: {exc}")
        raise StoreError(operation) from exc
    db.refresh(employee)
    return employee


def list_employees(db: Session) -> List[Employee]:
    """All employees ordered by name."""
    return list(db.exec(select(Employee).order_by(Employee.name, Employee.id)).all())


def get_employee(db: Session, employee_id: int) -> Optional[Employee]:
    return db.get(Employee, employee_id)


def get_employee_with_tasks(db: Session, employee_id: int) -> Optional[EmployeeWithTasks]:
    """Employee plus its tasks, newest first; None if the employee is missing."""
    employee = db.get(Employee, employee_id)
    if employee is None:
        return None

    tasks = db.exec(
        select(Task)
        .where(Task.employee_id == employee_id)
        .order_by(Task.created_at.desc(), Task.id.desc())
    ).all()

    return EmployeeWithTasks(
        **EmployeeSchema.model_validate(employee).model_dump(),
        tasks=[TaskSchema.model_validate(task) for task in tasks],
    )


def create_employee(db: Session, data: EmployeeCreate) -> Employee:
    """Insert an employee; a colliding email raises DuplicateEmailError."""
    employee = Employee(**data.model_dump())
    db.add(employee)
    employee = _commit_employee(db, employee, "create employee")
    logger.info("Employee created", extra={"employee_id": employee.id})
    return employee


def update_employee(db: Session, employee_id: int, data: EmployeeUpdate) -> Optional[Employee]:
    """Apply only the supplied fields; None if the employee does not exist."""
    employee = db.get(Employee, employee_id)
    if employee is None:
        return None

    changes = data.changes()
    if not changes:
        return employee

    for field, value in changes.items():
        setattr(employee, field, value)

    employee = _commit_employee(db, employee, "update employee")
    logger.info("Employee updated", extra={"employee_id": employee_id})
    return employee


def delete_employee(db: Session, employee_id: int) -> bool:
    """Delete an employee and all of its tasks in one transaction."""
    employee = db.get(Employee, employee_id)
    if employee is None:
        return False

    db.delete(employee)
    db.commit()
    logger.info("Employee deleted", extra={"employee_id": employee_id})
    return True
