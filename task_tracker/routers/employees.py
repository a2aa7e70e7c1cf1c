from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from ..database import get_db
from ..errors import NotFoundError
from ..schemas.common import MessageResponse
from ..schemas.employee import Employee as EmployeeSchema, EmployeeCreate, EmployeeUpdate, EmployeeWithTasks
from ..schemas.validation import parse_id
from ..storage import employees as employee_store

router = APIRouter()


def _employee_id(raw: str) -> int:
    return parse_id(raw, "Invalid employee ID")


@router.get("/employees", response_model=List[EmployeeSchema])
def list_employees(db: Session = Depends(get_db)):
    """List all employees ordered by name."""
    return employee_store.list_employees(db)


@router.get("/employees/{employee_id}", response_model=EmployeeWithTasks)
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    """Get an employee together with its tasks."""
    employee = employee_store.get_employee_with_tasks(db, _employee_id(employee_id))
    if employee is None:
        raise NotFoundError("Employee", employee_id)
    return employee


@router.post("/employees", response_model=EmployeeSchema, status_code=status.HTTP_201_CREATED)
def create_employee(employee: EmployeeCreate, db: Session = Depends(get_db)):
    return employee_store.create_employee(db, employee)


@router.put("/employees/{employee_id}", response_model=EmployeeSchema)
def update_employee(employee_id: str, employee_update: EmployeeUpdate, db: Session = Depends(get_db)):
    """Partially update an employee; omitted fields are left unchanged."""
    employee = employee_store.update_employee(db, _employee_id(employee_id), employee_update)
    if employee is None:
        raise NotFoundError("Employee", employee_id)
    return employee


@router.delete("/employees/{employee_id}", response_model=MessageResponse)
def delete_employee(employee_id: str, db: Session = Depends(get_db)):
    """Delete an employee and every task assigned to it."""
    if not employee_store.delete_employee(db, _employee_id(employee_id)):
        raise NotFoundError("Employee", employee_id)
    return {"message": "Employee deleted successfully"}
