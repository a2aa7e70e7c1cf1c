from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ..models import TaskPriority, TaskStatus
from .validation import FIELD_LABELS, CamelModel, DueDate, EmployeeId, RequiredText, reject_null


class TaskBase(CamelModel):
    """Base task schema with common fields."""
    title: RequiredText = Field(max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: TaskStatus = TaskStatus.PENDING
    employee_id: EmployeeId
    due_date: Optional[DueDate] = None
    priority: TaskPriority = TaskPriority.MEDIUM


class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    pass


class TaskUpdate(CamelModel):
    """Schema for partial task updates.

    description and dueDate may be set to null to clear them; every other
    field may be omitted but not nulled.
    """
    title: Optional[RequiredText] = Field(default=None, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: Optional[TaskStatus] = None
    employee_id: Optional[EmployeeId] = None
    due_date: Optional[DueDate] = None
    priority: Optional[TaskPriority] = None

    @field_validator("title", "status", "employee_id", "priority")
    @classmethod
    def _not_null(cls, value, info):
        label = FIELD_LABELS["employeeId" if info.field_name == "employee_id" else info.field_name]
        return reject_null(value, label)

    def changes(self) -> dict:
        """Only the fields present in the payload."""
        return self.model_dump(exclude_unset=True)


class Task(TaskBase):
    """Complete task schema with all fields."""
    id: int
    created_at: datetime
    updated_at: datetime


class TaskWithEmployee(Task):
    """Task row in listings, with the owner's name."""
    employee_name: str


class TaskDetail(TaskWithEmployee):
    """Single task with the owner's name and email."""
    employee_email: str
