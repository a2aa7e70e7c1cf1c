from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .task import Task
from .validation import FIELD_LABELS, CamelModel, EmailAddress, RequiredText, reject_null


class EmployeeBase(CamelModel):
    """Base employee schema with common fields."""
    name: RequiredText = Field(max_length=100)
    email: EmailAddress
    department: RequiredText
    position: RequiredText


class EmployeeCreate(EmployeeBase):
    """Schema for creating new employees."""
    pass


class EmployeeUpdate(CamelModel):
    """Schema for partial employee updates; omitted fields keep their value."""
    name: Optional[RequiredText] = Field(default=None, max_length=100)
    email: Optional[EmailAddress] = None
    department: Optional[RequiredText] = None
    position: Optional[RequiredText] = None

    @field_validator("name", "email", "department", "position")
    @classmethod
    def _not_null(cls, value, info):
        return reject_null(value, FIELD_LABELS[info.field_name])

    def changes(self) -> dict:
        """Only the fields present in the payload."""
        return self.model_dump(exclude_unset=True)


class Employee(EmployeeBase):
    """Complete employee schema with all fields."""
    id: int
    created_at: datetime


class EmployeeWithTasks(Employee):
    """Employee with its tasks, newest first."""
    tasks: List[Task] = []
