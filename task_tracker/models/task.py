from datetime import datetime
from typing import Optional
import enum

from sqlalchemy import Enum
from sqlmodel import SQLModel, Field, Relationship

from .employee import utcnow


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _enum_column(enum_cls, name: str) -> Enum:
    # Persist the wire values ("in-progress"), not the member names, and
    # enforce membership with a CHECK constraint.
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        create_constraint=True,
        length=20,
        values_callable=lambda members: [m.value for m in members],
    )


class Task(SQLModel, table=True):
    """Task owned by exactly one employee."""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    status: TaskStatus = Field(
        default=TaskStatus.PENDING,
        index=True,
        sa_type=_enum_column(TaskStatus, "task_status"),
    )
    employee_id: int = Field(foreign_key="employees.id", ondelete="CASCADE", index=True)
    due_date: Optional[str] = Field(default=None, index=True, max_length=10)
    priority: TaskPriority = Field(
        default=TaskPriority.MEDIUM,
        sa_type=_enum_column(TaskPriority, "task_priority"),
    )
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    employee: Optional["Employee"] = Relationship(back_populates="tasks")
