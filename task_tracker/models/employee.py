from datetime import datetime, timezone
from typing import List, Optional

from sqlmodel import SQLModel, Field, Relationship


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Employee(SQLModel, table=True):
    """Employee that tasks are assigned to.

    Deleting an employee deletes its tasks: the ORM cascade removes loaded
    children and the foreign key carries ON DELETE CASCADE for everything else.
    """
    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    department: str = Field(index=True)
    position: str
    created_at: datetime = Field(default_factory=utcnow)

    tasks: List["Task"] = Relationship(
        back_populates="employee",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
