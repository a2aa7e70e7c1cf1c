from typing import List

from pydantic import Field

from .validation import CamelModel


class TaskStatusCounts(CamelModel):
    pending: int = 0
    in_progress: int = Field(default=0, alias="in-progress")
    completed: int = 0


class EmployeeTaskCount(CamelModel):
    employee_id: int
    employee_name: str
    task_count: int


class DashboardStats(CamelModel):
    """Aggregate task statistics for the dashboard."""
    total_tasks: int
    completed_tasks: int
    completion_rate: int
    tasks_by_status: TaskStatusCounts
    tasks_by_employee: List[EmployeeTaskCount]
