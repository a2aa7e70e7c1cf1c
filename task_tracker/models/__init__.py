from .employee import Employee
from .task import Task, TaskPriority, TaskStatus

# Export all models for easy importing
__all__ = ["Employee", "Task", "TaskPriority", "TaskStatus"]
