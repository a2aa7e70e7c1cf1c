from sqlalchemy import func
from sqlmodel import Session, select

from ..models import Employee, Task, TaskStatus
from ..schemas.dashboard import DashboardStats, EmployeeTaskCount, TaskStatusCounts


def completion_rate(completed: int, total: int) -> int:
    """Completed share of all tasks as a whole percentage; 0 when there are no tasks."""
    if total == 0:
        return 0
    # Half rounds up (2.5% -> 3%), unlike round()'s banker's rounding.
    return (completed * 200 + total) // (total * 2)


def get_dashboard_stats(db: Session) -> DashboardStats:
    counts = {status: 0 for status in TaskStatus}
    for status, count in db.exec(
        select(Task.status, func.count(Task.id)).group_by(Task.status)
    ).all():
        counts[TaskStatus(status)] = count

    total = sum(counts.values())
    completed = counts[TaskStatus.COMPLETED]

    task_count = func.count(Task.id).label("task_count")
    by_employee = db.exec(
        select(Employee.id, Employee.name, task_count)
        .join(Task, Task.employee_id == Employee.id, isouter=True)
        .group_by(Employee.id, Employee.name)
        .order_by(task_count.desc(), Employee.name, Employee.id)
    ).all()

    return DashboardStats(
        total_tasks=total,
        completed_tasks=completed,
        completion_rate=completion_rate(completed, total),
        tasks_by_status=TaskStatusCounts(
            pending=counts[TaskStatus.PENDING],
            in_progress=counts[TaskStatus.IN_PROGRESS],
            completed=completed,
        ),
        tasks_by_employee=[
            EmployeeTaskCount(employee_id=employee_id, employee_name=name, task_count=count)
            for employee_id, name, count in by_employee
        ],
    )
