"""Sample data bootstrap."""

from fastapi.testclient import TestClient
from sqlalchemy import func
from sqlmodel import select

from task_tracker.main import create_app
from task_tracker.models import Employee, Task
from task_tracker.schemas.employee import EmployeeCreate
from task_tracker.seed import SAMPLE_EMPLOYEES, SAMPLE_TASKS, seed_database
from task_tracker.storage import employees as employee_store


def _counts(db):
    employees = db.exec(select(func.count(Employee.id))).one()
    tasks = db.exec(select(func.count(Task.id))).one()
    return employees, tasks


def test_seed_fills_empty_database(db):
    assert seed_database(db) is True
    assert _counts(db) == (len(SAMPLE_EMPLOYEES), len(SAMPLE_TASKS))


def test_seed_runs_once(db):
    seed_database(db)
    assert seed_database(db) is False
    assert _counts(db) == (len(SAMPLE_EMPLOYEES), len(SAMPLE_TASKS))


def test_seed_skipped_when_any_employee_exists(db):
    employee_store.create_employee(db, EmployeeCreate(
        name="Solo", email="solo@company.com", department="Ops", position="Dev",
    ))

    assert seed_database(db) is False
    assert _counts(db) == (1, 0)


def test_app_startup_creates_schema_and_seeds():
    app = create_app(database_url="sqlite://", seed=True)
    with TestClient(app) as client:
        employees = client.get("/api/employees").json()
        stats = client.get("/api/dashboard").json()

    assert len(employees) == len(SAMPLE_EMPLOYEES)
    assert stats["totalTasks"] == len(SAMPLE_TASKS)
    assert stats["completedTasks"] == 8
    assert stats["completionRate"] == 33
