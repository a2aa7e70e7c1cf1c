"""Shared fixtures: every test gets its own in-memory database."""

import os

os.environ.setdefault("SEED_DATABASE", "false")

import pytest
from fastapi.testclient import TestClient

from task_tracker.database import create_db_engine, create_session_factory, create_tables
from task_tracker.main import create_app


@pytest.fixture
def app():
    return create_app(database_url="sqlite://", seed=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db():
    engine = create_db_engine("sqlite://")
    create_tables(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def make_employee(client):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "name": f"Employee {counter['n']}",
            "email": f"employee{counter['n']}@company.com",
            "department": "Engineering",
            "position": "Developer",
        }
        payload.update(overrides)
        response = client.post("/api/employees", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_task(client):

    def _make(employee_id, **overrides):
        payload = {"title": "Write report", "employeeId": employee_id}
        payload.update(overrides)
        response = client.post("/api/tasks", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
