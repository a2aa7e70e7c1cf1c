"""HTTP mapping of the task and dashboard endpoints."""

import pytest


def test_create_task_defaults(client, make_employee):
    employee = make_employee()

    response = client.post("/api/tasks", json={"title": "Write docs", "employeeId": employee["id"]})

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["priority"] == "medium"
    assert body["description"] is None
    assert body["dueDate"] is None
    assert body["employeeId"] == employee["id"]
    assert {"id", "createdAt", "updatedAt"} <= set(body)


def test_create_task_for_unknown_employee_is_400(client):
    response = client.post("/api/tasks", json={"title": "Orphan", "employeeId": 99})

    assert response.status_code == 400
    assert response.json() == {"error": "Employee not found"}
    assert client.get("/api/tasks").json() == []


def test_create_task_validation_errors(client):
    response = client.post("/api/tasks", json={
        "title": "",
        "employeeId": "7",
        "status": "blocked",
        "dueDate": "tomorrow",
    })

    assert response.status_code == 400
    assert response.json() == {"error": ", ".join([
        "Title is required",
        "Status must be 'pending', 'in-progress', or 'completed'",
        "Employee ID must be a number",
        "Due date must be in YYYY-MM-DD format",
    ])}


def test_well_shaped_but_impossible_due_date_is_accepted(client, make_employee):
    employee = make_employee()

    response = client.post("/api/tasks", json={
        "title": "Odd date", "employeeId": employee["id"], "dueDate": "2025-13-01",
    })

    assert response.status_code == 201
    assert response.json()["dueDate"] == "2025-13-01"


def test_list_tasks_with_filters(client, make_employee, make_task):
    ann = make_employee(name="Ann")
    bob = make_employee(name="Bob")
    a1 = make_task(ann["id"], title="a1", status="completed")
    make_task(ann["id"], title="a2")
    make_task(bob["id"], title="b1", status="completed")
    a3 = make_task(ann["id"], title="a3", status="completed")

    response = client.get("/api/tasks", params={"status": "completed", "employee_id": ann["id"]})

    assert response.status_code == 200
    body = response.json()
    assert [t["id"] for t in body] == [a3["id"], a1["id"]]
    assert {t["employeeName"] for t in body} == {"Ann"}


def test_list_tasks_without_filters_returns_all_newest_first(client, make_employee, make_task):
    employee = make_employee()
    first = make_task(employee["id"], title="first")
    second = make_task(employee["id"], title="second")

    body = client.get("/api/tasks").json()

    assert [t["id"] for t in body] == [second["id"], first["id"]]


def test_list_tasks_rejects_bad_filters(client):
    response = client.get("/api/tasks", params={"status": "finished"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid status value"}

    response = client.get("/api/tasks", params={"employee_id": "abc"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid employee_id"}


def test_get_task_detail(client, make_employee, make_task):
    employee = make_employee(name="Ann", email="ann@company.com")
    task = make_task(employee["id"], priority="high")

    response = client.get(f"/api/tasks/{task['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["priority"] == "high"
    assert body["employeeName"] == "Ann"
    assert body["employeeEmail"] == "ann@company.com"


def test_get_task_errors(client):
    assert client.get("/api/tasks/one").json() == {"error": "Invalid task ID"}
    response = client.get("/api/tasks/5")
    assert response.status_code == 404
    assert response.json() == {"error": "Task not found"}


def test_update_task_partial(client, make_employee, make_task):
    employee = make_employee()
    task = make_task(employee["id"], description="keep me", dueDate="2025-02-01")

    response = client.put(f"/api/tasks/{task['id']}", json={"status": "in-progress"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "in-progress"
    assert body["description"] == "keep me"
    assert body["dueDate"] == "2025-02-01"
    assert body["createdAt"] == task["createdAt"]
    assert body["updatedAt"] >= task["updatedAt"]


def test_update_task_can_clear_due_date(client, make_employee, make_task):
    employee = make_employee()
    task = make_task(employee["id"], dueDate="2025-02-01")

    response = client.put(f"/api/tasks/{task['id']}", json={"dueDate": None})

    assert response.status_code == 200
    assert response.json()["dueDate"] is None


def test_update_task_errors(client, make_employee, make_task):
    employee = make_employee()
    task = make_task(employee["id"])

    assert client.put("/api/tasks/abc", json={}).json() == {"error": "Invalid task ID"}
    assert client.put("/api/tasks/999", json={"title": "x"}).status_code == 404

    response = client.put(f"/api/tasks/{task['id']}", json={"employeeId": 999})
    assert response.status_code == 400
    assert response.json() == {"error": "Employee not found"}

    response = client.put(f"/api/tasks/{task['id']}", json={"priority": "urgent"})
    assert response.status_code == 400
    assert response.json() == {"error": "Priority must be 'low', 'medium', or 'high'"}


def test_delete_task(client, make_employee, make_task):
    employee = make_employee()
    task = make_task(employee["id"])

    response = client.delete(f"/api/tasks/{task['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Task deleted successfully"}

    assert client.delete(f"/api/tasks/{task['id']}").status_code == 404
    assert client.delete("/api/tasks/zero").status_code == 400


def test_dashboard(client, make_employee, make_task):
    ann = make_employee(name="Ann")
    idle = make_employee(name="Idle")
    make_task(ann["id"], status="completed")
    make_task(ann["id"], status="in-progress")
    make_task(ann["id"])

    response = client.get("/api/dashboard")

    assert response.status_code == 200
    assert response.json() == {
        "totalTasks": 3,
        "completedTasks": 1,
        "completionRate": 33,
        "tasksByStatus": {"pending": 1, "in-progress": 1, "completed": 1},
        "tasksByEmployee": [
            {"employeeId": ann["id"], "employeeName": "Ann", "taskCount": 3},
            {"employeeId": idle["id"], "employeeName": "Idle", "taskCount": 0},
        ],
    }


def test_new_task_has_matching_timestamps(client, make_employee, make_task):
    task = make_task(make_employee()["id"])

    assert task["createdAt"] == task["updatedAt"]


@pytest.mark.parametrize("method", ["get", "delete"])
def test_task_id_beyond_row_id_range_is_invalid(client, method):
    response = getattr(client, method)("/api/tasks/99999999999999999999")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid task ID"}


def test_task_employee_id_beyond_row_id_range(client, make_employee, make_task):
    task = make_task(make_employee()["id"])
    huge = 99999999999999999999

    response = client.post("/api/tasks", json={"title": "Far", "employeeId": huge})
    assert response.status_code == 400
    assert response.json() == {"error": "Employee not found"}

    response = client.put(f"/api/tasks/{task['id']}", json={"employeeId": huge})
    assert response.status_code == 400
    assert response.json() == {"error": "Employee not found"}

    response = client.get("/api/tasks", params={"employee_id": str(huge)})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid employee_id"}
