from typing import Any
from fastapi.testclient import TestClient


def create_task(client: TestClient, **overrides: Any) -> dict[str, Any]:
    """Helper to create a task through the API and return its body."""

    payload: dict[str, Any] = {
        "title": "New Task for Test",
        "description": "This is a test task",
        "due_date": "2024-11-15",
        "priority": 1,
    }
    payload.update(overrides)

    response = client.post("/tasks", json=payload)
    assert response.status_code == 201, response.text
    return response.json()
