import pytest
from pydantic import ValidationError

from src.tasks.schemas import CreateTaskRequest, UpdateTaskRequest


def test_create_request_to_new_task_defaults() -> None:
    request = CreateTaskRequest(title="Task", due_date="2024-11-15", priority=3)

    new_task = request.to_new_task()

    assert new_task.id is None
    assert new_task.description == ""
    assert new_task.status == "Pending"


@pytest.mark.parametrize("priority", [0, 4, -1])
def test_create_request_priority_out_of_range(priority: int) -> None:
    with pytest.raises(ValidationError):
        CreateTaskRequest(title="Task", due_date="2024-11-15", priority=priority)


def test_create_request_ignores_unknown_fields() -> None:
    request = CreateTaskRequest.model_validate(
        {"title": "Task", "due_date": "2024-11-15", "priority": 1, "owner": "x"}
    )

    assert not hasattr(request, "owner")


def test_update_request_get_updates_only_present_fields() -> None:
    request = UpdateTaskRequest.model_validate({"status": "Completed", "owner": "x"})

    assert request.get_updates() == {"status": "Completed"}


def test_update_request_get_updates_skips_null_values() -> None:
    request = UpdateTaskRequest.model_validate({"status": None, "priority": 2})

    assert request.get_updates() == {"priority": 2}


def test_update_request_allows_clearing_description() -> None:
    request = UpdateTaskRequest.model_validate({"description": ""})

    assert request.get_updates() == {"description": ""}


@pytest.mark.parametrize(
    "payload",
    [
        {"title": ""},
        {"due_date": " "},
        {"status": ""},
        {"priority": 9},
        {"priority": True},
        {"priority": 1.0},
    ],
)
def test_update_request_invalid(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        UpdateTaskRequest.model_validate(payload)
