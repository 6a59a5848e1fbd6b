from typing import Annotated
from fastapi import APIRouter, Depends, Path, status

from src.common.exceptions import (
    KnownException,
    ResourceType,
    bad_request_response,
    resource_already_exists_response,
    resource_not_found_response,
)
from src.tasks.dependencies import get_task_service
from src.tasks.schemas import (
    MAX_TASK_ID,
    CreateTaskRequest,
    MessageResponse,
    Task,
    TaskSortField,
    UpdateTaskRequest,
)
from src.tasks.service import TaskService


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)

TaskId = Annotated[int, Path(ge=1, le=MAX_TASK_ID)]


@router.get("", responses={**bad_request_response})
def list_tasks(
    sort_by: TaskSortField = TaskSortField.PRIORITY,
    task_service: TaskService = Depends(get_task_service),
) -> list[Task]:
    return task_service.list_tasks(sort_by)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        **bad_request_response,
        **resource_already_exists_response(ResourceType.TASK),
    },
)
def create_task(
    task_input: CreateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.get(
    "/{task_id}",
    responses={
        **bad_request_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def get_task(
    task_id: TaskId, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_task(task_id)


@router.put(
    "/{task_id}",
    responses={
        **bad_request_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def update_task(
    task_id: TaskId,
    task_input: UpdateTaskRequest,
    task_service: TaskService = Depends(get_task_service),
) -> Task | MessageResponse:
    return task_service.update_task(task_id, task_input)


@router.delete(
    "/{task_id}",
    responses={
        **bad_request_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def delete_task(
    task_id: TaskId, task_service: TaskService = Depends(get_task_service)
) -> MessageResponse:
    return task_service.delete_task(task_id)


@router.api_route(
    "/", methods=["GET", "PUT", "DELETE"], include_in_schema=False
)
def missing_task_id():
    raise KnownException("Invalid task ID")
