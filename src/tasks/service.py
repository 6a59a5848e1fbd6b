import logging

from sqlalchemy.exc import SQLAlchemyError

from src.common.exceptions import (
    KnownException,
    ResourceNotFoundException,
)
from src.tasks.schemas import (
    CreateTaskRequest,
    MessageResponse,
    Task,
    TaskSortField,
    UpdateTaskRequest,
)
from src.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, *, task_store: TaskStore) -> None:
        self.task_store = task_store

    def list_tasks(self, sort_by: TaskSortField = TaskSortField.PRIORITY) -> list[Task]:
        return self.task_store.list_tasks(sort_by)

    def create_task(self, task_input: CreateTaskRequest) -> Task:
        task = self.task_store.create_task(task_input.to_new_task())
        logger.info(f"Created task {task.id} with priority {task.priority}")
        return task

    def get_task(self, task_id: int) -> Task:
        return self.task_store.get_task(task_id)

    def update_task(
        self, task_id: int, task_input: UpdateTaskRequest
    ) -> Task | MessageResponse:
        """
        Apply the fields present in the request and return the stored task.

        The write and the read-back are separate statements. If the task cannot
        be read back after a successful write, the update is still reported as
        successful with a plain message.
        """
        updates = task_input.get_updates()
        if not updates:
            raise KnownException("No fields to update provided")

        updated_id = self.task_store.update_task(task_id, updates)

        try:
            return self.task_store.get_task(updated_id)
        except (ResourceNotFoundException, SQLAlchemyError) as e:
            logger.error(f"Error fetching updated task {updated_id}: {e}")
            return MessageResponse(
                message=f"Task with ID {updated_id} updated successfully (could not fetch updated details)"
            )

    def delete_task(self, task_id: int) -> MessageResponse:
        deleted_id = self.task_store.delete_task(task_id)
        logger.info(f"Deleted task {deleted_id}")
        return MessageResponse(message=f"Task with ID {deleted_id} deleted successfully")
