from abc import ABC, abstractmethod

from src.tasks.schemas import NewTask, Task, TaskSortField


class TaskStore(ABC):
    @abstractmethod
    def task_exists(self, task_id: int) -> bool:
        pass

    @abstractmethod
    def create_task(self, task: NewTask) -> Task:
        pass

    @abstractmethod
    def get_task(self, task_id: int) -> Task:
        pass

    @abstractmethod
    def list_tasks(self, sort_by: TaskSortField = TaskSortField.PRIORITY) -> list[Task]:
        pass

    @abstractmethod
    def update_task(self, task_id: int, updates: dict[str, str | int]) -> int:
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> int:
        pass

    @abstractmethod
    def ping(self) -> bool:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
