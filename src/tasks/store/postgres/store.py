import logging
from typing import Any
from sqlalchemy import create_engine, delete, func, select, text, update
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import IntegrityError

from src.common.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ResourceType,
)
from src.tasks.schemas import NewTask, Task, TaskSortField
from src.tasks.store.base import TaskStore
from src.tasks.store.postgres.model import Base, create_task_model

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "due_date", "priority", "status")


class PostgresTaskStore(TaskStore):
    def __init__(self, *, database_url: str, table_name: str):
        self.engine = create_engine(database_url)
        self.Session = sessionmaker(bind=self.engine)
        self.TaskModel = create_task_model(table_name)

        Base.metadata.create_all(self.engine, tables=[self.TaskModel.__table__])

    def _map_task(self, task: Any) -> Task:
        return Task(
            id=task.id,
            title=task.title,
            description=task.description or "",
            due_date=task.due_date,
            priority=task.priority,
            status=task.status,
        )

    def _order_by(self, sort_by: TaskSortField) -> list[Any]:
        if sort_by == TaskSortField.DUE_DATE:
            return [
                self.TaskModel.due_date.asc(),
                self.TaskModel.priority.asc(),
                self.TaskModel.id.asc(),
            ]
        return [
            self.TaskModel.priority.asc(),
            self.TaskModel.due_date.asc(),
            self.TaskModel.id.asc(),
        ]

    def _sync_id_sequence_statement(self) -> Any:
        table = self.TaskModel.__table__
        quoted_table = self.engine.dialect.identifier_preparer.format_table(table)
        return select(
            func.setval(
                func.pg_get_serial_sequence(quoted_table, "id"),
                select(func.coalesce(func.max(self.TaskModel.id), 1)).scalar_subquery(),
            )
        )

    def _sync_id_sequence(self, session: Any) -> None:
        # Explicit ids bypass the serial sequence on Postgres
        if self.engine.dialect.name != "postgresql":
            return

        session.execute(self._sync_id_sequence_statement())

    def task_exists(self, task_id: int) -> bool:
        with self.Session() as session:
            return session.query(
                session.query(self.TaskModel).filter_by(id=task_id).exists()
            ).scalar()

    def create_task(self, task: NewTask) -> Task:
        if task.id is not None and self.task_exists(task.id):
            raise ResourceAlreadyExistsException(ResourceType.TASK, task.id)

        with self.Session() as session:
            new_task = self.TaskModel(
                title=task.title,
                description=task.description,
                due_date=task.due_date,
                priority=task.priority,
                status=task.status,
            )
            if task.id is not None:
                new_task.id = task.id

            try:
                session.add(new_task)
                session.flush()
                if task.id is not None:
                    self._sync_id_sequence(session)
                session.commit()
            except IntegrityError as e:
                session.rollback()
                if task.id is not None:
                    raise ResourceAlreadyExistsException(
                        ResourceType.TASK, task.id
                    ) from e
                raise

            return self._map_task(new_task)

    def get_task(self, task_id: int) -> Task:
        with self.Session() as session:
            task = session.get(self.TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            return self._map_task(task)

    def list_tasks(self, sort_by: TaskSortField = TaskSortField.PRIORITY) -> list[Task]:
        with self.Session() as session:
            tasks = session.scalars(
                select(self.TaskModel).order_by(*self._order_by(sort_by))
            ).all()
            return [self._map_task(task) for task in tasks]

    def update_task(self, task_id: int, updates: dict[str, str | int]) -> int:
        values = {
            field: value for field, value in updates.items() if field in UPDATABLE_FIELDS
        }
        if not values:
            raise ValueError("No updatable fields provided")

        with self.Session() as session:
            result = session.execute(
                update(self.TaskModel)
                .where(self.TaskModel.id == task_id)
                .values(**values)
            )

            if result.rowcount == 0:
                session.rollback()
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            session.commit()
            logger.debug(f"Updated fields {sorted(values)} of task {task_id}")
            return task_id

    def delete_task(self, task_id: int) -> int:
        with self.Session() as session:
            result = session.execute(
                delete(self.TaskModel).where(self.TaskModel.id == task_id)
            )

            if result.rowcount == 0:
                session.rollback()
                raise ResourceNotFoundException(ResourceType.TASK, task_id)

            session.commit()
            return task_id

    def ping(self) -> bool:
        with self.engine.connect() as connection:
            return connection.execute(text("SELECT 1")).scalar() == 1

    def close(self) -> None:
        self.engine.dispose()
