from src.config import Settings
from src.tasks.store.base import TaskStore
from src.tasks.store.postgres.store import PostgresTaskStore


def get_task_store_backend(settings: Settings) -> TaskStore:
    if settings.DATABASE_URL.startswith(("postgresql", "sqlite")):
        return PostgresTaskStore(
            database_url=settings.DATABASE_URL,
            table_name=settings.TASKS_TABLE_NAME,
        )
    else:
        raise ValueError(f"Unsupported task store database: {settings.DATABASE_URL}")
