from typing import Any
from sqlalchemy import CheckConstraint, Integer, Text, text
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

from src.tasks.schemas import DEFAULT_STATUS

Base = declarative_base()

_model_registry: dict[str, Any] = {}


def create_task_model(table_name: str):
    if table_name in _model_registry:
        return _model_registry[table_name]

    class TaskModel(Base):
        __tablename__ = table_name

        id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
        title: Mapped[str] = mapped_column(Text, nullable=False)
        description: Mapped[str | None] = mapped_column(Text, nullable=True)
        due_date: Mapped[str] = mapped_column(Text, nullable=False)
        priority: Mapped[int] = mapped_column(Integer, nullable=False)
        status: Mapped[str] = mapped_column(
            Text,
            nullable=False,
            default=DEFAULT_STATUS,
            server_default=text(f"'{DEFAULT_STATUS}'"),
        )

        __table_args__ = (
            CheckConstraint(
                "priority >= 1 AND priority <= 3",
                name=f"{table_name}_priority_check",
            ),
            {"extend_existing": True},
        )

    _model_registry[table_name] = TaskModel
    return TaskModel
