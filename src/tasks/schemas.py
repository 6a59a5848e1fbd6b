from enum import Enum
from pydantic import BaseModel, Field, field_validator

DEFAULT_STATUS = "Pending"

# Upper bound of the INTEGER id column
MAX_TASK_ID = 2**31 - 1


class TaskSortField(str, Enum):
    PRIORITY = "priority"
    DUE_DATE = "due_date"


class Task(BaseModel):
    id: int
    title: str
    description: str
    due_date: str
    priority: int
    status: str


class NewTask(BaseModel):
    id: int | None = None
    title: str
    description: str
    due_date: str
    priority: int
    status: str


class CreateTaskRequest(BaseModel):
    id: int | None = Field(default=None, gt=0, le=MAX_TASK_ID)
    title: str = Field(..., min_length=1)
    description: str | None = ""
    due_date: str = Field(..., min_length=1)
    priority: int = Field(..., ge=1, le=3, strict=True)
    status: str | None = None

    @field_validator("title", "due_date")
    def validate_not_blank(cls, value: str):
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_new_task(self) -> NewTask:
        return NewTask(
            id=self.id,
            title=self.title,
            description=self.description or "",
            due_date=self.due_date,
            priority=self.priority,
            status=self.status or DEFAULT_STATUS,
        )


class UpdateTaskRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    due_date: str | None = Field(default=None, min_length=1)
    priority: int | None = Field(default=None, ge=1, le=3, strict=True)
    status: str | None = Field(default=None, min_length=1)

    @field_validator("title", "due_date", "status")
    def validate_not_blank(cls, value: str | None):
        if value is not None and not value.strip():
            raise ValueError("must not be blank")
        return value

    def get_updates(self) -> dict[str, str | int]:
        """Fields explicitly present in the request with a non-null value."""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class MessageResponse(BaseModel):
    message: str
