"""Task schemas validating raw tool arguments before they reach the store."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from todo_mcp.models.task import TaskStatus


def _strip_title(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("Title is required and must be a non-empty string")
    return value


class TaskCreate(BaseModel):
    """Schema for creating a todo."""
    model_config = ConfigDict(extra="ignore", strict=True)

    title: str
    description: Optional[str] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value):
        return _strip_title(value)


class TaskIdParams(BaseModel):
    """Schema for tools that only take a todo ID."""
    model_config = ConfigDict(extra="ignore", strict=True)

    id: str = Field(..., min_length=1)


class TaskUpdate(BaseModel):
    """
    Schema for updating a todo.

    ``id`` selects the record; every other field is optional and only the
    fields actually sent are applied. Keys such as ``order`` or
    ``createdAt`` are dropped here and never reach the store.
    """
    model_config = ConfigDict(extra="ignore", strict=True)

    id: str = Field(..., min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = Field(None, strict=False)

    @field_validator("title")
    @classmethod
    def check_title(cls, value):
        return _strip_title(value)

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, minus the ID."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class TaskFilter(BaseModel):
    """Schema for filtering todos by status."""
    model_config = ConfigDict(extra="ignore")

    status: Optional[TaskStatus] = None


class TaskStats(BaseModel):
    """Aggregate counts returned by the stats tool."""
    total: int
    pending: int
    completed: int
