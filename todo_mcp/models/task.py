"""Task model for the in-memory todo store."""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Status of a todo item."""

    PENDING = "pending"
    COMPLETED = "completed"


class Task(BaseModel):
    """
    A single todo item.

    Records are immutable: the store replaces a record with a modified copy
    on every mutation. ``order`` comes from a monotonically increasing
    counter and is the only thing lists are sorted by.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    order: int

    def to_dict(self) -> Dict[str, Any]:
        """External representation: camelCase keys, ISO-8601 timestamps."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
