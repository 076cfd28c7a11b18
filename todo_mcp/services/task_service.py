"""In-memory task store backing the todo MCP server."""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
import logging

from todo_mcp.models.task import Task, TaskStatus
from todo_mcp.schemas.task import TaskUpdate

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "status")


class TaskInputError(ValueError):
    """Raised when a value that would break a record invariant reaches the store."""


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """
    Owns every todo record plus the ID and order counters.

    Lists are always sorted by ``order``, which reflects creation sequence.
    Both counters only move forward; ``clear_all`` is the one operation that
    resets them. Operations never suspend or block, so requests handled one
    at a time cannot observe a half-applied change.
    """

    def __init__(self, id_prefix: str = "todo-", clock: Optional[Callable[[], datetime]] = None):
        self.id_prefix = id_prefix
        self._clock = clock or utc_now
        self._tasks: Dict[str, Task] = {}
        self._next_id = 1
        self._next_order = 1

    def create(self, title: str, description: Optional[str] = None) -> Task:
        """Create a pending todo at the end of the list."""
        title = self._clean_title(title)
        if description is not None and not isinstance(description, str):
            raise TaskInputError("Description must be a string")

        now = self._clock()
        task = Task(
            id=f"{self.id_prefix}{self._next_id}",
            title=title,
            description=description,
            status=TaskStatus.PENDING,
            created_at=now,
            updated_at=now,
            order=self._next_order,
        )
        self._next_id += 1
        self._next_order += 1

        self._tasks[task.id] = task
        logger.debug(f"Created {task.id} (order {task.order})")
        return task

    def get(self, task_id: str) -> Optional[Task]:
        """Exact lookup; ``None`` when the ID is unknown."""
        return self._tasks.get(task_id)

    def list(self, status: Optional[Union[TaskStatus, str]] = None) -> List[Task]:
        """All todos, or only those with ``status``, in creation order."""
        tasks = self._tasks.values()
        if status is not None:
            status = self._clean_status(status)
            tasks = [task for task in tasks if task.status == status]
        return sorted(tasks, key=lambda task: task.order)

    def next(self) -> Optional[Task]:
        """
        The earliest-created pending todo.

        There is no priority field: "next" means lowest ``order`` among the
        pending todos, or ``None`` when nothing is pending.
        """
        pending = self.list(TaskStatus.PENDING)
        return pending[0] if pending else None

    def update(self, task_id: str, changes: Union[TaskUpdate, Mapping[str, Any]]) -> Optional[Task]:
        """
        Merge ``changes`` into an existing todo.

        Only title, description and status are applied; any other key
        (``id``, ``order``, ``createdAt``...) is ignored, and a ``None`` value
        counts as absent. ``updated_at`` is refreshed even when nothing
        differs. Returns ``None`` if the ID is unknown.
        """
        existing = self._tasks.get(task_id)
        if existing is None:
            return None

        if isinstance(changes, TaskUpdate):
            changes = changes.changes()

        update: Dict[str, Any] = {}
        for field in UPDATABLE_FIELDS:
            value = changes.get(field)
            if value is None:
                continue
            if field == "title":
                value = self._clean_title(value)
            elif field == "status":
                value = self._clean_status(value)
            elif not isinstance(value, str):
                raise TaskInputError("Description must be a string")
            update[field] = value

        update["updated_at"] = self._clock()
        task = existing.model_copy(update=update)
        self._tasks[task_id] = task
        return task

    def complete(self, task_id: str) -> Optional[Task]:
        """Shorthand for ``update(task_id, {"status": "completed"})``."""
        return self.update(task_id, {"status": TaskStatus.COMPLETED})

    def delete(self, task_id: str) -> bool:
        """Remove a todo; ``False`` if there was nothing to remove."""
        return self._tasks.pop(task_id, None) is not None

    def count(self) -> int:
        return len(self._tasks)

    def count_by_status(self, status: Union[TaskStatus, str]) -> int:
        status = self._clean_status(status)
        return sum(1 for task in self._tasks.values() if task.status == status)

    def stats(self) -> Dict[str, int]:
        """Total, pending and completed counts."""
        return {
            "total": self.count(),
            "pending": self.count_by_status(TaskStatus.PENDING),
            "completed": self.count_by_status(TaskStatus.COMPLETED),
        }

    def clear_all(self) -> None:
        """Drop every todo and restart both counters at 1."""
        removed = len(self._tasks)
        self._tasks.clear()
        self._next_id = 1
        self._next_order = 1
        logger.warning(f"Cleared all todos ({removed} removed)")

    @staticmethod
    def _clean_title(title: Any) -> str:
        if not isinstance(title, str) or not title.strip():
            raise TaskInputError("Title is required and must be a non-empty string")
        return title.strip()

    @staticmethod
    def _clean_status(status: Any) -> TaskStatus:
        try:
            return TaskStatus(status)
        except ValueError:
            raise TaskInputError("Status must be one of: pending, completed") from None
