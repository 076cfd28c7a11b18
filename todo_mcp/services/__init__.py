"""Service layer for the todo MCP server."""

from .task_service import TaskInputError, TaskStore

__all__ = ["TaskInputError", "TaskStore"]
