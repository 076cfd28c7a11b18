"""Domain models for the todo MCP server."""

from .task import Task, TaskStatus

__all__ = ["Task", "TaskStatus"]
