"""Input and output schemas for the MCP tool layer."""

from .task import TaskCreate, TaskFilter, TaskIdParams, TaskStats, TaskUpdate

__all__ = ["TaskCreate", "TaskFilter", "TaskIdParams", "TaskStats", "TaskUpdate"]
