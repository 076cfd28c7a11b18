"""
MCP Resources

Read-only JSON views over the todo store.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource

from todo_mcp.mcp.base_tool import MCPToolError, to_json
from todo_mcp.models.task import TaskStatus
from todo_mcp.services.task_service import TaskStore

MIME_TYPE = "application/json"


@dataclass
class MCPResource:
    """MCP Resource definition"""
    uri: str
    name: str
    description: str
    reader: Callable[[], Any]

    def describe(self) -> Resource:
        return Resource(uri=self.uri, name=self.name, description=self.description, mimeType=MIME_TYPE)


def build_resources(store: TaskStore) -> List[MCPResource]:
    """The four named views: all, pending, completed and next."""
    def todos(status=None):
        return [todo.to_dict() for todo in store.list(status)]

    def next_todo():
        todo = store.next()
        return todo.to_dict() if todo else None

    return [
        MCPResource("todo://todos", "All Todos", "List of all todo items", todos),
        MCPResource(
            "todo://todos/pending", "Pending Todos", "List of pending todo items",
            lambda: todos(TaskStatus.PENDING),
        ),
        MCPResource(
            "todo://todos/completed", "Completed Todos", "List of completed todo items",
            lambda: todos(TaskStatus.COMPLETED),
        ),
        MCPResource(
            "todo://todos/next", "Next Todo",
            "The next todo item to work on (earliest-created pending item)", next_todo,
        ),
    ]


class ResourceRegistry:
    """Lookup of resources by URI."""

    def __init__(self, resources: List[MCPResource]):
        self.resources: Dict[str, MCPResource] = {resource.uri: resource for resource in resources}

    def list_resources(self) -> List[Resource]:
        return [resource.describe() for resource in self.resources.values()]

    def read(self, uri: Any) -> List[ReadResourceContents]:
        """
        Read a resource

        Raises:
            MCPToolError: If the URI is not a known resource
        """
        resource = self.resources.get(str(uri))
        if resource is None:
            raise MCPToolError(
                code="UNKNOWN_RESOURCE",
                message=f"Unknown resource: {uri}",
                details={"uri": str(uri)}
            )
        return [ReadResourceContents(content=to_json(resource.reader()), mime_type=MIME_TYPE)]
