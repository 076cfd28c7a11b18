"""
Update Todo MCP Tool

Changes the title, description or status of an existing todo.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, MCPToolError, create_text_response, not_found, to_json
from todo_mcp.models.task import TaskStatus
from todo_mcp.schemas.task import TaskUpdate
from todo_mcp.services.task_service import TaskInputError, TaskStore


class UpdateTodoTool(BaseMCPTool):
    """MCP Tool for updating todos"""

    name = "update_todo"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        """
        Update an existing todo

        Only the fields sent are changed. ``id``, ``order`` and
        ``createdAt`` can never be changed, and attempts to do so are
        ignored.

        Args:
            arguments: ``id`` plus any of ``title``, ``description``, ``status``

        Returns:
            Text content with the updated todo
        """
        command = self.parse(TaskUpdate, arguments)
        self.log_tool_invocation({"id": command.id, "fields": sorted(command.changes())})

        try:
            todo = self.store.update(command.id, command)
        except TaskInputError as e:
            raise MCPToolError(code="VALIDATION_ERROR", message=str(e), details={"id": command.id}) from e

        if todo is None:
            raise not_found(command.id)

        return create_text_response(f"Updated todo: {to_json(todo.to_dict())}")


def register_update_todo_tool(mcp_server, store: TaskStore):
    """Register update_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=UpdateTodoTool.name,
        description="Update an existing todo item",
        parameters={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "ID of the todo item to update"},
                "title": {"type": "string", "description": "New title"},
                "description": {"type": "string", "description": "New description"},
                "status": {
                    "type": "string",
                    "enum": [status.value for status in TaskStatus],
                    "description": "New status"
                }
            },
            "required": ["id"]
        },
        handler=UpdateTodoTool(store).execute
    )

    mcp_server.register_tool(tool)
