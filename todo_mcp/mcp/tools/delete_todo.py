"""
Delete Todo MCP Tool

Permanently removes a todo.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, create_text_response, not_found
from todo_mcp.schemas.task import TaskIdParams
from todo_mcp.services.task_service import TaskStore


class DeleteTodoTool(BaseMCPTool):
    """MCP Tool for deleting todos"""

    name = "delete_todo"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        params = self.parse(TaskIdParams, arguments)
        self.log_tool_invocation({"id": params.id})

        if not self.store.delete(params.id):
            raise not_found(params.id)

        return create_text_response(f"Deleted todo: {params.id}")


def register_delete_todo_tool(mcp_server, store: TaskStore):
    """Register delete_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=DeleteTodoTool.name,
        description="Delete a todo item",
        parameters={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "ID of the todo item to delete"}
            },
            "required": ["id"]
        },
        handler=DeleteTodoTool(store).execute
    )

    mcp_server.register_tool(tool)
