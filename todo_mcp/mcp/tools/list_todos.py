"""
List Todos MCP Tool

Returns every todo, optionally filtered by status, in creation order.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, create_text_response, to_json
from todo_mcp.models.task import TaskStatus
from todo_mcp.schemas.task import TaskFilter
from todo_mcp.services.task_service import TaskStore


class ListTodosTool(BaseMCPTool):
    """MCP Tool for listing todos with optional status filter"""

    name = "get_todos"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        """
        List todos

        Args:
            arguments: Optional ``status`` ("pending" or "completed")

        Returns:
            Text content with a JSON array of todos
        """
        todo_filter = self.parse(TaskFilter, arguments)
        self.log_tool_invocation({"status": todo_filter.status})

        todos = self.store.list(todo_filter.status)
        return create_text_response(to_json([todo.to_dict() for todo in todos]))


def register_list_todos_tool(mcp_server, store: TaskStore):
    """Register get_todos tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=ListTodosTool.name,
        description="Get all todo items with optional filtering",
        parameters={
            "type": "object",
            "properties": {
                "status": {
                    "type": "string",
                    "enum": [status.value for status in TaskStatus],
                    "description": "Filter by status"
                }
            }
        },
        handler=ListTodosTool(store).execute
    )

    mcp_server.register_tool(tool)
