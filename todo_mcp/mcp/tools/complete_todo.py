"""
Complete Todo MCP Tool

Marks a todo as completed.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, create_text_response, not_found, to_json
from todo_mcp.schemas.task import TaskIdParams
from todo_mcp.services.task_service import TaskStore


class CompleteTodoTool(BaseMCPTool):
    """MCP Tool for completing todos"""

    name = "complete_todo"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        params = self.parse(TaskIdParams, arguments)
        self.log_tool_invocation({"id": params.id})

        todo = self.store.complete(params.id)
        if todo is None:
            raise not_found(params.id)

        return create_text_response(f"Completed todo: {to_json(todo.to_dict())}")


def register_complete_todo_tool(mcp_server, store: TaskStore):
    """Register complete_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=CompleteTodoTool.name,
        description="Mark a todo item as completed",
        parameters={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "ID of the todo item to complete"}
            },
            "required": ["id"]
        },
        handler=CompleteTodoTool(store).execute
    )

    mcp_server.register_tool(tool)
