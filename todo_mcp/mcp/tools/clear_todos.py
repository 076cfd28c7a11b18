"""
Clear All Todos MCP Tool

Deletes every todo and restarts ID numbering. Irreversible; only runs
when a client calls it by name.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, create_text_response
from todo_mcp.services.task_service import TaskStore


class ClearTodosTool(BaseMCPTool):
    """MCP Tool for clearing all todos"""

    name = "clear_all_todos"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        self.log_tool_invocation({"count": self.store.count()})
        self.store.clear_all()
        return create_text_response("All todos cleared")


def register_clear_todos_tool(mcp_server, store: TaskStore):
    """Register clear_all_todos tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=ClearTodosTool.name,
        description="Clear all todo items (use with caution)",
        parameters={"type": "object", "properties": {}},
        handler=ClearTodosTool(store).execute
    )

    mcp_server.register_tool(tool)
