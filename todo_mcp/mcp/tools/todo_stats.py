"""
Todo Stats MCP Tool

Reports total, pending and completed counts.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, create_text_response, to_json
from todo_mcp.schemas.task import TaskStats
from todo_mcp.services.task_service import TaskStore


class TodoStatsTool(BaseMCPTool):
    """MCP Tool for todo statistics"""

    name = "get_todo_stats"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        self.log_tool_invocation({})
        stats = TaskStats(**self.store.stats())
        return create_text_response(to_json(stats.model_dump()))


def register_todo_stats_tool(mcp_server, store: TaskStore):
    """Register get_todo_stats tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=TodoStatsTool.name,
        description="Get statistics about todo items",
        parameters={"type": "object", "properties": {}},
        handler=TodoStatsTool(store).execute
    )

    mcp_server.register_tool(tool)
