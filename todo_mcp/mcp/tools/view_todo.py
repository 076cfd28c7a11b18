"""
View Todo MCP Tools

Look up a single todo by ID, or the next todo to work on.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, create_text_response, not_found, to_json
from todo_mcp.schemas.task import TaskIdParams
from todo_mcp.services.task_service import TaskStore


class ViewTodoTool(BaseMCPTool):
    """MCP Tool for viewing a todo by ID"""

    name = "get_todo"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        params = self.parse(TaskIdParams, arguments)
        self.log_tool_invocation({"id": params.id})

        todo = self.store.get(params.id)
        if todo is None:
            raise not_found(params.id)

        return create_text_response(to_json(todo.to_dict()))


class NextTodoTool(BaseMCPTool):
    """
    MCP Tool returning the next todo to work on

    "Next" is the earliest-created pending todo. Todos carry no priority,
    so creation order is the only ordering there is.
    """

    name = "get_next_todo"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        self.log_tool_invocation({})

        todo = self.store.next()
        if todo is None:
            return create_text_response("No pending todos")
        return create_text_response(to_json(todo.to_dict()))


def register_view_todo_tools(mcp_server, store: TaskStore):
    """Register get_todo and get_next_todo tools with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    mcp_server.register_tool(MCPTool(
        name=ViewTodoTool.name,
        description="Get a specific todo item by ID",
        parameters={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "ID of the todo item"}
            },
            "required": ["id"]
        },
        handler=ViewTodoTool(store).execute
    ))

    mcp_server.register_tool(MCPTool(
        name=NextTodoTool.name,
        description="Get the next todo item to work on (the earliest-created pending item)",
        parameters={"type": "object", "properties": {}},
        handler=NextTodoTool(store).execute
    ))
