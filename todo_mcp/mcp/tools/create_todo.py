"""
Create Todo MCP Tool

Adds a new pending todo at the end of the list.
"""

from typing import Any, Dict, List

from mcp.types import TextContent

from todo_mcp.mcp.base_tool import BaseMCPTool, MCPToolError, create_text_response, to_json
from todo_mcp.schemas.task import TaskCreate
from todo_mcp.services.task_service import TaskInputError, TaskStore


class CreateTodoTool(BaseMCPTool):
    """MCP Tool for creating todos"""

    name = "create_todo"

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        """
        Create a new todo

        Args:
            arguments: ``title`` (required) and optional ``description``

        Returns:
            Text content with the created todo
        """
        command = self.parse(TaskCreate, arguments)
        self.log_tool_invocation({"title": command.title})

        try:
            todo = self.store.create(command.title, command.description)
        except TaskInputError as e:
            raise MCPToolError(code="VALIDATION_ERROR", message=str(e), details={"field": "title"}) from e

        return create_text_response(f"Created todo: {to_json(todo.to_dict())}")


def register_create_todo_tool(mcp_server, store: TaskStore):
    """Register create_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    tool = MCPTool(
        name=CreateTodoTool.name,
        description="Create a new todo item",
        parameters={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Title of the todo item"},
                "description": {"type": "string", "description": "Optional description"}
            },
            "required": ["title"]
        },
        handler=CreateTodoTool(store).execute
    )

    mcp_server.register_tool(tool)
