"""Todo tools exposed through the MCP server."""

from todo_mcp.services.task_service import TaskStore

from .clear_todos import register_clear_todos_tool
from .complete_todo import register_complete_todo_tool
from .create_todo import register_create_todo_tool
from .delete_todo import register_delete_todo_tool
from .list_todos import register_list_todos_tool
from .todo_stats import register_todo_stats_tool
from .update_todo import register_update_todo_tool
from .view_todo import register_view_todo_tools


def register_all_tools(mcp_server, store: TaskStore) -> None:
    """Register every todo tool, in the order clients see them listed."""
    register_create_todo_tool(mcp_server, store)
    register_view_todo_tools(mcp_server, store)
    register_list_todos_tool(mcp_server, store)
    register_update_todo_tool(mcp_server, store)
    register_complete_todo_tool(mcp_server, store)
    register_delete_todo_tool(mcp_server, store)
    register_todo_stats_tool(mcp_server, store)
    register_clear_todos_tool(mcp_server, store)
