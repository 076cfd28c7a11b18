"""
MCP Server Implementation

This module keeps the todo tool registry and puts the MCP SDK's low-level
``Server`` in front of it. The SDK owns the wire protocol (handshake,
JSON-RPC framing, transports); the registry owns the tools and resources.
"""

from typing import Any, Awaitable, Callable, Dict, List, Optional
from dataclasses import dataclass
import logging

from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, Tool

from todo_mcp.config import Settings, get_settings
from todo_mcp.mcp.base_tool import MCPToolError
from todo_mcp.mcp.resources import ResourceRegistry, build_resources
from todo_mcp.services.task_service import TaskStore
from todo_mcp.utils.logger import get_logger

logger = logging.getLogger(__name__)
audit_logger = get_logger(f"{__name__}.audit")


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    parameters: Dict[str, Any]
    handler: Callable[[Dict[str, Any]], Awaitable[List[TextContent]]]


class MCPServer:
    """
    MCP Server for Todo Management

    Holds the tool registry and resources. ``build_sdk_server`` wires them
    into an SDK server for the stdio and HTTP transports. The store never
    awaits, so concurrently scheduled handlers cannot interleave inside a
    store operation and nothing here locks it.
    """

    def __init__(self, settings: Optional[Settings] = None, resources: Optional[ResourceRegistry] = None):
        self.settings = settings or get_settings()
        self.tools: Dict[str, MCPTool] = {}
        self.resources = resources or ResourceRegistry([])
        self.name = self.settings.server_name
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.debug(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise MCPToolError(
                code="METHOD_NOT_FOUND",
                message=f"Unknown tool: {name}",
                details={"available": list(self.tools.keys())}
            )
        return self.tools[name]

    def list_tools(self) -> list[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    async def get_tool_schemas(self) -> List[Tool]:
        """Get MCP tool descriptors for all registered tools"""
        return [
            Tool(name=tool.name, description=tool.description, inputSchema=tool.parameters)
            for tool in self.tools.values()
        ]

    async def invoke_tool(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> List[TextContent]:
        """
        Invoke a tool with arguments

        Args:
            tool_name: Name of the tool to invoke
            arguments: Raw tool arguments

        Returns:
            Tool result content

        Raises:
            MCPToolError: If the tool is unknown, rejects its input, or fails
        """
        tool = self.get_tool(tool_name)

        try:
            result = await tool.handler(arguments)
            audit_logger.debug("Tool executed", tool=tool_name)
            return result
        except MCPToolError as e:
            audit_logger.warning("Tool rejected call", tool=tool_name, code=e.code, reason=e.message)
            raise
        except Exception as e:
            audit_logger.exception("Tool execution failed", tool=tool_name, error=str(e))
            raise MCPToolError(
                code="INTERNAL_ERROR",
                message=f"Tool execution failed: {e}",
            ) from e

    async def list_resources(self) -> List[Resource]:
        return self.resources.list_resources()

    async def read_resource(self, uri: Any) -> List[ReadResourceContents]:
        return self.resources.read(uri)

    def build_sdk_server(self) -> Server:
        """
        Create an SDK server answering from this registry

        Returns:
            Low-level MCP server with tool and resource handlers registered
        """
        server = Server(self.name, version=self.settings.server_version)
        server.list_tools()(self.get_tool_schemas)
        server.call_tool()(self.invoke_tool)
        server.list_resources()(self.list_resources)
        server.read_resource()(self.read_resource)
        return server


def create_mcp_server(store: Optional[TaskStore] = None, settings: Optional[Settings] = None) -> MCPServer:
    """
    Build a server with every todo tool and resource wired to ``store``

    Args:
        store: Task store to expose; a new empty one if omitted
        settings: Runtime settings; environment defaults if omitted

    Returns:
        Ready-to-use MCPServer
    """
    from todo_mcp.mcp.tools import register_all_tools

    settings = settings or get_settings()
    if store is None:
        store = TaskStore(id_prefix=settings.id_prefix)

    server = MCPServer(settings=settings, resources=ResourceRegistry(build_resources(store)))
    register_all_tools(server, store)
    logger.info(f"MCP Server initialized with tools: {server.list_tools()}")
    return server


async def serve_stdio(server: Server) -> None:
    """Serve an SDK server on stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Todo MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
    logger.info("Stdin closed, stopping stdio transport")
