"""
MCP Base Tool Interface

Provides base functionality for all todo tools including:
- Argument validation through pydantic schemas
- Error handling
- Audit logging
"""

from typing import Any, Dict, List, Optional, Type, TypeVar
from abc import ABC, abstractmethod
import json

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_REQUEST, METHOD_NOT_FOUND, ErrorData, TextContent
from pydantic import BaseModel, ValidationError

from todo_mcp.services.task_service import TaskStore
from todo_mcp.utils.logger import get_logger

logger = get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Tool error codes -> JSON-RPC error codes. Not-found is reported as an
# invalid request, like input errors.
TOOL_ERROR_CODES = {
    "VALIDATION_ERROR": INVALID_REQUEST,
    "NOT_FOUND": INVALID_REQUEST,
    "UNKNOWN_RESOURCE": INVALID_REQUEST,
    "METHOD_NOT_FOUND": METHOD_NOT_FOUND,
    "INTERNAL_ERROR": INTERNAL_ERROR,
}


class MCPToolError(McpError):
    """
    Base exception for MCP tool errors

    Subclasses the SDK error so the server answers with a JSON-RPC error
    carrying the mapped code; the string code travels in ``error.data``.
    """
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}

        data: Dict[str, Any] = {"code": code}
        if self.details:
            data["details"] = self.details
        super().__init__(ErrorData(code=TOOL_ERROR_CODES.get(code, INTERNAL_ERROR), message=message, data=data))


def not_found(task_id: str) -> MCPToolError:
    return MCPToolError(
        code="NOT_FOUND",
        message=f"Todo not found: {task_id}",
        details={"id": task_id}
    )


class BaseMCPTool(ABC):
    """
    Base class for all todo tools

    Provides common functionality:
    - Store access
    - Argument parsing into typed commands
    - Audit logging
    """

    name: str = ""

    def __init__(self, store: TaskStore):
        self.store = store

    def parse(self, schema: Type[SchemaT], arguments: Optional[Dict[str, Any]]) -> SchemaT:
        """
        Validate raw tool arguments against a schema

        Args:
            schema: pydantic model describing the tool input
            arguments: Untyped arguments from the client

        Returns:
            Parsed schema instance

        Raises:
            MCPToolError: If validation fails
        """
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            raise MCPToolError(code="VALIDATION_ERROR", message="Invalid arguments")

        try:
            return schema.model_validate(arguments)
        except ValidationError as e:
            raise MCPToolError(
                code="VALIDATION_ERROR",
                message=describe_validation_error(e),
                details={"fields": [".".join(str(p) for p in err["loc"]) for err in e.errors()]}
            ) from e

    def log_tool_invocation(self, params: Dict[str, Any]) -> None:
        """
        Log MCP tool invocation for audit trail

        Args:
            params: Tool parameters (sensitive data should be redacted)
        """
        safe_params = {k: v for k, v in params.items() if k not in ['password', 'token', 'secret']}
        logger.info("MCP Tool Invocation", tool=self.name, params=safe_params)

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        """
        Execute the tool logic

        Must be implemented by subclasses

        Args:
            arguments: Raw tool arguments from the client

        Returns:
            Text content returned to the client
        """
        pass


def describe_validation_error(error: ValidationError) -> str:
    """Turn a pydantic error into a single readable sentence."""
    parts = []
    for err in error.errors():
        field = ".".join(str(p) for p in err["loc"]) or "arguments"
        message = err["msg"]
        # pydantic prefixes messages raised from validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        parts.append(f"{field}: {message}")
    return "Invalid arguments: " + "; ".join(parts)


def to_json(payload: Any) -> str:
    """Pretty JSON used in every text result."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def create_text_response(text: str) -> List[TextContent]:
    """
    Create a standardized tool result

    Args:
        text: The text content to return

    Returns:
        A single text content block
    """
    return [TextContent(type="text", text=text)]
