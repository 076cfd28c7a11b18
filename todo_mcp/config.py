"""Configuration for the todo MCP server."""
from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

# Load environment variables from a local .env if present
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""
    server_name: str = "todo-mcp-server"
    server_version: str = "1.0.0"
    id_prefix: str = "todo-"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            server_name=os.environ.get("TODO_MCP_SERVER_NAME", cls.server_name),
            server_version=os.environ.get("TODO_MCP_SERVER_VERSION", cls.server_version),
            id_prefix=os.environ.get("TODO_MCP_ID_PREFIX", cls.id_prefix),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
            host=os.environ.get("TODO_MCP_HOST", cls.host),
            port=int(os.environ.get("TODO_MCP_PORT", cls.port)),
        )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings.from_env()
