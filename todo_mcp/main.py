"""Main FastAPI application serving the todo MCP server over HTTP."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from todo_mcp import __version__
from todo_mcp.config import Settings, get_settings
from todo_mcp.mcp.server import create_mcp_server
from todo_mcp.services.task_service import TaskStore


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """
    Create the FastAPI application.

    The store and MCP server are created once here and live on
    ``app.state`` for the lifetime of the process. MCP traffic goes to the
    SDK's streamable-HTTP transport mounted at ``/mcp``; each POST is
    answered with a plain JSON response.
    """
    settings = settings or get_settings()
    if store is None:
        store = TaskStore(id_prefix=settings.id_prefix)

    mcp_server = create_mcp_server(store=store, settings=settings)
    session_manager = StreamableHTTPSessionManager(
        app=mcp_server.build_sdk_server(),
        json_response=True,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with session_manager.run():
            yield

    app = FastAPI(
        title="Todo MCP Server",
        description="In-memory todo list exposed as MCP tools and resources",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.mcp_server = mcp_server

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.server_version}

    @app.get("/")
    async def root():
        """Root endpoint - server information."""
        return {
            "name": settings.server_name,
            "version": settings.server_version,
            "mcp": "/mcp/",
            "health": "/health",
        }

    app.mount("/mcp", session_manager.handle_request)
    return app


def run_http(settings: Settings) -> int:
    """Serve the HTTP transport with uvicorn."""
    import uvicorn

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    run_http(get_settings())
