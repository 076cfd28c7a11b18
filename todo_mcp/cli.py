"""Command-line entry point for the todo MCP server.

Runs the server over stdio (the default, for MCP clients that spawn it as
a subprocess) or over HTTP.
"""

import argparse
import dataclasses
import logging
import signal
import sys
from typing import List, Optional

import anyio

from todo_mcp.config import Settings, get_settings
from todo_mcp.utils.logger import configure_logging

logger = logging.getLogger("todo_mcp.cli")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="todo-mcp",
        description="In-memory todo list served over the Model Context Protocol"
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport to serve on (default: stdio)"
    )
    parser.add_argument("--host", help="Bind address for the http transport")
    parser.add_argument("--port", type=int, help="Port for the http transport")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: LOG_LEVEL or INFO)"
    )
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command-line flags take precedence over the environment."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    return dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def install_signal_handlers() -> None:
    """Exit cleanly on SIGINT and SIGTERM."""
    def shutdown(signum, frame):
        logger.info(f"Received {signal.Signals(signum).name}, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:]

    Returns:
        Exit code (0 on clean shutdown, 1 if the server failed)
    """
    args = create_parser().parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    configure_logging(settings.log_level)

    try:
        if args.transport == "http":
            # uvicorn installs its own signal handling
            from todo_mcp.main import run_http
            return run_http(settings)

        from todo_mcp.mcp.server import create_mcp_server, serve_stdio

        install_signal_handlers()
        logger.info("Starting Todo MCP server...")
        anyio.run(serve_stdio, create_mcp_server(settings=settings).build_sdk_server())
        return 0
    except Exception:
        logger.exception("Todo MCP server failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
