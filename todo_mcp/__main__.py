"""Entry point for the todo MCP server when run as a module.

This allows the package to be run with: python -m todo_mcp
"""

import sys

from todo_mcp.cli import main

if __name__ == "__main__":
    sys.exit(main())
