"""
Todo MCP Server Package

Exposes an in-memory todo list to MCP clients as tools and resources,
over stdio or HTTP.
"""

__version__ = "1.0.0"
