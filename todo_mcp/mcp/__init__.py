"""
MCP (Model Context Protocol) Server Package

This package implements the MCP server that exposes the todo store to
clients as tools (mutations and queries) and read-only resources.
"""
