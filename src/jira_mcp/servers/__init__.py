"""FastMCP server for the Jira integration."""

from .main import create_server, main_mcp, run_server

__all__ = ["create_server", "main_mcp", "run_server"]
