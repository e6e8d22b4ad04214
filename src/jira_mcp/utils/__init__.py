"""
Utility functions for the Jira MCP server.
"""

from .decorators import render_remote_error, tool_boundary

__all__ = [
    "render_remote_error",
    "tool_boundary",
]
