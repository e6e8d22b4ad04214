"""
Data models for the Jira MCP server.

This package provides Pydantic models for the Jira API data structures the
tools render.
"""

from .base import ApiModel
from .constants import DEFAULT_ISSUE_TYPE, UNKNOWN
from .jira import CreatedIssue, IssueSummary, ProjectSummary

__all__ = [
    "ApiModel",
    "CreatedIssue",
    "DEFAULT_ISSUE_TYPE",
    "IssueSummary",
    "ProjectSummary",
    "UNKNOWN",
]
