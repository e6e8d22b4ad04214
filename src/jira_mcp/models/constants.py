"""
Constants used by the Jira MCP models.
"""

# Placeholder for optional values missing from an API payload
UNKNOWN = "Unknown"

# Issue type used when the caller does not name one
DEFAULT_ISSUE_TYPE = "Task"
