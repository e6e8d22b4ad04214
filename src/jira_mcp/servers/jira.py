"""Jira tool definitions for the FastMCP server."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from jira_mcp.formatting import (
    ISSUE_PROJECTION,
    ISSUE_STATUS_PROJECTION,
    PROJECT_PROJECTION,
    project,
)
from jira_mcp.jira import JiraConfig
from jira_mcp.models import DEFAULT_ISSUE_TYPE
from jira_mcp.servers.dependencies import get_jira_fetcher, get_query_resolver
from jira_mcp.utils.decorators import tool_boundary

logger = logging.getLogger("jira-mcp.servers.jira")

# Used by fetch-issues when no JQL is given.
DEFAULT_JQL = "assignee = currentUser()"


@tool_boundary("fetch issues")
async def fetch_issues(
    jql: Annotated[
        str,
        Field(
            description=(
                "Jira Query Language (JQL) string to filter issues. "
                "Defaults to the issues assigned to the current user."
            ),
        ),
    ] = "",
    include_status: Annotated[
        bool,
        Field(description="Include each issue's status in the result lines."),
    ] = False,
) -> str:
    """Fetch Jira issues matching a JQL query."""
    config = JiraConfig.from_env()
    effective_jql = jql if jql.strip() else DEFAULT_JQL
    async with get_jira_fetcher(config) as jira:
        issues = await jira.search_issues(effective_jql)
    return project(issues, ISSUE_STATUS_PROJECTION if include_status else ISSUE_PROJECTION)


@tool_boundary("query issues")
async def query_issues(
    query: Annotated[
        str,
        Field(
            description=(
                "Natural language query to fetch Jira issues, "
                "e.g. 'what issues do I have assigned'"
            ),
            min_length=1,
        ),
    ],
) -> str:
    """Translate a natural language query into JQL and fetch the matching issues."""
    config = JiraConfig.from_env()
    jql = await get_query_resolver().resolve(query)
    async with get_jira_fetcher(config) as jira:
        issues = await jira.search_issues(jql)
    return project(issues, ISSUE_STATUS_PROJECTION)


@tool_boundary("create issue")
async def create_issue(
    projectKey: Annotated[  # noqa: N803 - tool argument names are part of the wire schema
        str,
        Field(description="The key of the Jira project (e.g., 'PROJ')", min_length=1),
    ],
    summary: Annotated[
        str, Field(description="A brief summary of the issue", min_length=1)
    ],
    description: Annotated[
        str | None,
        Field(description="(Optional) A detailed description of the issue"),
    ] = None,
    issueType: Annotated[  # noqa: N803
        str | None,
        Field(
            description=(
                "(Optional) The issue type name (e.g., 'Task', 'Story', 'Bug'). "
                f"Defaults to '{DEFAULT_ISSUE_TYPE}'."
            ),
        ),
    ] = None,
) -> str:
    """Create a new Jira issue."""
    config = JiraConfig.from_env()
    async with get_jira_fetcher(config) as jira:
        created = await jira.create_issue(
            project_key=projectKey,
            summary=summary,
            description=description,
            issue_type=issueType or DEFAULT_ISSUE_TYPE,
        )
    return f"Issue created successfully! Key: {created.key}"


@tool_boundary("list projects")
async def list_projects() -> str:
    """List all Jira projects visible to the current user."""
    config = JiraConfig.from_env()
    async with get_jira_fetcher(config) as jira:
        projects = await jira.get_all_projects()
    return project(projects, PROJECT_PROJECTION)


@tool_boundary("assign issue")
async def assign_to_me(
    issueKey: Annotated[  # noqa: N803
        str,
        Field(description="Jira issue key or ID (e.g., 'PROJ-123')", min_length=1),
    ],
) -> str:
    """Assign a Jira issue to the authenticated user."""
    config = JiraConfig.from_env()
    async with get_jira_fetcher(config) as jira:
        await jira.assign_issue_to_me(issueKey)
    return f"Issue {issueKey} assigned to you."


def register_jira_tools(mcp: FastMCP) -> None:
    """Register every Jira tool on a FastMCP server."""
    mcp.tool(
        name="fetch-issues",
        description="Fetch Jira issues based on JQL query",
        tags={"jira", "read"},
        annotations={"title": "Fetch Issues", "readOnlyHint": True},
    )(fetch_issues)
    mcp.tool(
        name="query-issues",
        description="Handle natural language queries to fetch Jira issues",
        tags={"jira", "read"},
        annotations={"title": "Query Issues", "readOnlyHint": True},
    )(query_issues)
    mcp.tool(
        name="create-issue",
        description="Create a new Jira issue",
        tags={"jira", "write"},
        annotations={"title": "Create Issue", "destructiveHint": False},
    )(create_issue)
    mcp.tool(
        name="list-projects",
        description="List all Jira projects visible to the current user",
        tags={"jira", "read"},
        annotations={"title": "List Projects", "readOnlyHint": True},
    )(list_projects)
    mcp.tool(
        name="assign-to-me",
        description="Assign a Jira issue to the current user",
        tags={"jira", "write"},
        annotations={"title": "Assign Issue To Me", "idempotentHint": True},
    )(assign_to_me)
