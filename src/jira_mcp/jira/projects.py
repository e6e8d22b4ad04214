"""Module for Jira project operations."""

import logging

from ..models import ProjectSummary
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira")

PROJECT_SEARCH_PATH = "/rest/api/3/project/search"


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    async def get_all_projects(self) -> list[ProjectSummary]:
        """
        Get all projects visible to the current user.

        Returns:
            Projects in the order Jira returned them
        """
        data = await self.request(
            "GET", PROJECT_SEARCH_PATH, action="list projects"
        )
        data = data or {}
        # The paginated endpoint uses "values"; older responses used "projects".
        projects = data.get("values") or data.get("projects") or []
        return [ProjectSummary.from_api_response(project) for project in projects]
