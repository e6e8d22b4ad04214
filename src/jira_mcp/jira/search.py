"""Module for Jira search operations."""

import logging

from ..exceptions import RemoteRequestError
from ..models import IssueSummary
from .client import JiraClient, encode_component

logger = logging.getLogger("jira-mcp.jira")

SEARCH_PATH = "/rest/api/3/search"


class SearchMixin(JiraClient):
    """Mixin providing JQL search for Jira issues."""

    async def search_issues(self, jql: str) -> list[IssueSummary]:
        """
        Search for issues using JQL (Jira Query Language).

        An empty JQL string is sent as-is and matches every issue the
        account can see.

        Args:
            jql: JQL query string

        Returns:
            Matching issues in the order Jira returned them

        Raises:
            RemoteRequestError: If Jira rejects the search; the error carries
                the encoded JQL for diagnosis
        """
        logger.info(f"Searching issues with JQL: {jql!r}")
        try:
            data = await self.request(
                "GET",
                SEARCH_PATH,
                params={"jql": jql},
                action="fetch issues",
            )
        except RemoteRequestError as e:
            e.context = f"The encoded JQL is: {encode_component(jql)}"
            raise

        issues_data = (data or {}).get("issues") or []
        return [IssueSummary.from_api_response(issue) for issue in issues_data]
