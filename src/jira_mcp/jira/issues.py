"""Module for Jira issue operations."""

import logging
from typing import Any
from urllib.parse import quote

from ..models import DEFAULT_ISSUE_TYPE, CreatedIssue
from .client import JiraClient

logger = logging.getLogger("jira-mcp.jira")

ISSUE_PATH = "/rest/api/3/issue"


def text_to_adf(text: str) -> dict[str, Any]:
    """Wrap plain text in a minimal Atlassian Document Format document.

    Jira Cloud API v3 only accepts rich text fields as ADF.

    Args:
        text: Plain text

    Returns:
        ADF document with one paragraph holding the text
    """
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": text}],
            }
        ],
    }


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    async def create_issue(
        self,
        project_key: str,
        summary: str,
        description: str | None = None,
        issue_type: str | None = None,
    ) -> CreatedIssue:
        """
        Create a new Jira issue.

        Args:
            project_key: The key of the project
            summary: The issue summary
            description: Optional plain text description
            issue_type: Issue type name, defaults to ``Task``

        Returns:
            The created issue

        Raises:
            RemoteRequestError: If Jira rejects the request
            ValueError: If Jira's response carries no issue key
        """
        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "issuetype": {"name": issue_type or DEFAULT_ISSUE_TYPE},
        }
        if description:
            fields["description"] = text_to_adf(description)

        data = await self.request(
            "POST",
            ISSUE_PATH,
            json_body={"fields": fields},
            action="create issue",
        )
        created = CreatedIssue.from_api_response(data)
        logger.info(f"Created issue {created.key} in project {project_key}")
        return created

    async def assign_issue(self, issue_key: str, account_id: str) -> None:
        """
        Assign an issue to an account.

        Jira answers 204 No Content on success.

        Raises:
            RemoteRequestError: If Jira rejects the assignment
        """
        await self.request(
            "PUT",
            f"{ISSUE_PATH}/{quote(issue_key, safe='')}/assignee",
            json_body={"accountId": account_id},
            action="assign issue",
        )
        logger.info(f"Assigned {issue_key} to account {account_id}")
