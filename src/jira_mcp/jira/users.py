"""Module for Jira user operations."""

import logging

from .client import JiraClient
from .issues import IssuesMixin

logger = logging.getLogger("jira-mcp.jira")

MYSELF_PATH = "/rest/api/3/myself"


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    async def get_current_user_account_id(self) -> str:
        """Get the account ID of the current user.

        Returns:
            Account ID of the current user

        Raises:
            RemoteRequestError: If the lookup fails
            ValueError: If the response carries no account ID
        """
        myself = await self.request("GET", MYSELF_PATH, action="fetch current user")
        account_id = (myself or {}).get("accountId")
        if not account_id:
            raise ValueError("Jira did not return an accountId for the current user")
        return str(account_id)


class AssignmentMixin(UsersMixin, IssuesMixin):
    """Mixin combining user lookup and issue assignment."""

    async def assign_issue_to_me(self, issue_key: str) -> str:
        """Assign an issue to the authenticated account.

        The assignment request is only sent once the account ID is known.

        Returns:
            The account ID the issue was assigned to
        """
        account_id = await self.get_current_user_account_id()
        await self.assign_issue(issue_key, account_id)
        return account_id
