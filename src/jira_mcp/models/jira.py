"""
Jira entity models.

These are read-only projections of Jira REST API v3 payloads; only the
fields the tools render are kept.
"""

import logging
from typing import Any

from .base import ApiModel
from .constants import UNKNOWN

logger = logging.getLogger(__name__)


class IssueSummary(ApiModel):
    """
    Model representing a Jira issue as returned by a JQL search.
    """

    key: str = UNKNOWN
    summary: str = ""
    status: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "IssueSummary":
        """
        Create an IssueSummary from a Jira API response.

        Args:
            data: One entry of the search response's ``issues`` list
            **kwargs: Additional context parameters (unused)

        Returns:
            An IssueSummary instance
        """
        if not data:
            return cls()

        fields = data.get("fields") or {}
        status = fields.get("status")
        status_name = status.get("name") if isinstance(status, dict) else None

        return cls(
            key=str(data.get("key", UNKNOWN)),
            summary=str(fields.get("summary") or ""),
            status=status_name,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {"key": self.key, "summary": self.summary, "status": self.status}


class ProjectSummary(ApiModel):
    """
    Model representing a Jira project.
    """

    key: str = UNKNOWN
    name: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "ProjectSummary":
        """
        Create a ProjectSummary from a Jira API response.
        """
        if not data:
            return cls()

        return cls(
            key=str(data.get("key", UNKNOWN)),
            name=str(data.get("name", UNKNOWN)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {"key": self.key, "name": self.name}


class CreatedIssue(ApiModel):
    """
    Model representing the response to an issue creation request.
    """

    key: str
    id: str | None = None
    self_url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "CreatedIssue":
        """
        Create a CreatedIssue from a Jira API response.

        Raises:
            ValueError: If the response carries no issue key
        """
        if not isinstance(data, dict) or not data.get("key"):
            logger.debug(f"Issue creation response without key: {data!r}")
            raise ValueError("Jira did not return a key for the created issue")

        return cls(
            key=str(data["key"]),
            id=str(data["id"]) if data.get("id") is not None else None,
            self_url=data.get("self"),
        )
