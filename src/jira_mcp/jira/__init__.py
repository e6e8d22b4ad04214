"""Jira API module for the Jira MCP server."""

from .client import JiraClient
from .config import REQUIRED_ENV_VARS, JiraConfig
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .users import AssignmentMixin, UsersMixin


class JiraFetcher(
    SearchMixin,
    ProjectsMixin,
    AssignmentMixin,
    UsersMixin,
    IssuesMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - SearchMixin: JQL search
    - ProjectsMixin: Project listing
    - AssignmentMixin: Self-assignment built on user lookup
    - UsersMixin: Current user lookup
    - IssuesMixin: Issue creation and assignment
    """

    pass


__all__ = [
    "JiraClient",
    "JiraConfig",
    "JiraFetcher",
    "REQUIRED_ENV_VARS",
]
