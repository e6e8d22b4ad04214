"""Configuration module for Jira API interactions."""

import base64
import os
from dataclasses import dataclass

from ..exceptions import MissingConfigurationError

# Order matches the remediation message shown to users.
REQUIRED_ENV_VARS: tuple[str, ...] = ("JIRA_BASE_URL", "JIRA_API_TOKEN", "JIRA_EMAIL")


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Authentication is always Basic auth built from the account email and an
    API token.
    """

    url: str  # Base URL for Jira, without trailing slash
    email: str  # Account email
    api_token: str  # API token

    @property
    def basic_auth_header(self) -> str:
        """Value for the Authorization header.

        Returns:
            ``Basic base64(email:api_token)``
        """
        credentials = f"{self.email}:{self.api_token}".encode()
        return f"Basic {base64.b64encode(credentials).decode('ascii')}"

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Values are trimmed; an empty value counts as missing. The environment
        is read on every call so rotated credentials are picked up without a
        restart.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            MissingConfigurationError: If any required variable is missing
        """
        url = (os.getenv("JIRA_BASE_URL") or "").strip()
        api_token = (os.getenv("JIRA_API_TOKEN") or "").strip()
        email = (os.getenv("JIRA_EMAIL") or "").strip()

        if not (url and api_token and email):
            raise MissingConfigurationError(REQUIRED_ENV_VARS)

        return cls(url=url.rstrip("/"), email=email, api_token=api_token)

    @classmethod
    def is_configured(cls) -> bool:
        """Check whether all required variables are present."""
        try:
            cls.from_env()
        except MissingConfigurationError:
            return False
        return True
