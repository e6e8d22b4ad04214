"""
Root pytest configuration.

Provides Jira environment fixtures and an in-memory Jira API.
"""

import pytest

from jira_mcp.jira import JiraConfig
from tests.utils.mocks import FakeJiraAPI

JIRA_ENV = {
    "JIRA_BASE_URL": "https://test.atlassian.net",
    "JIRA_EMAIL": "test@example.com",
    "JIRA_API_TOKEN": "test-api-token",
}

LLM_ENV_VARS = ("LLM_API_KEY", "LLM_BASE_URL", "LLM_MODEL", "LLM_MAX_TOKENS")


@pytest.fixture
def jira_env(monkeypatch):
    """Set the Jira environment and make sure no language model is configured."""
    for name, value in JIRA_ENV.items():
        monkeypatch.setenv(name, value)
    for name in LLM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return JIRA_ENV


@pytest.fixture
def jira_config():
    return JiraConfig(
        url=JIRA_ENV["JIRA_BASE_URL"],
        email=JIRA_ENV["JIRA_EMAIL"],
        api_token=JIRA_ENV["JIRA_API_TOKEN"],
    )


@pytest.fixture
def fake_jira():
    return FakeJiraAPI()
