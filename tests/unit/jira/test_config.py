"""Tests for the Jira configuration module."""

import base64

import pytest

from jira_mcp.exceptions import MissingConfigurationError
from jira_mcp.jira.config import REQUIRED_ENV_VARS, JiraConfig


def test_from_env_success(jira_env):
    """Test that from_env reads all three values."""
    config = JiraConfig.from_env()
    assert config.url == "https://test.atlassian.net"
    assert config.email == "test@example.com"
    assert config.api_token == "test-api-token"


def test_from_env_trims_whitespace_and_trailing_slash(monkeypatch):
    monkeypatch.setenv("JIRA_BASE_URL", "  https://test.atlassian.net/ ")
    monkeypatch.setenv("JIRA_EMAIL", " test@example.com\n")
    monkeypatch.setenv("JIRA_API_TOKEN", "\ttoken ")

    config = JiraConfig.from_env()

    assert config.url == "https://test.atlassian.net"
    assert config.email == "test@example.com"
    assert config.api_token == "token"


@pytest.mark.parametrize("missing", REQUIRED_ENV_VARS)
def test_from_env_missing_any_value(jira_env, monkeypatch, missing):
    """Partial configuration counts as no configuration."""
    monkeypatch.delenv(missing)

    with pytest.raises(MissingConfigurationError) as exc_info:
        JiraConfig.from_env()

    assert exc_info.value.env_vars == REQUIRED_ENV_VARS
    assert str(exc_info.value) == (
        "JIRA_BASE_URL, JIRA_API_TOKEN, and JIRA_EMAIL environment variables must be set."
    )


@pytest.mark.parametrize("blank", REQUIRED_ENV_VARS)
def test_from_env_blank_value_is_missing(jira_env, monkeypatch, blank):
    monkeypatch.setenv(blank, "   ")

    with pytest.raises(MissingConfigurationError):
        JiraConfig.from_env()


def test_from_env_reads_fresh_values(jira_env, monkeypatch):
    """Rotated credentials are picked up on the next call."""
    assert JiraConfig.from_env().api_token == "test-api-token"

    monkeypatch.setenv("JIRA_API_TOKEN", "rotated-token")

    assert JiraConfig.from_env().api_token == "rotated-token"


def test_is_configured(jira_env, monkeypatch):
    assert JiraConfig.is_configured() is True
    monkeypatch.delenv("JIRA_EMAIL")
    assert JiraConfig.is_configured() is False


def test_basic_auth_header(jira_config):
    expected = base64.b64encode(b"test@example.com:test-api-token").decode()
    assert jira_config.basic_auth_header == f"Basic {expected}"
