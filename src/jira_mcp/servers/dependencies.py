"""Dependency providers used by the tool functions.

Configuration is read on every call so rotated credentials take effect
without restarting the server.
"""

import logging

from jira_mcp.jira import JiraConfig, JiraFetcher
from jira_mcp.jql import LLMConfig, QueryResolver, build_query_resolver
from jira_mcp.logging_config import mask_sensitive

logger = logging.getLogger("jira-mcp.servers.dependencies")


def get_jira_fetcher(config: JiraConfig) -> JiraFetcher:
    """Create a JiraFetcher for one tool invocation.

    Use it as an async context manager so its HTTP session is closed.
    """
    logger.debug(
        f"Creating JiraFetcher for {config.url} as {config.email} "
        f"(token {mask_sensitive(config.api_token)})"
    )
    return JiraFetcher(config)


def get_query_resolver() -> QueryResolver:
    """Create the natural-language resolver for one tool invocation."""
    try:
        llm_config = LLMConfig.from_env()
    except ValueError as e:
        logger.warning(f"Invalid language model configuration, using keyword rules: {e}")
        return build_query_resolver(None)
    if llm_config is None:
        logger.debug("LLM_API_KEY not set; using keyword rules only")
    return build_query_resolver(llm_config)
