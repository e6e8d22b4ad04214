"""Main FastMCP server setup for the Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Literal

from fastmcp import FastMCP

from jira_mcp.jira import REQUIRED_ENV_VARS, JiraConfig
from jira_mcp.jql import LLMConfig

from .jira import register_jira_tools

logger = logging.getLogger("jira-mcp.server.main")

Transport = Literal["stdio", "streamable-http"]


def get_available_services() -> dict[str, bool]:
    """Report which features the current environment enables."""
    jira_is_setup = JiraConfig.is_configured()
    try:
        llm_is_setup = LLMConfig.from_env() is not None
    except ValueError as e:
        logger.warning(f"Invalid language model configuration: {e}")
        llm_is_setup = False

    if jira_is_setup:
        logger.info("Using Jira Cloud Basic Authentication (API Token)")
    else:
        logger.warning(
            f"Jira is not configured; set {', '.join(REQUIRED_ENV_VARS)}. "
            "Tools will report the missing configuration."
        )
    if llm_is_setup:
        logger.info("Natural language queries will be translated by the language model")
    else:
        logger.info("LLM_API_KEY not set; natural language queries use keyword rules")

    return {"jira": jira_is_setup, "llm": llm_is_setup}


@asynccontextmanager
async def main_lifespan(app: FastMCP) -> AsyncIterator[dict]:
    logger.info("Jira MCP server lifespan starting...")
    services = get_available_services()
    try:
        yield {"available_services": services}
    finally:
        logger.info("Jira MCP server lifespan shutdown complete.")


def create_server() -> FastMCP:
    """Build the FastMCP server with every Jira tool registered."""
    mcp = FastMCP(
        name="jira-mcp",
        instructions="Provides tools for searching, creating and assigning Jira issues.",
        lifespan=main_lifespan,
    )
    register_jira_tools(mcp)
    return mcp


main_mcp = create_server()


async def run_server(
    transport: Transport = "stdio", host: str = "127.0.0.1", port: int = 8000
) -> None:
    """Run the server on the chosen transport."""
    if transport == "stdio":
        logger.info("Jira MCP Server running on stdio")
        await main_mcp.run_async(transport="stdio")
    else:
        logger.info(f"Jira MCP Server listening on http://{host}:{port}")
        await main_mcp.run_async(transport=transport, host=host, port=port)
