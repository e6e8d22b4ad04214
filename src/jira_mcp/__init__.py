import asyncio
import os

import click
from dotenv import load_dotenv

from .logging_config import log_operation, setup_logger

__version__ = "1.0.0"


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio or streamable-http)",
)
@click.option(
    "--host",
    default="127.0.0.1",
    help="Host to bind for HTTP transport",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for HTTP transport",
)
@click.option(
    "--log-dir",
    help="Directory to store log files (enables file logging)",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--llm-api-key",
    help="API key for an OpenAI-compatible model used to translate queries to JQL",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    host: str,
    port: int,
    log_dir: str | None,
    jira_url: str | None,
    jira_email: str | None,
    jira_token: str | None,
    llm_api_key: str | None,
) -> None:
    """Jira MCP Server - Jira issue tools for MCP clients."""
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    logger = setup_logger(
        name="jira-mcp",
        level=logging_level,
        log_to_file=bool(log_dir),
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line values take precedence over the environment
        if jira_url:
            os.environ["JIRA_BASE_URL"] = jira_url
        if jira_email:
            os.environ["JIRA_EMAIL"] = jira_email
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if llm_api_key:
            os.environ["LLM_API_KEY"] = llm_api_key

    from .servers import run_server

    logger.info(f"Starting Jira MCP v{__version__} with {transport} transport")
    asyncio.run(run_server(transport=transport, host=host, port=port))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
