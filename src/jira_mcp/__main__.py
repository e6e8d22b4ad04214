"""Entry point for running the Jira MCP server."""

from jira_mcp import main

if __name__ == "__main__":
    main()
