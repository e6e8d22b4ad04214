class JiraMCPError(Exception):
    """Base exception for Jira MCP errors."""

    pass


class MissingConfigurationError(JiraMCPError):
    """Raised when the Jira credentials are not fully configured.

    Carries the names of every required variable, not only the missing ones,
    so the caller can render a single remediation message.
    """

    def __init__(self, env_vars: tuple[str, ...]) -> None:
        self.env_vars = env_vars
        names = ", ".join(env_vars[:-1]) + f", and {env_vars[-1]}"
        super().__init__(f"{names} environment variables must be set.")


class RemoteRequestError(JiraMCPError):
    """Raised when the Jira REST API answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        status_text: str,
        body: str,
        action: str | None = None,
        context: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        self.action = action
        self.context = context
        super().__init__(f"HTTP {status_code} {status_text}. Details: {body}")


class TranslationUnresolvedError(JiraMCPError):
    """Raised when a natural-language query cannot be turned into JQL."""

    pass
