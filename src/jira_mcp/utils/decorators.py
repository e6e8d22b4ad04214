"""Decorators shared by the FastMCP tool functions."""

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from jira_mcp.exceptions import (
    MissingConfigurationError,
    RemoteRequestError,
    TranslationUnresolvedError,
)
from jira_mcp.logging_config import log_operation

logger = logging.getLogger("jira-mcp.tools")


F = TypeVar("F", bound=Callable[..., Awaitable[str]])


def render_remote_error(error: RemoteRequestError, action: str) -> str:
    """Render a failed Jira request as diagnostic text."""
    text = (
        f"Failed to {error.action or action}: HTTP {error.status_code} "
        f"{error.status_text}. Details: {error.body}"
    )
    if error.context:
        text = f"{text}. {error.context}"
    return text


def tool_boundary(action: str) -> Callable[[F], F]:
    """
    Decorator for FastMCP tools that turns every failure into result text.

    The wrapped tool always returns a string; no exception reaches the
    transport. Known error kinds get their fixed rendering, anything else a
    generic failure message.

    Args:
        action: What the tool does, e.g. "create issue", used in messages.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> str:
            try:
                with log_operation(logger, func.__name__):
                    return await func(*args, **kwargs)
            except MissingConfigurationError as e:
                logger.warning(f"Tool '{func.__name__}' called without Jira configuration")
                return str(e)
            except TranslationUnresolvedError as e:
                logger.warning(f"Tool '{func.__name__}' could not resolve the query")
                return str(e)
            except RemoteRequestError as e:
                return render_remote_error(e, action)
            except Exception as e:  # noqa: BLE001 - tool results must always be text
                logger.exception(f"Unexpected error in tool '{func.__name__}'")
                return f"Failed to {action}: unexpected error ({type(e).__name__}: {e})"

        return wrapper  # type: ignore

    return decorator
