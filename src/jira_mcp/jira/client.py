"""Base client module for Jira API interactions."""

import json
import logging
import types
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from ..exceptions import RemoteRequestError
from .config import JiraConfig

# Configure logging
logger = logging.getLogger("jira-mcp.jira")

# Characters left unescaped by JavaScript's encodeURIComponent.
URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode a single query value the way encodeURIComponent does."""
    return quote(value, safe=URI_COMPONENT_SAFE)


def encode_query(params: dict[str, str]) -> str:
    """Percent-encode query parameters (spaces become %20, not +)."""
    return urlencode(params, safe=URI_COMPONENT_SAFE, quote_via=quote)


class JiraClient:
    """Base client for Jira API interactions."""

    def __init__(
        self,
        config: JiraConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object.
            transport: Optional httpx transport, mainly for tests.
        """
        self.config = config
        # No client-side timeout: the transport's behaviour applies.
        self.session = httpx.AsyncClient(transport=transport, timeout=None)

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close HTTP session."""
        await self.session.aclose()

    def _headers(self, with_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": self.config.basic_auth_header,
            "Accept": "application/json",
            "Accept-Language": "en-US",
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        action: str = "call Jira",
        context: str | None = None,
    ) -> Any:
        """Send an authenticated request to the Jira REST API.

        Args:
            method: HTTP method
            path: API path, starting with ``/``
            params: Query parameters, percent-encoded into the URL
            json_body: JSON request body
            action: Short description used when rendering a failure
            context: Extra diagnostic text attached to a failure

        Returns:
            Decoded JSON body, or None for an empty success body (e.g. 204)

        Raises:
            RemoteRequestError: If Jira answers with a non-success status
        """
        url = f"{self.config.url}{path}"
        if params:
            url = f"{url}?{encode_query(params)}"
        logger.debug(f"Sending {method} request to {url}")

        content = json.dumps(json_body) if json_body is not None else None
        response = await self.session.request(
            method,
            url,
            headers=self._headers(with_body=content is not None),
            content=content,
        )

        if not response.is_success:
            # The body is kept verbatim; error payloads do not follow the success schema.
            body = response.text
            logger.error(
                f"HTTP error {response.status_code} for {method} {url}: {body}"
            )
            raise RemoteRequestError(
                response.status_code,
                response.reason_phrase,
                body,
                action=action,
                context=context,
            )

        if not response.content:
            return None
        return response.json()
