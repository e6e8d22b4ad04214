"""In-memory stand-ins for the remote HTTP services."""

from collections.abc import Callable
from typing import Any

import httpx


class FakeJiraAPI:
    """Route requests by (method, path) to canned responses and record them."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[
            tuple[str, str], Callable[[httpx.Request], httpx.Response]
        ] = {}

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            if json is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=json)

        self._routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        route = self._routes.get((request.method, request.url.path)) or self._routes.get(
            (request.method, raw_path)
        )
        if route is None:
            return httpx.Response(
                404, text=f"no route for {request.method} {request.url.path}"
            )
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]
