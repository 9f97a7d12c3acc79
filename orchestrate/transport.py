"""Authenticated HTTP dispatch for Orchestrate requests.

Architectural role:
    Executes GET/PUT/DELETE requests with basic authentication and the default
    JSON headers, then hands the raw response to `validate_response`.

Request flow:
    `Client` verb or builder terminal -> `compose_url` -> `Dispatcher.do_*`
    -> `httpx.AsyncClient.request` -> `validate_response`.

Retry behavior:
    No retry loop is implemented. Each call is attempted exactly once; the only
    deadline is the timeout configured on the `httpx` client.

Concurrency:
    Each request opens its own `httpx.AsyncClient` context, so one dispatcher can
    serve concurrent calls without shared mutable state.

Failure handling model:
    - Non-success statuses raise `RemoteError` (from `validate_response`).
    - `httpx.RequestError` transport failures propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from orchestrate.config import ClientConfig
from orchestrate.response import Response, validate_response


logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


class Dispatcher:
    """Send one authenticated request per call and normalize the result.

    Args:
        token: API token, sent as the basic-auth username with an empty password.
        config: Transport settings (timeout, user agent).
        transport: Optional `httpx` transport, e.g. `httpx.MockTransport` in tests.
    """

    def __init__(
        self,
        token: str,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._auth = (token, "")
        self._config = config
        self._transport = transport

    def default_headers(self) -> dict[str, str]:
        """Build headers sent with every request."""
        return {
            "Content-Type": CONTENT_TYPE,
            "User-Agent": self._config.user_agent,
        }

    async def do_get(self, url: str) -> Response:
        """GET `url` and return the validated response."""
        return await self._request("GET", url)

    async def do_put(
        self,
        url: str,
        body: Any = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> Response:
        """PUT `body` as JSON to `url`.

        Args:
            url: Fully composed request URL.
            body: JSON-serializable payload; `None` sends no body.
            extra_headers: Headers merged over the defaults. Conditional headers
                (`If-Match`, `If-None-Match`) arrive here and win on collision.
        """
        return await self._request("PUT", url, body=body, extra_headers=extra_headers)

    async def do_delete(self, url: str, query_suffix: str | None = None) -> Response:
        """DELETE `url`, appending `query_suffix` verbatim when given."""
        if query_suffix:
            url += query_suffix
        return await self._request("DELETE", url)

    async def _request(
        self,
        method: str,
        url: str,
        body: Any = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> Response:
        headers = httpx.Headers(self.default_headers())
        headers.update(extra_headers or {})

        logger.debug("Orchestrate %s %s", method, url)

        async with httpx.AsyncClient(
            auth=self._auth,
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        ) as client:
            raw = await client.request(method, url, headers=headers, json=body)

        return validate_response(raw)
