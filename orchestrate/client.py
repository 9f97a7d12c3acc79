"""Orchestrate API client: key-value verbs and builder factories.

Architectural role:
    Entry point used by applications. Validates caller arguments, composes
    request URLs, and delegates dispatch to `orchestrate.transport.Dispatcher`.

Call model:
    Verbs are plain methods that check their preconditions synchronously and
    return an awaitable. Missing arguments therefore raise `PreconditionError`
    at call time, before any network activity:

        >>> client = Client("token")
        >>> response = await client.get("users", "sjkaliski@gmail.com")
        >>> response.status_code, response.body["name"]
        (200, 'Steve Kaliski')

Concurrency:
    The client holds only the immutable token and configuration, so calls from
    one instance may run concurrently (e.g. under `asyncio.gather`).

Failure handling model:
    - Remote statuses outside {200, 201, 204} raise `RemoteError`.
    - `httpx.RequestError` transport failures propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Awaitable, Mapping, Sequence

import httpx

from orchestrate.builders import EventBuilder, GraphBuilder, SearchBuilder
from orchestrate.builders.base import require, require_number
from orchestrate.config import ClientConfig, load_token
from orchestrate.errors import PreconditionError
from orchestrate.response import Response
from orchestrate.transport import Dispatcher
from orchestrate.urls import compose_url, quote_etag


def conditional_headers(match: str | bool | None) -> dict[str, str]:
    """Map a conditional-write argument to request headers.

    Args:
        match: `None` for an unconditional write, a version token for
            update-if-matches (`If-Match`), or `False` for create-only
            (`If-None-Match: "*"`). `True` behaves like `None`.

    Returns:
        Header mapping, possibly empty.
    """
    if isinstance(match, str):
        return {"If-Match": quote_etag(match)}
    if match is False:
        return {"If-None-Match": '"*"'}
    return {}


class Client:
    """Async client for one Orchestrate account.

    Args:
        token: API key; used as the basic-auth username.
        config: Endpoint and transport settings. Defaults to environment values.
        transport: Optional `httpx` transport override.

    Raises:
        PreconditionError: If `token` is missing or empty.
    """

    def __init__(
        self,
        token: str,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        require(token, "API key required.")
        self._token = token
        self._config = config or ClientConfig()
        self._dispatcher = Dispatcher(token, self._config, transport=transport)

    @classmethod
    def from_env(cls, key_file=None, **kwargs) -> Client:
        """Build a client from `ORCHESTRATE_API_KEY` or `key_file`."""
        token = load_token(key_file)
        if not token:
            raise PreconditionError("ORCHESTRATE_API_KEY not configured")
        return cls(token, **kwargs)

    def __repr__(self) -> str:
        return f"Client(endpoint={self._config.endpoint!r})"

    @property
    def token(self) -> str:
        return self._token

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def compose_url(
        self,
        path: Sequence[Any],
        query: Mapping[str, Any] | None = None,
    ) -> str:
        """Build an API URL under this client's host and version."""
        return compose_url(path, query, endpoint=self._config.endpoint)

    # ----------------------------------------------------------------
    # Key-value verbs
    # ----------------------------------------------------------------

    def get(self, collection: str, key: str) -> Awaitable[Response]:
        """Fetch the value stored at `collection/key`."""
        require(collection and key, "Collection and key required.")
        return self._dispatcher.do_get(self.compose_url([collection, key]))

    def list(
        self,
        collection: str,
        limit: int | None = None,
        start_key: str | None = None,
        end_key: str | None = None,
    ) -> Awaitable[Response]:
        """List values in a collection, optionally bounded by key range.

        Args:
            collection: Collection name.
            limit: Maximum number of results; must be numeric when given.
            start_key: First key of the range.
            end_key: Last key of the range.
        """
        require(collection, "Collection required.")
        if limit is not None:
            require_number(limit, "Limit")
        return self._dispatcher.do_get(
            self.compose_url(
                [collection],
                {"limit": limit, "startKey": start_key, "endKey": end_key},
            )
        )

    def put(
        self,
        collection: str,
        key: str,
        data: Any,
        match: str | bool | None = None,
    ) -> Awaitable[Response]:
        """Store `data` at `collection/key`.

        Args:
            collection: Collection name.
            key: Item key.
            data: JSON-serializable value.
            match: Conditional write selector, see `conditional_headers`.
        """
        require(collection and key, "Collection, key, and JSON object required.")
        require(data is not None, "Collection, key, and JSON object required.")
        return self._dispatcher.do_put(
            self.compose_url([collection, key]),
            data,
            conditional_headers(match),
        )

    def remove(self, collection: str, key: str, purge: bool = False) -> Awaitable[Response]:
        """Delete the value at `collection/key`; `purge` also drops its history."""
        require(collection and key, "Collection and key required.")
        return self._dispatcher.do_delete(
            self.compose_url([collection, key], {"purge": True if purge else None})
        )

    def search(self, collection: str, query: str) -> Awaitable[Response]:
        """Run a full-text query against a collection."""
        require(collection and query, "Collection and query required.")
        return self._dispatcher.do_get(self.compose_url([collection], {"query": query}))

    def delete_collection(self, collection: str) -> Awaitable[Response]:
        """Delete a whole collection. Collection deletion is always forced."""
        require(collection, "Collection required.")
        return self._dispatcher.do_delete(self.compose_url([collection]), "?force=true")

    # ----------------------------------------------------------------
    # Builder factories
    # ----------------------------------------------------------------

    def new_search_builder(self) -> SearchBuilder:
        return SearchBuilder(self, write=False)

    def new_graph_builder(self) -> GraphBuilder:
        return GraphBuilder(self, write=True)

    def new_graph_reader(self) -> GraphBuilder:
        return GraphBuilder(self, write=False)

    def new_event_builder(self) -> EventBuilder:
        return EventBuilder(self, write=True)

    def new_event_reader(self) -> EventBuilder:
        return EventBuilder(self, write=False)
