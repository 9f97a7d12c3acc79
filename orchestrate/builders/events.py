"""Fluent builder for time-ordered events attached to a key-value item.

Paths:
    - create: PUT /{collection}/{key}/event/{type}[/{timestamp}]  (body: event data)
    - read:   GET /{collection}/{key}/event/{type}?start=...&end=...

Timestamps are milliseconds since the epoch; `datetime` values are converted,
with naive datetimes read as UTC. Without an explicit timestamp the API stamps
the event at arrival time.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Awaitable

from orchestrate.builders.base import Builder, require, to_timestamp
from orchestrate.response import Response


class EventBuilder(Builder):
    """Accumulate event type, data, and time bounds for one request."""

    def __init__(self, delegate, write: bool = False) -> None:
        super().__init__(delegate, write)
        self._from = None
        self._type = None
        self._time = None
        self._data = None
        self._start = None
        self._end = None

    def from_(self, collection: str, key: str) -> EventBuilder:
        self._ensure_active()
        require(collection and key, "Collection and key required.")
        self._from = (collection, key)
        return self

    def type(self, event_type: str) -> EventBuilder:
        self._ensure_active()
        require(event_type, "Event type required.")
        self._type = event_type
        return self

    def time(self, timestamp: int | datetime) -> EventBuilder:
        self._ensure_active()
        self._time = to_timestamp(timestamp)
        return self

    def data(self, data: Any) -> EventBuilder:
        self._ensure_active()
        require(data is not None, "Event data required.")
        self._data = data
        return self

    def start(self, timestamp: int | datetime) -> EventBuilder:
        self._ensure_active()
        self._start = to_timestamp(timestamp)
        return self

    def end(self, timestamp: int | datetime) -> EventBuilder:
        self._ensure_active()
        self._end = to_timestamp(timestamp)
        return self

    def create(self) -> Awaitable[Response]:
        """Store the accumulated event data."""
        self._ensure_active()
        self._ensure_mode(True, "create")
        require(self._from and self._type, "Source item and event type required.")
        require(self._data is not None, "Event data required.")
        self._seal()

        path = self._event_path()
        if self._time is not None:
            path.append(self._time)

        client = self._delegate
        return client.dispatcher.do_put(client.compose_url(path), self._data)

    def get(self) -> Awaitable[Response]:
        """List events of the accumulated type within the optional time range."""
        self._ensure_active()
        self._ensure_mode(False, "get")
        require(self._from and self._type, "Source item and event type required.")
        self._seal()

        client = self._delegate
        return client.dispatcher.do_get(
            client.compose_url(self._event_path(), {"start": self._start, "end": self._end})
        )

    def _event_path(self) -> list:
        collection, key = self._from
        return [collection, key, "event", self._type]
