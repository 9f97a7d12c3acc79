"""URL composition for the Orchestrate API surface.

Every request URL has the form::

    https://{host}/{version}/{segment}/{segment}...?{query}

Segments are escaped one by one, so a key such as `byrd@bowery.io` or `a/b`
stays a single path component. Query parameters whose value is `None` are
dropped before serialization.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence
from urllib.parse import quote, urlencode

from orchestrate.errors import PreconditionError


# Characters left unescaped by JavaScript's encodeURIComponent.
_COMPONENT_SAFE = "-_.!~*'()"


def encode_segment(segment: Any) -> str:
    """Percent-encode one path segment, including `/` and `@`."""
    return quote(str(segment), safe=_COMPONENT_SAFE)


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Serialize query parameters, omitting entries whose value is `None`.

    Returns:
        Encoded query string without the leading `?`, or an empty string.
    """
    if not params:
        return ""
    pairs = [
        (name, _format_query_value(value))
        for name, value in params.items()
        if value is not None
    ]
    return urlencode(pairs, quote_via=quote, safe=_COMPONENT_SAFE)


def compose_url(
    path: Sequence[Any],
    query: Mapping[str, Any] | None = None,
    *,
    endpoint: str,
) -> str:
    """Build an absolute HTTPS URL for the API.

    Args:
        path: Ordered path segments, e.g. `["users", "byrd@bowery.io"]`.
        query: Optional query parameters; `None` values are dropped.
        endpoint: `host/version` prefix, e.g. `api.orchestrate.io/v0`.

    Returns:
        URL string. No `?` is emitted when no parameters remain.

    Raises:
        PreconditionError: If `path` is empty.
    """
    if not path:
        raise PreconditionError("At least one path segment is required.")

    pathname = "".join("/" + encode_segment(segment) for segment in path)
    url = f"https://{endpoint}{pathname}"

    query_string = encode_query(query)
    if query_string:
        url = f"{url}?{query_string}"
    return url


def quote_etag(value: str) -> str:
    """Quote a version token for `If-Match` unless it is already quoted."""
    if value.startswith('"'):
        return value
    return f'"{value}"'
