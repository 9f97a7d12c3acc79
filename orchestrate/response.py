"""Response normalization shared by every request path.

Architectural role:
    Converts raw `httpx.Response` objects into immutable `Response` values and
    decides success vs. failure. All verbs and builder terminals funnel through
    `validate_response`.

Decoding model:
    The body is decoded as JSON on a best-effort basis. Plain-text, empty, or
    malformed bodies are kept as the raw text and never raise.

Success model:
    Only 200, 201 and 204 are treated as success. Any other status raises
    `RemoteError` carrying the normalized response.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from orchestrate.errors import RemoteError


logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})


@dataclass(frozen=True)
class Response:
    """Normalized API response.

    Attributes:
        status_code: HTTP status code.
        body: Decoded JSON value, or the raw text when the payload is not JSON.
        headers: Response headers (case-insensitive `httpx.Headers` in practice).
        url: Final request URL.
    """

    status_code: int
    body: Any = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str = ""

    @property
    def ok(self) -> bool:
        return self.status_code in SUCCESS_STATUS_CODES


def decode_body(text: str) -> Any:
    """Return `text` parsed as JSON, or `text` itself when parsing fails."""
    if not text:
        return text
    try:
        return json.loads(text)
    except ValueError:
        return text


def _request_url(raw: httpx.Response) -> str:
    # httpx raises when a response was built without an attached request.
    try:
        return str(raw.request.url)
    except RuntimeError:
        return ""


def validate_response(raw: httpx.Response) -> Response:
    """Normalize a transport response and enforce the success contract.

    Args:
        raw: Response returned by the `httpx` transport.

    Returns:
        A new `Response` with a best-effort decoded body.

    Raises:
        RemoteError: For any status outside {200, 201, 204}.
    """
    response = Response(
        status_code=raw.status_code,
        body=decode_body(raw.text),
        headers=httpx.Headers(raw.headers),
        url=_request_url(raw),
    )

    if not response.ok:
        logger.debug(
            "Orchestrate rejected request: status=%s url=%s",
            response.status_code,
            response.url,
        )
        raise RemoteError(response)

    return response
