"""Async Python client for the Orchestrate document-store API.

Scope:
    Key-value, search, graph, and event operations against
    `https://api.orchestrate.io/v0` using basic authentication and JSON bodies.

Module split:
    - `config`: environment-driven endpoint, transport, and token settings.
    - `urls`: path/query composition and escaping.
    - `transport`: authenticated GET/PUT/DELETE dispatch.
    - `response`: response normalization and the success contract.
    - `client`: key-value verbs and builder factories.
    - `builders`: fluent search, graph, and event builders.
    - `cli`: command-line adapter.
"""

__version__ = "0.1.0"

from orchestrate.client import Client, conditional_headers
from orchestrate.config import ClientConfig
from orchestrate.errors import (
    BuilderStateError,
    OrchestrateError,
    PreconditionError,
    RemoteError,
)
from orchestrate.response import Response

__all__ = [
    "BuilderStateError",
    "Client",
    "ClientConfig",
    "OrchestrateError",
    "PreconditionError",
    "RemoteError",
    "Response",
    "conditional_headers",
]
