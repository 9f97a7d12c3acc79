"""Endpoint and credential configuration for the Orchestrate client.

Architectural role:
    Centralizes API host/version selection, transport settings, and token lookup
    for `orchestrate.client` and `orchestrate.transport`.

Resolution model:
    Values are read from the process environment (after `.env` loading) when a
    `ClientConfig` is instantiated. Explicit constructor arguments always win.

Failure behavior:
    Missing token material is represented as `None`; `Client` turns an absent
    token into a `PreconditionError`.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from orchestrate import __version__

load_dotenv()

DEFAULT_API_HOST = "api.orchestrate.io"
DEFAULT_API_VERSION = "v0"
TOKEN_ENV_VAR = "ORCHESTRATE_API_KEY"


def _env_float(name, default):
    value = os.getenv(name, "").strip()
    if not value:
        return default
    return float(value)


@dataclass(frozen=True)
class ClientConfig:
    """Runtime configuration for `Client`.

    Relevant environment variables:
        - `ORCHESTRATE_API_HOST`
        - `ORCHESTRATE_API_VERSION`
        - `ORCHESTRATE_TIMEOUT_SECONDS`
        - `ORCHESTRATE_USER_AGENT`

    The timeout belongs to the `httpx` transport. The request pipeline itself
    performs no retries and enforces no deadline of its own.
    """

    api_host: str = field(
        default_factory=lambda: os.getenv("ORCHESTRATE_API_HOST", DEFAULT_API_HOST).strip()
    )
    api_version: str = field(
        default_factory=lambda: os.getenv("ORCHESTRATE_API_VERSION", DEFAULT_API_VERSION).strip()
    )
    timeout_seconds: float = field(
        default_factory=lambda: _env_float("ORCHESTRATE_TIMEOUT_SECONDS", 30.0)
    )
    user_agent: str = field(
        default_factory=lambda: os.getenv(
            "ORCHESTRATE_USER_AGENT", f"orchestrate-python/{__version__}"
        ).strip()
    )

    @property
    def endpoint(self) -> str:
        """Return `host/version`, the fixed prefix of every request URL."""
        return f"{self.api_host}/{self.api_version}"


def load_token(path=None):
    """Load the API token from the environment or a key file.

    Resolution order:
        1. `ORCHESTRATE_API_KEY` environment variable.
        2. Raw file contents at `path`.

    Args:
        path: Optional key file path.

    Returns:
        Token string or `None` when not available.

    Edge cases:
        - Whitespace-only values count as missing.
        - Missing file returns `None`.
    """
    env_value = os.getenv(TOKEN_ENV_VAR, "").strip()
    if env_value:
        return env_value
    if not path or not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None
