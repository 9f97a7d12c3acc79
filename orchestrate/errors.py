"""Exception hierarchy raised by the Orchestrate client.

Error taxonomy:
    - `PreconditionError`: caller mistakes detected before any network call.
    - `BuilderStateError`: builder reuse after dispatch or a terminal action the
      builder mode does not allow.
    - `RemoteError`: the API answered with a status outside {200, 201, 204}.

Transport failures (`httpx.RequestError` and subclasses) are not wrapped; they
propagate to the awaiting caller unchanged.
"""


class OrchestrateError(Exception):
    """Base exception class for all client errors."""


class PreconditionError(OrchestrateError, ValueError):
    """Raised synchronously when required arguments are missing or malformed."""


class BuilderStateError(OrchestrateError, RuntimeError):
    """Raised when a builder is used outside its accumulating state or mode."""


class RemoteError(OrchestrateError):
    """Raised when the API rejects a request.

    The normalized `Response` is kept on the exception so callers can branch on
    the remote status code and the (best-effort decoded) error body.
    """

    def __init__(self, response):
        super().__init__(
            f"Orchestrate request failed with status {response.status_code}"
        )
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def body(self):
        return self.response.body
