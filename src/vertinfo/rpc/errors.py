"""JSON-RPC error types for the request pipeline.

Each exception carries the JSON-RPC error code and the HTTP status that the
pipeline attaches to the error response.
"""

from __future__ import annotations

__all__ = [
    "InternalError",
    "InvalidParamsError",
    "MethodNotFoundError",
    "ParseError",
    "RateLimitedError",
    "RpcError",
]


class RpcError(RuntimeError):
    """Base class for errors that terminate a single request.

    Subclasses set ``json_rpc_code``, ``http_status`` and ``message``.
    ``request_id`` is the id of the originating request, or ``None`` when
    the request never reached a parseable id.
    """

    json_rpc_code: int = -32603
    http_status: int = 500
    message: str = "Internal error"

    def __init__(
        self,
        detail: str | None = None,
        *,
        request_id: str | int | float | None = None,
    ) -> None:
        super().__init__(detail or self.message)
        self.request_id = request_id


class ParseError(RpcError):
    """Malformed JSON or envelope. Never carries a request id."""

    json_rpc_code = -32700
    http_status = 500
    message = "Parse error"


class MethodNotFoundError(RpcError):
    """Well-formed envelope naming an unknown method."""

    json_rpc_code = -32601
    http_status = 404
    message = "Method not found"


class InvalidParamsError(RpcError):
    """Known method whose ``params`` fail its schema."""

    json_rpc_code = -32602
    http_status = 500
    message = "Invalid params"


class RateLimitedError(RpcError):
    """Client sent a request inside its rate window. Rejected before parsing."""

    json_rpc_code = -32005
    http_status = 429
    message = "Rate limit exceeded"


class InternalError(RpcError):
    """Store or handler failure while serving a valid request."""
