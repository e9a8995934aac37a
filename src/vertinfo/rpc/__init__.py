"""JSON-RPC request handling: envelope, methods, rate limiting, responses."""

from vertinfo.rpc.errors import (
    InternalError,
    InvalidParamsError,
    MethodNotFoundError,
    ParseError,
    RateLimitedError,
    RpcError,
)
from vertinfo.rpc.pipeline import RequestPipeline
from vertinfo.rpc.ratelimit import DEFAULT_WINDOW_MS, RateLimiter
from vertinfo.rpc.response import RpcReply

__all__ = [
    "DEFAULT_WINDOW_MS",
    "InternalError",
    "InvalidParamsError",
    "MethodNotFoundError",
    "ParseError",
    "RateLimitedError",
    "RateLimiter",
    "RequestPipeline",
    "RpcError",
    "RpcReply",
]
