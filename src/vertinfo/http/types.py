"""HTTP type protocols for vertinfo."""

from typing import NewType, Protocol, runtime_checkable

from vertinfo.rpc.pipeline import RequestPipeline

# Semantic types for HTTP configuration
Host = NewType("Host", str)
"""Network host address (IP or hostname)."""

Port = NewType("Port", int)
"""Network port number (1-65535)."""


@runtime_checkable
class HttpAppFactory(Protocol):
    """Protocol for HTTP app factory functions.

    A factory that wraps a request pipeline in an ASGI application.
    """

    def __call__(self, pipeline: RequestPipeline) -> object:
        """Create and return an ASGI application."""
        ...
