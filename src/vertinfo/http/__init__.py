"""HTTP transport for the vertinfo JSON-RPC server."""

from vertinfo.http.app import create_app
from vertinfo.http.runner import run_http
from vertinfo.http.types import Host, HttpAppFactory, Port

__all__ = ["create_app", "run_http", "HttpAppFactory", "Host", "Port"]
