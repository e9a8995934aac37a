"""vertinfo: read-only JSON-RPC server for chain economics and burn status.

This package provides:
- A JSON-RPC 2.0 request pipeline with per-client rate limiting
- Four query methods over a read-only key-value store
- A Starlette HTTP application and uvicorn runner
- Testing fakes for clocks and stores
"""

__version__ = "0.1.0"

from vertinfo.http import create_app, run_http
from vertinfo.models import EconConf
from vertinfo.rpc import RateLimiter, RequestPipeline
from vertinfo.store import KeyValueStore, MemoryStore, load_store

__all__ = [
    "EconConf",
    "KeyValueStore",
    "MemoryStore",
    "RateLimiter",
    "RequestPipeline",
    "create_app",
    "load_store",
    "run_http",
]
