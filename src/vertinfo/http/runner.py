"""uvicorn runner for the JSON-RPC server."""

import logging

import uvicorn

from vertinfo.http.types import Host, Port

__all__ = ["run_http"]

logger = logging.getLogger(__name__)


async def run_http(
    app: object,
    *,
    host: Host = Host("127.0.0.1"),
    port: Port = Port(8001),
    log_level: str = "info",
) -> None:
    """Serve ``app`` over HTTP until cancelled.

    Args:
        app: The ASGI application to serve.
        host: HTTP server bind address (default: 127.0.0.1).
        port: HTTP server port (default: 8001).
        log_level: uvicorn log level (default: "info").

    Example:
        from vertinfo.http import create_app, run_http
        from vertinfo.rpc import RequestPipeline
        from vertinfo.store import load_store

        app = create_app(RequestPipeline(load_store(path)))
        await run_http(app, host=Host("0.0.0.0"), port=Port(8001))
    """
    config = uvicorn.Config(
        app,  # type: ignore[arg-type]
        host=host,
        port=port,
        log_level=log_level,
        access_log=False,
    )
    server = uvicorn.Server(config)

    logger.info("Starting JSON-RPC server on http://%s:%s", host, port)

    try:
        await server.serve()
    except Exception:
        logger.exception("HTTP server error")
        raise
    finally:
        logger.info("HTTP server shutdown complete")
