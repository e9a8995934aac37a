"""HTTP application for the JSON-RPC endpoint.

A single ``POST /`` route feeds request bodies through the pipeline. The
client's remote host is its rate-limit identity. ``GET /health`` is a
liveness probe that bypasses the pipeline.
"""

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from vertinfo.rpc.pipeline import RequestPipeline

__all__ = ["UNKNOWN_CLIENT", "client_identity", "create_app"]

UNKNOWN_CLIENT = "unknown"


def client_identity(request: Request) -> str:
    """Return the remote host of the connection, used as rate-limit key."""
    if request.client is None or not request.client.host:
        return UNKNOWN_CLIENT
    return request.client.host


async def health(request: Request) -> JSONResponse:
    """Health check endpoint.

    Returns:
        JSON response with status "ok" and 200 status code.
    """
    return JSONResponse({"status": "ok"})


def create_app(pipeline: RequestPipeline, rpc_path: str = "/") -> Starlette:
    """Create the HTTP application.

    Args:
        pipeline: Pipeline that processes every JSON-RPC request.
        rpc_path: Path of the JSON-RPC endpoint.

    Returns:
        Configured Starlette application.
    """

    async def rpc(request: Request) -> Response:
        """JSON-RPC endpoint; captures the pipeline from the closure."""
        body = await request.body()
        reply = await pipeline.handle(body, client_identity(request))
        return Response(
            reply.body,
            status_code=reply.status_code,
            media_type="application/json",
        )

    return Starlette(
        routes=[
            Route("/health", health, methods=["GET"]),
            Route(rpc_path, rpc, methods=["POST"]),
        ],
    )
