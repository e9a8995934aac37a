"""Per-request processing pipeline.

Order of stages: rate-limit gate, envelope parse, method resolution, params
validation, handler (one store read), serialization. Every failure is
terminal for its request and becomes a JSON-RPC error reply here.
"""

from __future__ import annotations

import logging

from vertinfo.rpc.envelope import parse_request
from vertinfo.rpc.errors import InternalError, RateLimitedError, RpcError
from vertinfo.rpc.methods import resolve_method
from vertinfo.rpc.params import validate_params
from vertinfo.rpc.ratelimit import RateLimiter
from vertinfo.rpc.response import RpcReply, error_reply, success
from vertinfo.store import KeyValueStore

__all__ = ["RequestPipeline"]

logger = logging.getLogger(__name__)


class RequestPipeline:
    """Turns a raw request body into a serialized JSON-RPC reply.

    Args:
        store: Read-only key-value store queried by the handlers.
        rate_limiter: Limiter owned by this pipeline.
    """

    def __init__(self, store: KeyValueStore, rate_limiter: RateLimiter | None = None) -> None:
        self.store = store
        self.rate_limiter = rate_limiter if rate_limiter is not None else RateLimiter()

    def admit(self, identity: str) -> None:
        """Admit ``identity`` and record the admission, or reject it.

        Raises:
            RateLimitedError: If the client is inside its rate window.
        """
        with self.rate_limiter.lock:
            if not self.rate_limiter.admit(identity):
                raise RateLimitedError()
            self.rate_limiter.record(identity)

    async def handle(self, body: bytes, identity: str) -> RpcReply:
        """Process one request from client ``identity``."""
        try:
            self.admit(identity)
            request = parse_request(body)
            spec = resolve_method(request.method, request.id)
            params = validate_params(spec.params, request.params, request.id)
            try:
                result = await spec.handler(self.store, params)
                payload = success(result, request.id)
            except Exception as exc:
                logger.exception("Error executing %s", request.method)
                raise InternalError(str(exc), request_id=request.id) from exc
        except RpcError as exc:
            logger.debug(
                "Rejected request from %s: %s (%d)", identity, exc, exc.json_rpc_code
            )
            return error_reply(exc)

        logger.debug("Served %s for %s", request.method, identity)
        return RpcReply(payload)
