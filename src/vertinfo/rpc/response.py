"""JSON-RPC response serialization.

Integers inside a result are written as lowercase ``0x`` hex strings so that
clients decoding JSON numbers as doubles never lose precision. A negative
int keeps its sign in front of the prefix (``-0x5``); served EconConf values
are validated non-negative. The request id is echoed unchanged.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from vertinfo.rpc.envelope import RequestId
from vertinfo.rpc.errors import RpcError

__all__ = ["RpcReply", "encode_result", "error_reply", "failure", "success"]


@dataclass(frozen=True)
class RpcReply:
    """Serialized response body plus the HTTP status to send it with."""

    body: bytes
    status_code: int = 200


def encode_result(value: Any) -> Any:
    """Recursively convert ints to hex strings in a JSON-able structure."""
    if isinstance(value, bool) or value is None:
        return value
    if isinstance(value, int):
        return hex(value)
    if isinstance(value, BaseModel):
        return encode_result(value.model_dump(by_alias=True))
    if isinstance(value, Mapping):
        return {str(key): encode_result(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [encode_result(item) for item in value]
    return value


def _dump(payload: dict[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")


def success(result: Any, request_id: RequestId) -> bytes:
    """Serialize a success envelope."""
    return _dump({"jsonrpc": "2.0", "result": encode_result(result), "id": request_id})


def failure(code: int, message: str, request_id: RequestId) -> bytes:
    """Serialize an error envelope."""
    return _dump(
        {"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": request_id}
    )


def error_reply(error: RpcError) -> RpcReply:
    """Build the reply for a request terminated by ``error``."""
    return RpcReply(
        body=failure(error.json_rpc_code, error.message, error.request_id),
        status_code=error.http_status,
    )
