"""JSON-RPC 2.0 request envelope parsing.

Any failure to decode or match the envelope is reported as a single
``ParseError`` without a request id: bad JSON and a bad envelope shape are
deliberately indistinguishable at this stage.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

from vertinfo.rpc.errors import ParseError

__all__ = ["JsonRpcRequest", "RequestId", "parse_request"]

RequestId = str | int | float | None


class JsonRpcRequest(BaseModel):
    """A structurally valid JSON-RPC 2.0 request.

    ``params`` is kept as the raw object; per-method validation happens after
    the method has been resolved.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    jsonrpc: Literal["2.0"]
    id: str | int | float | None
    method: str
    params: dict[str, Any]


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def parse_request(raw: bytes) -> JsonRpcRequest:
    """Parse raw body bytes into a ``JsonRpcRequest``.

    Raises:
        ParseError: If the body is not UTF-8 JSON or is not a JSON-RPC request.
    """
    if not raw:
        raise ParseError("empty request body")
    try:
        decoded = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as exc:
        raise ParseError(str(exc)) from exc
    try:
        return JsonRpcRequest.model_validate(decoded)
    except ValidationError as exc:
        raise ParseError(f"invalid envelope: {exc.error_count()} error(s)") from exc
