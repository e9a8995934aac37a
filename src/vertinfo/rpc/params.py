"""Per-method parameter schemas.

Every method declares a pydantic model for its ``params`` object. Unknown
keys are ignored so clients may send extra fields.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vertinfo.rpc.envelope import RequestId
from vertinfo.rpc.errors import InvalidParamsError

__all__ = [
    "ChainIdParams",
    "HashParams",
    "NoParams",
    "Params",
    "validate_params",
]


class Params(BaseModel):
    """Base for method parameter models."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class NoParams(Params):
    """Parameters for methods that take none. Any content is ignored."""


class ChainIdParams(Params):
    """``{chainId: number}``."""

    chain_id: int | float = Field(alias="chainId")


class HashParams(Params):
    """``{hash: string}``."""

    hash: str


def validate_params(
    schema: type[Params], params: dict[str, Any], request_id: RequestId
) -> Params:
    """Validate ``params`` against ``schema``.

    Raises:
        InvalidParamsError: Carrying ``request_id`` when validation fails.
    """
    try:
        return schema.model_validate(params)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise InvalidParamsError(f"invalid params: {fields or 'params'}", request_id=request_id) from exc
