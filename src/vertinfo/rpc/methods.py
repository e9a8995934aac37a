"""Query method handlers and the method registry.

Each handler performs exactly one store read. A missing key is a legitimate
``None`` result, never an error.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Literal

from vertinfo.models import EconConf
from vertinfo.rpc.envelope import RequestId
from vertinfo.rpc.errors import MethodNotFoundError
from vertinfo.rpc.params import ChainIdParams, HashParams, NoParams, Params
from vertinfo.store import KeyValueStore

__all__ = [
    "METHODS",
    "MethodName",
    "MethodSpec",
    "get_active_chains",
    "get_burn_status",
    "get_confirmations",
    "get_econ_conf",
    "resolve_method",
]

MethodName = Literal["get_econConf", "get_activeChains", "get_confirmations", "get_burnStatus"]

Handler = Callable[[KeyValueStore, Any], Awaitable[Any]]


@dataclass(frozen=True)
class MethodSpec:
    """A registered method: its parameter schema and handler."""

    name: MethodName
    params: type[Params]
    handler: Handler


def _as_econ_conf(value: Any) -> EconConf | None:
    if value is None or isinstance(value, EconConf):
        return value
    return EconConf.model_validate(value)


async def get_econ_conf(store: KeyValueStore, params: ChainIdParams) -> EconConf | None:
    """Economic configuration for ``params.chain_id``."""
    return _as_econ_conf(await store.get(("econConf", params.chain_id)))


async def get_active_chains(store: KeyValueStore, params: NoParams) -> list[int] | None:
    """Ids of all active chains."""
    return await store.get(("chains",))


async def get_confirmations(store: KeyValueStore, params: ChainIdParams) -> EconConf | None:
    """Confirmation settings for ``params.chain_id``, stored in EconConf shape."""
    return _as_econ_conf(await store.get(("confirmations", params.chain_id)))


async def get_burn_status(store: KeyValueStore, params: HashParams) -> Any | None:
    """Status of the burn transaction ``params.hash``."""
    return await store.get(("status", params.hash))


METHODS: dict[str, MethodSpec] = {
    "get_econConf": MethodSpec("get_econConf", ChainIdParams, get_econ_conf),
    "get_activeChains": MethodSpec("get_activeChains", NoParams, get_active_chains),
    "get_confirmations": MethodSpec("get_confirmations", ChainIdParams, get_confirmations),
    "get_burnStatus": MethodSpec("get_burnStatus", HashParams, get_burn_status),
}


def resolve_method(name: str, request_id: RequestId = None) -> MethodSpec:
    """Look up a registered method.

    Raises:
        MethodNotFoundError: If ``name`` is not registered.
    """
    spec = METHODS.get(name)
    if spec is None:
        raise MethodNotFoundError(f"Unknown method: {name}", request_id=request_id)
    return spec
