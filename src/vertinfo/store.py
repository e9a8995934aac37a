"""Read-only key-value store collaborator.

The pipeline only needs ``get(key)``. ``MemoryStore`` is the in-process
implementation; ``load_store`` fills one from a JSON snapshot file of
``[{"key": [...], "value": ...}, ...]`` entries.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

__all__ = ["KeyValueStore", "MemoryStore", "StoreKey", "StoreLoadError", "load_store"]

logger = logging.getLogger(__name__)

StoreKey = tuple[str | int | float, ...]
"""Composite store key, e.g. ``("econConf", 1)`` or ``("chains",)``."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Asynchronous read contract required by the method handlers."""

    async def get(self, key: StoreKey) -> Any | None:
        """Return the value stored under ``key``, or None when absent."""
        ...


class StoreLoadError(ValueError):
    """Raised when a snapshot file cannot be turned into a store."""


class MemoryStore:
    """Dict-backed store. Read-only once constructed."""

    def __init__(self, entries: Mapping[StoreKey, Any] | None = None) -> None:
        self._entries: dict[StoreKey, Any] = dict(entries or {})

    async def get(self, key: StoreKey) -> Any | None:
        return self._entries.get(tuple(key))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def load_store(path: Path) -> MemoryStore:
    """Build a ``MemoryStore`` from a JSON snapshot file.

    Args:
        path: File holding a list of ``{"key": [...], "value": ...}`` objects

    Returns:
        Store containing every entry of the snapshot.

    Raises:
        StoreLoadError: If the file is missing, not JSON, or badly shaped.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    except OSError as exc:
        raise StoreLoadError(f"cannot read store snapshot {path}: {exc}") from exc
    except ValueError as exc:
        raise StoreLoadError(f"store snapshot {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise StoreLoadError(f"store snapshot {path} must be a JSON list")

    entries: dict[StoreKey, Any] = {}
    for index, item in enumerate(raw):
        if not isinstance(item, dict) or "key" not in item or "value" not in item:
            raise StoreLoadError(f"entry {index} needs 'key' and 'value'")
        key = item["key"]
        if not isinstance(key, list) or not key:
            raise StoreLoadError(f"entry {index} key must be a non-empty list")
        entries[tuple(key)] = item["value"]

    logger.info("Loaded %d store entries from %s", len(entries), path)
    return MemoryStore(entries)
