"""Per-client request throttle.

The limiter only answers whether a client may be admitted. Recording the
admission is a separate step so that rejected requests never push a
client's window forward. Callers that check and record must hold ``lock``
across both calls.
"""

import threading
import time
from collections.abc import Callable

__all__ = ["DEFAULT_WINDOW_MS", "RateLimiter", "monotonic_ms"]

DEFAULT_WINDOW_MS = 200


def monotonic_ms() -> float:
    """Return a monotonic timestamp in milliseconds."""
    return time.monotonic() * 1000.0


class RateLimiter:
    """Tracks the last admitted request time per client identity.

    Args:
        window_ms: Minimum time between two admitted requests from one client.
        clock: Callable returning the current time in milliseconds.
    """

    def __init__(
        self,
        window_ms: float = DEFAULT_WINDOW_MS,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self.window_ms = window_ms
        self._clock = clock
        self._last_admitted: dict[str, float] = {}
        self.lock = threading.Lock()

    def admit(self, identity: str) -> bool:
        """Return True when ``identity`` is outside its rate window."""
        last = self._last_admitted.get(identity)
        if last is None:
            return True
        return self._clock() - last >= self.window_ms

    def record(self, identity: str) -> None:
        """Store the current time as the last admission for ``identity``."""
        self._last_admitted[identity] = self._clock()

    def __len__(self) -> int:
        return len(self._last_admitted)
