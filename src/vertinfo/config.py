"""Server configuration."""

from dataclasses import dataclass
from pathlib import Path

from vertinfo.rpc.ratelimit import DEFAULT_WINDOW_MS

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8001


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for running the JSON-RPC server.

    Frozen dataclass; build it through the CLI's ``resolve_*`` helpers so
    that flags win over environment variables.
    """

    store_path: Path  # JSON snapshot loaded into the in-memory store
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "info"
    rate_window_ms: float = DEFAULT_WINDOW_MS

    @property
    def base_url(self) -> str:
        """Return the URL of the JSON-RPC endpoint."""
        return f"http://{self.host}:{self.port}/"
