"""Typer-based CLI for vertinfo.

``vertinfo serve`` loads a store snapshot and runs the JSON-RPC server.
Logging goes to a rotating file; uvicorn keeps its own console output.
"""

import asyncio
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import typer

from vertinfo import __version__
from vertinfo.config import DEFAULT_HOST, DEFAULT_PORT, ServerConfig
from vertinfo.http.app import create_app
from vertinfo.http.runner import run_http
from vertinfo.http.types import Host, Port
from vertinfo.rpc.pipeline import RequestPipeline
from vertinfo.rpc.ratelimit import RateLimiter
from vertinfo.store import StoreLoadError, load_store

app = typer.Typer(
    name="vertinfo",
    help="Read-only JSON-RPC server for chain economics and burn status",
    add_completion=False,
)


def resolve_store_path(store_flag: Path | None) -> Path | None:
    """Resolve the store snapshot path.

    Priority: CLI flag > VERTINFO_STORE_PATH env var. No default.
    """
    if store_flag:
        return store_flag
    env_path = os.getenv("VERTINFO_STORE_PATH")
    return Path(env_path) if env_path else None


def resolve_host(host_flag: str | None) -> str:
    """Priority: CLI flag > VERTINFO_HOST env var > 127.0.0.1."""
    if host_flag:
        return host_flag
    return os.getenv("VERTINFO_HOST", DEFAULT_HOST)


def resolve_port(port_flag: int | None) -> int:
    """Priority: CLI flag > VERTINFO_PORT env var > 8001.

    Raises:
        typer.BadParameter: If VERTINFO_PORT is not an integer.
    """
    if port_flag:
        return port_flag
    env_port = os.getenv("VERTINFO_PORT")
    if not env_port:
        return DEFAULT_PORT
    try:
        return int(env_port)
    except ValueError:
        raise typer.BadParameter(f"VERTINFO_PORT must be an integer, got {env_port!r}") from None


def setup_logging(log_dir: Path, log_level: str) -> None:
    """Configure file logging with RotatingFileHandler.

    Args:
        log_dir: Directory for log files (created if missing)
        log_level: Logging level (info, debug, warning, error, critical)
    """
    log_dir = log_dir.expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Clear existing handlers to prevent duplicates
    root_logger.handlers.clear()

    # 10MB max, 3 backups
    file_handler = RotatingFileHandler(
        log_dir / "vertinfo.log",
        maxBytes=10 * 1024 * 1024,
        backupCount=3,
    )
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        ),
    )
    root_logger.addHandler(file_handler)


async def run_server(config: ServerConfig) -> None:
    """Load the store and serve the JSON-RPC app described by ``config``."""
    logger = logging.getLogger(__name__)
    store = load_store(config.store_path)
    pipeline = RequestPipeline(store, RateLimiter(window_ms=config.rate_window_ms))
    logger.info(
        "Rate window %sms, %d store entries", config.rate_window_ms, len(store)
    )
    await run_http(
        create_app(pipeline),
        host=Host(config.host),
        port=Port(config.port),
        log_level=config.log_level,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Print version and exit",
    ),
) -> None:
    """vertinfo JSON-RPC server."""
    if version:
        typer.echo(f"vertinfo {__version__}", err=True)
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command()
def serve(
    store: Path | None = typer.Option(
        None,
        "--store",
        help="Store snapshot JSON file (overrides VERTINFO_STORE_PATH env var)",
    ),
    host: str | None = typer.Option(
        None,
        "--host",
        help="HTTP server bind address (overrides VERTINFO_HOST env var)",
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        help="HTTP server port (overrides VERTINFO_PORT env var)",
    ),
    log_dir: Path = typer.Option(
        Path("~/.vertinfo/logs"),
        "--log-dir",
        help="Directory for log files",
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (debug, info, warning, error, critical)",
    ),
) -> None:
    """Serve the JSON-RPC query methods over HTTP."""
    store_path = resolve_store_path(store)
    if store_path is None:
        typer.secho(
            "Missing store path: pass --store or set VERTINFO_STORE_PATH",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    config = ServerConfig(
        store_path=store_path,
        host=resolve_host(host),
        port=resolve_port(port),
        log_level=log_level,
    )

    setup_logging(log_dir, log_level)

    typer.echo("Starting vertinfo JSON-RPC server")
    typer.echo(f"  Store: {config.store_path}")
    typer.echo(f"  HTTP: {config.base_url}")
    typer.echo(f"  Logs: {log_dir.expanduser() / 'vertinfo.log'}")

    try:
        asyncio.run(run_server(config))
    except StoreLoadError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
