"""CLI interface for the history viewer."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import structlog
import typer
import uvicorn

from dfhv import __version__
from dfhv.config import ViewerConfig
from dfhv.server import create_app

# Configure structlog for CLI output
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
)

logger = structlog.get_logger()

app = typer.Typer(
    name="dfhv",
    help="Read-only viewer for durable orchestration history",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dfhv version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """dfhv - Durable Functions History Viewer."""
    pass


@app.command()
def serve(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Host to bind (default: DFHV_HOST or 127.0.0.1)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Port to bind (default: DFHV_PORT or 7072)"),
    ] = None,
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            "-d",
            help="Directory containing <Table>.jsonl files",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    task_hub: Annotated[
        str | None,
        typer.Option("--task-hub", help="Task hub name (table prefix)"),
    ] = None,
    notification_url: Annotated[
        str | None,
        typer.Option("--notification-url", help="Base URL used to build detail links"),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Start the viewer web server."""
    # CLI args override env vars
    overrides = {
        "host": host,
        "port": port,
        "data_dir": data_dir,
        "task_hub_name": task_hub,
        "notification_url": notification_url,
    }
    config = ViewerConfig(**{k: v for k, v in overrides.items() if v is not None})
    if debug:
        config.debug = True

    logger.info(
        "Starting viewer",
        data_dir=str(config.data_dir),
        task_hub=config.task_hub_name,
        url=f"http://{config.host}:{config.port}",
    )

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level="debug" if config.debug else "info",
    )
