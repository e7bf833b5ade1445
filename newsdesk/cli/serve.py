"""Serve command implementation."""

from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console

from ..api import create_app
from ..config import Config
from ..db import create_storage
from ..utils import setup_logging

console = Console()


def serve_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: ~/.config/newsdesk/config.yaml)",
    ),
    host: Optional[str] = typer.Option(None, "--host", help="Override the bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Override the bind port"),
) -> None:
    """Run the newsdesk API server."""
    config = Config(config_path)
    try:
        settings = config.config
    except FileNotFoundError:
        console.print(f"[yellow]No config at {config.config_path}, using defaults.[/yellow]")
        settings = config.load_or_default()
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    setup_logging(settings.logging.level, settings.logging.json_format)

    storage = create_storage(config)
    app = create_app(storage, settings)

    bind_host = host or settings.server.host
    bind_port = port or settings.server.port
    console.print(f"[green]Serving newsdesk on http://{bind_host}:{bind_port}[/green]")
    uvicorn.run(app, host=bind_host, port=bind_port, log_config=None)
