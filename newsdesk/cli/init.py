"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_CONFIG_PATH, ConfigModel, save_config

console = Console()


def init_command(
    config_path: Path = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Configuration file to write",
    ),
    host: str = typer.Option("127.0.0.1", "--host", help="Address the API binds to"),
    port: int = typer.Option(5000, "--port", help="Port the API binds to"),
    seed_articles: bool = typer.Option(
        True,
        "--seed-articles/--no-seed-articles",
        help="Load sample articles at startup",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a default newsdesk configuration file."""
    console.print(Panel.fit("📰 Newsdesk - Initialization", style="bold blue"))

    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path} (use --force)[/red]")
        raise typer.Exit(1)

    config = ConfigModel(
        server={"host": host, "port": port},
        seed={"sample_articles": seed_articles},
    )
    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    console.print(
        Panel(
            f"[green]✅ Newsdesk initialized![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Set the admin password: [bold]export {config.seed.admin_password_env}=your_password[/bold]\n"
            f"2. Run: [bold]newsdesk serve[/bold]",
            style="green",
        )
    )
