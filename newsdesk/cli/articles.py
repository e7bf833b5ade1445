"""Article browsing commands backed by a running API."""

import os
from typing import Any, Dict, List, Optional

import httpx
import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ..config import Config

console = Console()
articles_app = typer.Typer(help="Browse articles on a running newsdesk server")


def api_url() -> str:
    """API base URL from NEWSDESK_API_URL or the config file."""
    url = os.environ.get("NEWSDESK_API_URL")
    if url:
        return url.rstrip("/")
    return Config().load_or_default().server.api_url


def open_client() -> httpx.Client:
    """HTTP client pointed at the API."""
    return httpx.Client(base_url=api_url(), timeout=10.0)


def request_json(method: str, path: str, **kwargs) -> Any:
    """Call the API and return the decoded body, exiting on any failure."""
    try:
        with open_client() as client:
            response = client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as e:
        try:
            message = e.response.json().get("message") or e.response.text
        except ValueError:
            message = e.response.text
        console.print(f"[red]❌ {e.response.status_code}: {message}[/red]")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]❌ Could not reach newsdesk API: {e}[/red]")
        raise typer.Exit(1)


def print_articles(articles: List[Dict[str, Any]], title: str) -> None:
    """Render articles as a table."""
    if not articles:
        console.print("[yellow]No articles found.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Status", style="yellow")
    table.add_column("Views", style="green", justify="right")
    table.add_column("Slug", style="blue")

    for article in articles:
        table.add_row(
            str(article["id"]),
            article["title"],
            article["category"],
            article["status"],
            str(article["viewCount"]),
            article["slug"],
        )

    console.print(table)


@articles_app.command("list")
def articles_list(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category filter"),
    status: str = typer.Option("published", "--status", "-s", help="draft or published"),
    limit: int = typer.Option(20, "--limit", "-n", help="Page size", min=1),
    offset: int = typer.Option(0, "--offset", help="Articles to skip", min=0),
) -> None:
    """List articles, newest first."""
    params = {"status": status, "limit": limit, "offset": offset}
    if category:
        params["category"] = category
    print_articles(request_json("GET", "/api/articles", params=params), "Articles")


@articles_app.command("featured")
def articles_featured(
    limit: int = typer.Option(3, "--limit", "-n", help="How many to show", min=1),
) -> None:
    """Show the most viewed published articles."""
    articles = request_json("GET", "/api/articles/featured", params={"limit": limit})
    print_articles(articles, "Featured")


@articles_app.command("search")
def articles_search(
    query: str = typer.Argument(..., help="Text to look for"),
) -> None:
    """Search published articles."""
    articles = request_json("GET", "/api/articles/search", params={"q": query})
    print_articles(articles, f"Results for '{query}'")


@articles_app.command("show")
def articles_show(
    slug: str = typer.Argument(..., help="Article slug"),
) -> None:
    """Print one published article (counts as a view)."""
    article = request_json("GET", f"/api/articles/{slug}")
    header = (
        f"[bold]{article['title']}[/bold]\n"
        f"{article['author']} · {article['category']} · "
        f"{article['readTime']} min read · {article['viewCount']} views"
    )
    console.print(Panel(header, style="blue"))
    console.print(Markdown(article["content"]))
    if article["tags"]:
        console.print(f"[dim]Tags: {', '.join(article['tags'])}[/dim]")


def subscribe_command(
    email: str = typer.Argument(..., help="Address to subscribe"),
) -> None:
    """Subscribe an address to the newsletter."""
    subscription = request_json("POST", "/api/newsletter/subscribe", json={"email": email})
    console.print(f"[green]✅ Subscribed: {subscription['email']}[/green]")
