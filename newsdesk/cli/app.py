"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import articles_app, subscribe_command
from .init import init_command
from .serve import serve_command

app = typer.Typer(
    name="newsdesk",
    help="Newsdesk - article publishing backend",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("serve")(serve_command)
app.command("subscribe")(subscribe_command)
app.add_typer(articles_app, name="articles", help="Browse articles")


if __name__ == "__main__":
    app()
