"""Main CLI application."""

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Load .env file if it exists
load_dotenv()

from ..config import Config
from .browse import list_command, show_command, taxonomy_command
from .init import init_command
from .new import new_command
from .validate import validate_command

app = typer.Typer(
    name="blogstore",
    help="Load, validate and browse a corpus of front-matter Markdown articles",
    no_args_is_help=True,
)


def setup_logging(level: str) -> None:
    """Route library logging through rich on stderr."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config.yaml (default: ~/.config/blogstore/config.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load, validate and browse a corpus of front-matter Markdown articles."""
    config = Config(config_path)
    ctx.obj = config
    try:
        level = "DEBUG" if verbose else config.config.log_level
    except (FileNotFoundError, ValueError):
        # Surfaced by the command that needs the config.
        level = "DEBUG" if verbose else "WARNING"
    setup_logging(level)


# Register commands
app.command("init")(init_command)
app.command("list")(list_command)
app.command("show")(show_command)
app.command("taxonomy")(taxonomy_command)
app.command("validate")(validate_command)
app.command("new")(new_command)


if __name__ == "__main__":
    app()
