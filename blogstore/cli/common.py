"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Config, ConfigModel
from ..store import ContentStore

console = Console()


def get_settings(ctx: typer.Context) -> ConfigModel:
    """Get the loaded config, exiting with a message when it is unusable."""
    config: Config = ctx.obj if isinstance(ctx.obj, Config) else Config()
    try:
        return config.config
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


def load_store(ctx: typer.Context, content_root: Optional[Path] = None) -> ContentStore:
    """Load the content store from the configured (or given) content root."""
    settings = get_settings(ctx)
    root = content_root or Path(settings.content_root).expanduser()

    try:
        return ContentStore.from_path(root, settings)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        console.print("Set content_root in config.yaml or pass --content-root.")
        raise typer.Exit(1)
