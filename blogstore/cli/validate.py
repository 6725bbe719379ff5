"""Validate command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .common import load_store

console = Console()


def validate_command(
    ctx: typer.Context,
    content_root: Optional[Path] = typer.Option(None, "--content-root", help="Override content root"),
) -> None:
    """Check every article and report all problems at once."""
    store = load_store(ctx, content_root)
    errors = store.validate_all()

    for parse_error in store.parse_errors:
        console.print(f"[red]❌ parse error[/red] {escape(str(parse_error.location))}: {escape(parse_error.message)}")

    for error in errors:
        console.print(f"[red]❌ {error.code}[/red] {escape(', '.join(error.locations))}: {escape(error.message)}")

    problems = len(store.parse_errors) + len(errors)
    if problems:
        console.print(f"\n[bold red]{problems} problem(s) in {len(store)} article(s).[/bold red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ {len(store)} article(s) valid.[/green]")
