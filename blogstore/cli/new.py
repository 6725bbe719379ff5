"""New command implementation."""

import re
import unicodedata
from pathlib import Path
from typing import List, Optional

import pendulum
import typer
from rich.console import Console
from rich.markup import escape

from ..models import ContentItem
from ..parsing import dump_file
from .common import get_settings, load_store

console = Console()


def slugify(title: str) -> str:
    """Turn a title into a URL-safe slug."""
    text = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return text.strip("-")


def new_command(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Article title"),
    slug: Optional[str] = typer.Option(None, "--slug", "-s", help="Slug (default: derived from title)"),
    description: str = typer.Option("", "--description", "-d", help="Short description"),
    categories: Optional[List[str]] = typer.Option(None, "--category", help="Category (repeatable)"),
    tags: Optional[List[str]] = typer.Option(None, "--tag", "-t", help="Tag (repeatable)"),
    content_root: Optional[Path] = typer.Option(None, "--content-root", help="Override content root"),
) -> None:
    """Create a new article file with a front-matter skeleton."""
    settings = get_settings(ctx)
    root = content_root or Path(settings.content_root).expanduser()
    slug = slug or slugify(title)

    if not slug:
        console.print("[red]Cannot derive a slug from the title; pass --slug.[/red]")
        raise typer.Exit(1)

    if not re.match(settings.slug_pattern, slug):
        console.print(f"[red]Slug '{escape(slug)}' is not URL-safe (expected {escape(settings.slug_pattern)}).[/red]")
        raise typer.Exit(1)

    path = root / f"{slug}.md"
    if path.resolve().parent != root.resolve():
        console.print(f"[red]Slug '{escape(slug)}' would write outside {escape(str(root))}.[/red]")
        raise typer.Exit(1)

    if root.exists() and slug in load_store(ctx, root):
        console.print(f"[red]An article with slug '{escape(slug)}' already exists.[/red]")
        raise typer.Exit(1)

    if path.exists():
        console.print(f"[red]File already exists: {escape(str(path))}[/red]")
        raise typer.Exit(1)

    item = ContentItem(
        title=title,
        description=description,
        slug=slug,
        date=pendulum.now(settings.default_timezone),
        categories=categories or [],
        tags=tags or [],
        body=f"\n# {title}\n\n",
    )
    dump_file([item], path, settings.record_separator)
    console.print(f"[green]✅ Created {path}[/green]")
