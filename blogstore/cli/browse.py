"""Commands for browsing the corpus."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ..errors import NotFoundError
from .common import load_store

console = Console()


def list_command(
    ctx: typer.Context,
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Only items with this tag"),
    category: Optional[str] = typer.Option(None, "--category", help="Only items in this category"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Maximum items to show"),
    content_root: Optional[Path] = typer.Option(None, "--content-root", help="Override content root"),
) -> None:
    """List articles, newest first."""
    store = load_store(ctx, content_root)

    items = [
        item for item in store.list_all()
        if (tag is None or tag in item.tags) and (category is None or category in item.categories)
    ]
    if limit is not None:
        items = items[:limit]

    if not items:
        console.print("[yellow]No articles found.[/yellow]")
        return

    table = Table(title=f"Articles ({len(items)} of {len(store)})")
    table.add_column("Date", style="green")
    table.add_column("Slug", style="cyan")
    table.add_column("Title")
    table.add_column("Categories", style="magenta")
    table.add_column("Tags", style="yellow")

    for item in items:
        table.add_row(
            item.date.strftime("%Y-%m-%d"),
            escape(item.slug),
            escape(item.title),
            escape(", ".join(item.categories)),
            escape(", ".join(item.tags)),
        )

    console.print(table)

    if store.parse_errors:
        console.print(
            f"[red]{len(store.parse_errors)} record(s) could not be parsed. "
            f"Run 'blogstore validate' for details.[/red]"
        )


def show_command(
    ctx: typer.Context,
    slug: str = typer.Argument(..., help="Slug of the article"),
    body: bool = typer.Option(False, "--body", "-b", help="Also print the Markdown body"),
    content_root: Optional[Path] = typer.Option(None, "--content-root", help="Override content root"),
) -> None:
    """Show one article's metadata."""
    store = load_store(ctx, content_root)

    try:
        item = store.get_by_slug(slug)
    except NotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    languages = sorted({block.language for block in item.code_blocks if block.language})
    details = [
        f"[bold]{escape(item.title)}[/bold]",
        escape(item.description) or "[dim]no description[/dim]",
        "",
        f"Slug: {escape(item.slug)}",
        f"Date: {item.date.isoformat()}",
        f"Categories: {escape(', '.join(item.categories)) or '-'}",
        f"Tags: {escape(', '.join(item.tags)) or '-'}",
        f"Image: {escape(item.image or '-')}",
        f"Code blocks: {len(item.code_blocks)} ({escape(', '.join(languages)) or 'no language hints'})",
        f"Source: {escape(item.location or '-')}",
    ]
    if item.weight is not None:
        details.append(f"Weight: {item.weight}")

    console.print(Panel("\n".join(details), title=escape(item.slug), style="blue"))

    if body:
        console.print(Markdown(item.body))


def taxonomy_command(
    ctx: typer.Context,
    kind: str = typer.Argument("tags", help="Taxonomy to count: tags or categories"),
    content_root: Optional[Path] = typer.Option(None, "--content-root", help="Override content root"),
) -> None:
    """Count articles per tag or category."""
    if kind not in ("tags", "categories"):
        console.print(f"[red]Unknown taxonomy '{escape(kind)}' (expected tags or categories).[/red]")
        raise typer.Exit(1)

    store = load_store(ctx, content_root)
    counts = store.taxonomy(kind)

    if not counts:
        console.print(f"[yellow]No {kind} found.[/yellow]")
        return

    table = Table(title=kind.capitalize())
    table.add_column("Label", style="cyan")
    table.add_column("Articles", style="green", justify="right")
    for label, count in counts:
        table.add_row(escape(label), str(count))

    console.print(table)
