"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ..config import ConfigModel, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        Path.home() / ".config" / "blogstore",
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    content_root: Path = typer.Option(
        Path("content"),
        "--content-root",
        "-r",
        help="Directory holding the Markdown articles",
    ),
    separator: str = typer.Option(
        "%%%",
        "--separator",
        help="Line token separating records in one file",
    ),
    timezone: str = typer.Option(
        "UTC",
        "--timezone",
        help="Timezone applied to dates without an offset",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default blogstore configuration."""
    console.print(Panel.fit("blogstore - Initialization", style="bold blue"))

    config_path = config_dir / "config.yaml"
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    try:
        config = ConfigModel(
            content_root=str(content_root),
            record_separator=separator,
            default_timezone=timezone,
        )
    except ValueError as e:
        console.print(f"[red]Invalid settings: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    content_root.expanduser().mkdir(parents=True, exist_ok=True)
    console.print(f"✅ Content root: {content_root}")

    console.print(
        Panel(
            f"[green]✅ blogstore initialized![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Content: {content_root}\n\n"
            f"Next steps:\n"
            f"1. Write an article: [bold]blogstore new \"My first post\"[/bold]\n"
            f"2. Check the corpus: [bold]blogstore validate[/bold]",
            style="green",
        )
    )
