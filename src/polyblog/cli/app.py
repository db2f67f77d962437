"""Root CLI application with config and serve commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from polyblog.cli.content import content_app
from polyblog.core.config import load_config

console = Console()
app = typer.Typer(
    name="polyblog",
    help="polyblog — safe rendering of multilingual post HTML.",
    no_args_is_help=True,
)

# Register sub-command groups
app.add_typer(content_app)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def config() -> None:
    """Show the effective configuration."""
    cfg = load_config()

    table = Table(title="Configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("site.name", cfg.site.name)
    table.add_row("site.base_url", cfg.site.base_url)
    table.add_row("site.author", cfg.site.author or "[dim]unset[/dim]")
    table.add_row("content.default_locale", cfg.content.default_locale.value)
    table.add_row("content.words_per_minute", str(cfg.content.words_per_minute))

    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the rendering and preview server."""
    import uvicorn

    cfg = load_config()
    console.print(f"\n[bold]{cfg.site.name}[/bold]")
    console.print(f"Starting at [cyan]http://{host}:{port}[/cyan]\n")
    uvicorn.run(
        "polyblog.web.app:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )
