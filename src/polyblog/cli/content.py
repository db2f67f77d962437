"""Content CLI commands: sanitize, render, stats."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from polyblog.content.post import post_to_markdown, render_post
from polyblog.content.render import sanitize_for_display
from polyblog.core.config import load_config
from polyblog.core.models import SUPPORTED_LOCALES, ContentRecord
from polyblog.utils.text import count_words, estimate_reading_time

console = Console()
content_app = typer.Typer(name="content", help="Sanitize and render stored post HTML.")


def _load_record(path: Path) -> ContentRecord:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return ContentRecord(**data)
    except (OSError, json.JSONDecodeError, TypeError, ValidationError) as exc:
        console.print(f"[red]Could not read record {path}:[/red] {exc}")
        raise typer.Exit(1)


@content_app.command("sanitize")
def sanitize(
    path: Path = typer.Argument(..., help="HTML file to sanitize"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write result here instead of stdout"),
) -> None:
    """Run one HTML file through the display pipeline."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[red]Could not read {path}:[/red] {exc}")
        raise typer.Exit(1)

    safe = sanitize_for_display(raw)
    if output:
        output.write_text(safe, encoding="utf-8")
        console.print(f"Wrote [cyan]{len(safe)}[/cyan] characters to [cyan]{output}[/cyan]")
    else:
        typer.echo(safe)


@content_app.command("render")
def render(
    path: Path = typer.Argument(..., help="JSON file holding one content record"),
    locale: Optional[str] = typer.Option(None, "-l", "--locale", help="uz, ru or en"),
    fmt: str = typer.Option("html", "-f", "--format", help="html or markdown"),
) -> None:
    """Render a post body for one locale."""
    cfg = load_config()
    record = _load_record(path)

    if fmt == "markdown":
        typer.echo(post_to_markdown(
            record, locale, cfg.site.base_url, cfg.site.author,
            default=cfg.content.default_locale,
        ))
    elif fmt == "html":
        post = render_post(
            record, locale,
            default=cfg.content.default_locale,
            words_per_minute=cfg.content.words_per_minute,
        )
        typer.echo(post.html)
    else:
        console.print(f"[red]Unknown format:[/red] {fmt}")
        raise typer.Exit(1)


@content_app.command("stats")
def stats(
    path: Path = typer.Argument(..., help="JSON file holding one content record"),
) -> None:
    """Show per-locale word counts and reading time."""
    cfg = load_config()
    record = _load_record(path)

    table = Table(title=f"Post: {record.slug or '(no slug)'}")
    table.add_column("Locale", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Reading time", justify="right")
    table.add_column("Status", style="white")

    for loc in SUPPORTED_LOCALES:
        raw = getattr(record, f"content_{loc.value}") or ""
        if not raw.strip():
            fallback = cfg.content.default_locale.value
            table.add_row(loc.value, "—", "—", f"[yellow]empty, falls back to {fallback}[/yellow]")
            continue
        safe = sanitize_for_display(raw)
        table.add_row(
            loc.value,
            str(count_words(safe)),
            f"{estimate_reading_time(safe, cfg.content.words_per_minute)} min",
            "[green]ok[/green]",
        )

    console.print(table)
