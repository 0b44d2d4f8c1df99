"""Run command implementation."""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import Config
from ..errors import ConfigError, FeedError
from ..generation import get_llm_provider, summarize_articles
from ..models import ArticleView
from ..pipeline import TopStoriesAPI

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _to_record(article: ArticleView) -> dict:
    created_at = article.created_at
    return {
        "url": article.url,
        "title": article.title,
        "section": article.section,
        "created_at": created_at.isoformat() if created_at else None,
        "text": article.text,
        "summary": article.summary,
        "tags": list(article.tags),
    }


def _print_articles(articles: List[ArticleView], show_summary: bool) -> None:
    table = Table(title="Top Stories")
    table.add_column("Title", style="cyan")
    table.add_column("Section", style="magenta")
    table.add_column("Published (UTC)", style="yellow")
    table.add_column("Tags", style="green")
    if show_summary:
        table.add_column("Summary", style="dim")

    for article in articles:
        created_at = article.created_at
        row = [
            article.title,
            article.section,
            created_at.format("YYYY-MM-DD HH:mm") if created_at else "-",
            ", ".join(article.tags),
        ]
        if show_summary:
            row.append(article.summary)
        table.add_row(*row)

    console.print(table)


def run_command(
    sections: Optional[List[str]] = typer.Option(
        None,
        "--section",
        "-s",
        help="Allowed section (repeatable). Default: from config",
    ),
    tags: Optional[int] = typer.Option(
        None,
        "--tags",
        "-t",
        min=1,
        help="Tags per article. Default: from config",
    ),
    summarize: bool = typer.Option(False, "--summarize", help="Summarize each article with the LLM"),
    as_json: bool = typer.Option(False, "--json", help="Print articles as JSON"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Fetch top stories, extract their text and derive tags."""
    _configure_logging(verbose)

    try:
        config = Config(config_path)
        api = TopStoriesAPI(config=config, allowed_sections=sections or None, tag_count=tags)
        articles = api.generate_articles_sync()
    except (ConfigError, FeedError) as e:
        console.print(f"[red]Pipeline failed: {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Pipeline interrupted by user[/yellow]")
        raise typer.Exit(1)

    if summarize and articles:
        provider = get_llm_provider(config.get_llm_config())
        summarize_articles(articles, provider)

    if as_json:
        typer.echo(json.dumps([_to_record(a) for a in articles], ensure_ascii=False, indent=2))
        return

    if not articles:
        console.print("[yellow]No articles with extractable text.[/yellow]")
        return

    _print_articles(articles, show_summary=summarize)


def sections_command(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config.yaml"),
) -> None:
    """List the sections kept by the pipeline."""
    try:
        config = Config(config_path)
        allowed = config.config.pipeline.allowed_sections
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not allowed:
        console.print("[yellow]No sections configured.[/yellow]")
        return

    for section in allowed:
        console.print(f"• {section}")
