"""Init command implementation."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import ConfigModel, default_config_path, save_config

console = Console()


def init_command(
    config_dir: Path = typer.Option(
        default_config_path().parent,
        "--config-dir",
        "-c",
        help="Configuration directory",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a default newsgrid configuration."""
    config_path = config_dir / "config.yaml"

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists: {config_path} (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    config = ConfigModel()
    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    console.print(
        Panel(
            f"[green]✅ newsgrid initialized![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Set the feed API key: [bold]export {config.feed.api_key_env}=your_key[/bold]\n"
            f"2. Optionally set an LLM key: [bold]export {config.llm.api_key_env}=your_key[/bold]\n"
            f"3. Run: [bold]newsgrid run[/bold]",
            style="green",
        )
    )
