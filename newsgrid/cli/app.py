"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .init import init_command
from .run import run_command, sections_command

app = typer.Typer(
    name="newsgrid",
    help="newsgrid - top stories fetcher, text extractor and tagger",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("run")(run_command)
app.command("sections")(sections_command)


if __name__ == "__main__":
    app()
