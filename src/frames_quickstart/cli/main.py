"""frames-v2-quickstart CLI entry point."""

import typer

from frames_quickstart.cli.create_cmd import create

app = typer.Typer(
    name="frames-v2-quickstart",
    help="Create a new Farcaster Frames v2 app",
    add_completion=False,
)

# Single command: invoking the program runs it directly.
app.command()(create)
