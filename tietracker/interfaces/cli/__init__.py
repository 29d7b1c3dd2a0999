"""CLI interface for tietracker using Typer.

Usage:
    tietracker project create -c CLIENT -n NAME -r RATE [--vat]
    tietracker project update PROJECT_ID [--name] [--rate] [--vat/--no-vat]
    tietracker track add PROJECT_ID --minutes 90
    tietracker summary
    tietracker tui

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (project, track, settings, summary)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer

from tietracker import __version__
from tietracker.interfaces.cli.commands import project, settings, summary, track
from tietracker.interfaces.cli.common import client_option

# Create the main Typer application
app = typer.Typer(
    name="tietracker",
    help="Track time on client projects and see what to bill",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"tietracker version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """tietracker - time tracking and billing for client projects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(project.app, name="project")
app.add_typer(track.app, name="track")
app.add_typer(settings.app, name="settings")
app.command("summary")(summary.show)


@app.command("tui")
def tui(client: Optional[str] = client_option) -> None:
    """Open the terminal user interface."""
    from tietracker.tui.app import TieTrackerApp

    TieTrackerApp(client_id=client).run()


__all__ = ["app"]
