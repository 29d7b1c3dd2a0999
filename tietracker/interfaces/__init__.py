"""Interface layer for tietracker.

- cli: Typer command-line interface
"""

from tietracker.interfaces.cli import app as cli_app

__all__ = ["cli_app"]
