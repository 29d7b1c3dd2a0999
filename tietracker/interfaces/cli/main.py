"""Entry point for the tietracker CLI.

Usage:
    python -m tietracker.interfaces.cli.main

Or via installed entry point:
    tietracker <command>
"""

from tietracker.interfaces.cli import app


def main() -> None:
    """Run the tietracker CLI application."""
    app()


if __name__ == "__main__":
    main()
