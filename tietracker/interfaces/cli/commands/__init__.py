"""CLI command groups for tietracker.

Each module exposes a Typer app (or a plain command function) that the
main CLI registers:
- project: Create, update, show and list projects
- track: Record tracked time
- settings: VAT, currency and locale
- summary: Weekly summary
"""

from tietracker.interfaces.cli.commands import project, settings, summary, track

__all__ = ["project", "settings", "summary", "track"]
