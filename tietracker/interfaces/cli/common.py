"""Shared utilities for tietracker CLI commands.

- Formatted output helpers (error, success, info, warning)
- Project and summary display
- Running async application code from synchronous commands
"""

import asyncio
from collections.abc import Coroutine
from datetime import datetime
from typing import Any, Optional, TypeVar

import typer

from tietracker.application.project_form import Draft
from tietracker.domain.project import NAME_MIN_LENGTH, Project
from tietracker.domain.settings import Settings
from tietracker.domain.summary import Summary
from tietracker.formatting import format_currency, format_time

T = TypeVar("T")

# Reusable client option for CLI commands
# Usage: def my_command(client: Optional[str] = client_option) -> None:
client_option: Optional[str] = typer.Option(
    None,
    "--client",
    "-c",
    help="Client ID (or set TIETRACKER_CLIENT env var)",
    envvar="TIETRACKER_CLIENT",
)


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run an application coroutine to completion."""
    return asyncio.run(coro)


def print_error(msg: str) -> None:
    """Print a formatted error message to stderr."""
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_warning(msg: str) -> None:
    """Print a formatted warning message to stderr."""
    typer.echo(typer.style(f"Warning: {msg}", fg=typer.colors.YELLOW), err=True)


def print_separator(char: str = "=", width: int = 40) -> None:
    typer.echo(char * width)


def print_header(title: str, width: int = 40) -> None:
    """Print a title framed by separator lines."""
    print_separator("=", width)
    typer.echo(title)
    print_separator("=", width)


def describe_invalid(draft: Draft) -> str:
    """Explain why a draft does not pass validation."""
    problems = []
    if draft.name is None or len(draft.name) < NAME_MIN_LENGTH:
        problems.append(f"name must have at least {NAME_MIN_LENGTH} characters")
    if draft.hourly_rate is None or draft.hourly_rate < 0:
        problems.append("hourly rate must be a number of 0 or more")
    return "; ".join(problems) or "invalid project"


def print_project(project: Project, settings: Settings) -> None:
    """Print the details of a project."""
    typer.echo(f"ID:      {project.id}")
    typer.echo(f"Client:  {project.client_id or '-'}")

    if project.data is None:
        typer.echo("(no data)")
        return

    created = datetime.fromtimestamp(project.data.from_ / 1000)
    typer.echo(f"Name:    {project.data.name}")
    typer.echo(f"Rate:    {format_currency(project.data.rate.hourly, settings)}/h")
    if settings.vat_enabled:
        vat = f"yes ({settings.vat:g}%)" if project.data.rate.vat_enabled else "no"
        typer.echo(f"VAT:     {vat}")
    typer.echo(f"Created: {created:%Y-%m-%d %H:%M}")


def print_summary(summary: Summary | None, settings: Settings) -> None:
    """Print the weekly summary, with placeholders when unavailable."""
    print_header("Weekly Summary")
    milliseconds = summary.milliseconds if summary is not None else None
    billable = summary.billable if summary is not None else None
    typer.echo(f"Tracked:  {format_time(milliseconds)}")
    typer.echo(f"Billable: {format_currency(billable, settings)}")


__all__ = [
    "client_option",
    "describe_invalid",
    "print_error",
    "print_header",
    "print_info",
    "print_project",
    "print_separator",
    "print_success",
    "print_summary",
    "print_warning",
    "run",
]
