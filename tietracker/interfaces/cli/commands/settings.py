"""Settings CLI commands."""

from typing import Optional

import typer
from pydantic import ValidationError

from tietracker.global_config import get_settings, save_settings
from tietracker.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Settings commands")


@app.command("show")
def show() -> None:
    """Show the current settings."""
    settings = get_settings()
    typer.echo(f"VAT:      {f'{settings.vat:g}%' if settings.vat_enabled else 'disabled'}")
    typer.echo(f"Currency: {settings.currency}")
    typer.echo(f"Locale:   {settings.locale}")


@app.command("set")
def set_settings(
    vat: Optional[float] = typer.Option(None, "--vat", help="VAT percentage, 0 disables VAT"),
    currency: Optional[str] = typer.Option(None, "--currency", help="ISO currency code, e.g. CHF"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Locale for amounts, e.g. de-CH"),
) -> None:
    """Change one or more settings."""
    current = get_settings()

    changes = {}
    if vat is not None:
        changes["vat"] = vat or None
    if currency is not None:
        changes["currency"] = currency.upper()
    if locale is not None:
        changes["locale"] = locale

    try:
        settings = current.model_validate({**current.model_dump(), **changes})
    except ValidationError as e:
        print_error(f"Invalid settings: {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    save_settings(settings)
    print_success("Settings saved")
