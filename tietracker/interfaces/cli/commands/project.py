"""Project management CLI commands.

Creating and updating go through the same form controller as the TUI, so
the command line obeys the same validation and session rules.
"""

from typing import Optional

import typer

from tietracker.application.project_form import (
    ProjectFormController,
    SessionMode,
    parse_rate,
)
from tietracker.domain.project import Client
from tietracker.domain.shared import Err
from tietracker.global_config import get_settings, save_last_client_id
from tietracker.infrastructure.storage import JsonProjectsGateway, ProjectRepository
from tietracker.interfaces.cli.common import (
    client_option,
    describe_invalid,
    print_error,
    print_info,
    print_project,
    print_success,
    print_warning,
    run,
)

app = typer.Typer(help="Project management commands")


# =============================================================================
# Sessions
# =============================================================================


async def _create_session(
    controller: ProjectFormController,
    name: str,
    rate: str,
    vat: bool,
) -> bool:
    await controller.initialize(SessionMode.CREATE)

    controller.edit_name(name)
    controller.edit_rate(parse_rate(rate))
    if vat and not controller.toggle_vat(True):
        print_warning("VAT is disabled in settings, ignoring --vat")

    if not controller.valid:
        print_error(describe_invalid(controller.draft))
        controller.cancel()
        return False

    return await controller.submit()


async def _update_session(
    controller: ProjectFormController,
    project_id: str,
    name: Optional[str],
    rate: Optional[str],
    vat: Optional[bool],
) -> bool:
    await controller.initialize(SessionMode.UPDATE, project_id)

    if controller.project is None or controller.project.data is None:
        print_error(controller.error or f"Project not found: {project_id}")
        controller.cancel()
        return False

    if name is not None:
        controller.edit_name(name)
    if rate is not None:
        controller.edit_rate(parse_rate(rate))
    if vat is not None and not controller.toggle_vat(vat):
        print_warning("VAT is disabled in settings, ignoring --vat/--no-vat")

    if not controller.valid:
        print_error(describe_invalid(controller.draft))
        controller.cancel()
        return False

    return await controller.submit()


# =============================================================================
# Commands
# =============================================================================


@app.command("create")
def create(
    name: str = typer.Option(..., "--name", "-n", help="Project name (3-32 characters)"),
    rate: str = typer.Option(..., "--rate", "-r", help="Hourly rate"),
    vat: bool = typer.Option(False, "--vat", help="Add VAT to billable amounts"),
    client: Optional[str] = client_option,
) -> None:
    """Create a new project for a client.

    Example:
        tietracker project create -c acme-corp -n "Website" -r 120 --vat
    """
    if not client:
        print_error("No client specified. Use --client or set TIETRACKER_CLIENT.")
        raise typer.Exit(1)

    controller = ProjectFormController(
        JsonProjectsGateway(),
        get_settings(),
        client=Client(id=client),
    )

    if not run(_create_session(controller, name, rate, vat)):
        if controller.error:
            print_error(f"Failed to create project: {controller.error}")
        raise typer.Exit(1)

    save_last_client_id(client)
    project = controller.project
    print_success(f"Created project: {project.id if project else name}")


@app.command("update")
def update(
    project_id: str = typer.Argument(..., help="ID of the project to update"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New project name"),
    rate: Optional[str] = typer.Option(None, "--rate", "-r", help="New hourly rate"),
    vat: Optional[bool] = typer.Option(None, "--vat/--no-vat", help="Add VAT to billable amounts"),
) -> None:
    """Change the name, rate or VAT flag of a project."""
    controller = ProjectFormController(JsonProjectsGateway(), get_settings())

    if not run(_update_session(controller, project_id, name, rate, vat)):
        if controller.error:
            print_error(f"Failed to update project: {controller.error}")
        raise typer.Exit(1)

    print_success(f"Updated project: {project_id}")


@app.command("show")
def show(
    project_id: str = typer.Argument(..., help="ID of the project to show"),
) -> None:
    """Show a project's details."""
    result = ProjectRepository().get(project_id)

    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    if result.value is None:
        print_error(f"Project not found: {project_id}")
        raise typer.Exit(1)

    print_project(result.value, get_settings())


@app.command("list")
def list_projects() -> None:
    """List all projects."""
    result = ProjectRepository().list_all()

    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)

    if not result.value:
        print_info("No projects yet. Create one with: tietracker project create")
        return

    for project in result.value:
        name = project.data.name if project.data else "(no data)"
        typer.echo(f"{project.id}  {name}")
