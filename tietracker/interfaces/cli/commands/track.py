"""Time tracking CLI commands."""

from uuid import uuid4

import typer

from tietracker.application.project_form import now_ms
from tietracker.domain.shared import Err
from tietracker.domain.summary import TrackedTask
from tietracker.formatting import format_time
from tietracker.infrastructure.storage import ProjectRepository, TaskRepository
from tietracker.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Time tracking commands")


@app.command("add")
def add(
    project_id: str = typer.Argument(..., help="Project the time was spent on"),
    minutes: float = typer.Option(..., "--minutes", "-m", min=0, help="Minutes spent, ending now"),
) -> None:
    """Record time spent on a project.

    Example:
        tietracker track add 3f2a... --minutes 90
    """
    if not ProjectRepository().exists(project_id):
        print_error(f"Project not found: {project_id}")
        raise typer.Exit(1)

    end = now_ms()
    task = TrackedTask(
        id=uuid4().hex,
        project_id=project_id,
        from_=end - int(minutes * 60_000),
        to=end,
    )

    result = TaskRepository().add(task)
    if isinstance(result, Err):
        print_error(f"Failed to save tracked time: {result.error}")
        raise typer.Exit(1)

    print_success(f"Tracked {format_time(task.milliseconds)} on {project_id}")
