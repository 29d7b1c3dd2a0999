"""Summary CLI command."""

from tietracker.application.summary_service import load_summary
from tietracker.domain.shared import Err
from tietracker.global_config import get_settings
from tietracker.infrastructure.storage import ProjectRepository, TaskRepository
from tietracker.interfaces.cli.common import print_summary, print_warning


def show() -> None:
    """Show tracked time and billable amount for the current week."""
    settings = get_settings()
    result = load_summary(ProjectRepository(), TaskRepository(), settings)

    if isinstance(result, Err):
        # Still render the summary, with placeholders
        print_warning(f"Summary unavailable: {result.error}")
        print_summary(None, settings)
        return

    print_summary(result.value, settings)
