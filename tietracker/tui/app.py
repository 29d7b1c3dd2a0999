"""Main tietracker TUI application.

Lists projects next to the weekly summary and opens the project modal for
creating and editing projects.
"""

from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import DataTable, Footer, Header

from tietracker.application.project_form import ProjectFormController, SessionMode, Theme
from tietracker.application.summary_service import SummaryStore
from tietracker.domain.project import Client
from tietracker.domain.shared import Err
from tietracker.formatting import format_currency
from tietracker.global_config import get_last_client_id, get_settings
from tietracker.infrastructure.storage import (
    JsonProjectsGateway,
    ProjectRepository,
    TaskRepository,
)
from tietracker.tui.screens import ProjectModal
from tietracker.tui.widgets import SummaryPanel


class TieTrackerApp(App):
    """Terminal interface for projects and their weekly billing summary."""

    TITLE = "Tie Tracker"
    SUB_TITLE = "Projects and billing"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #projects-table {
        width: 2fr;
        height: 100%;
        border-right: solid $primary;
    }

    #summary-panel {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("n", "new_project", "New", show=True),
        Binding("e", "edit_project", "Edit", show=True),
        Binding("r", "refresh", "Refresh", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        client_id: Optional[str] = None,
        data_dir: Optional[Path] = None,
        theme_hint: Optional[Theme] = None,
    ) -> None:
        """Initialize the application.

        Args:
            client_id: Client new projects are created for. Defaults to the
                client used last.
            data_dir: Data directory. Defaults to the configured one.
            theme_hint: Colors for the project modal toolbar.
        """
        super().__init__()
        self._client_id = client_id or get_last_client_id(data_dir)
        self._user_settings = get_settings(data_dir)
        self._project_repo = ProjectRepository(data_dir)
        self._task_repo = TaskRepository(data_dir)
        self._projects_gateway = JsonProjectsGateway(self._project_repo)
        self._theme_hint = theme_hint or Theme()
        self.summary_store = SummaryStore()

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-container"):
            yield DataTable(id="projects-table", cursor_type="row")
            yield SummaryPanel(self.summary_store, self._user_settings, id="summary-panel")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#projects-table", DataTable)
        table.add_columns("Name", "Rate", "VAT")
        self.action_refresh()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        """Reload projects and recompute the summary."""
        table = self.query_one("#projects-table", DataTable)
        table.clear()

        result = self._project_repo.list_all()
        if isinstance(result, Err):
            self.notify(result.error, severity="error")
        else:
            for project in result.value:
                if project.data is None:
                    continue
                rate = project.data.rate
                table.add_row(
                    project.data.name,
                    format_currency(rate.hourly, self._user_settings),
                    "yes" if rate.vat_enabled else "",
                    key=project.id,
                )

        summary = self.summary_store.refresh(self._project_repo, self._task_repo, self._user_settings)
        if isinstance(summary, Err):
            self.notify(summary.error, severity="warning")

    def action_new_project(self) -> None:
        """Open the modal for a new project."""
        if not self._client_id:
            self.notify("No client selected - start with --client", severity="warning")
            return
        self._open_project_modal(SessionMode.CREATE)

    def action_edit_project(self) -> None:
        """Open the modal for the highlighted project."""
        project_id = self._selected_project_id()
        if project_id is None:
            self.notify("No project selected", severity="warning")
            return
        self._open_project_modal(SessionMode.UPDATE, project_id)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value is not None:
            self._open_project_modal(SessionMode.UPDATE, event.row_key.value)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _selected_project_id(self) -> Optional[str]:
        table = self.query_one("#projects-table", DataTable)
        if table.row_count == 0:
            return None
        row_key = table.coordinate_to_cell_key(table.cursor_coordinate).row_key
        return row_key.value

    def _open_project_modal(self, mode: SessionMode, project_id: Optional[str] = None) -> None:
        controller = ProjectFormController(
            self._projects_gateway,
            self._user_settings,
            client=Client(id=self._client_id) if self._client_id else None,
            theme=self._theme_hint,
        )

        def handle_close(committed: bool | None) -> None:
            if committed:
                self.notify("Project saved", severity="information")
                self.action_refresh()

        self.push_screen(ProjectModal(controller, mode, project_id), handle_close)


__all__ = ["TieTrackerApp"]
