"""Weekly summary panel for the tietracker TUI."""

from collections.abc import Callable
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static

from tietracker.application.summary_service import SummaryStore
from tietracker.domain.settings import Settings
from tietracker.domain.summary import Summary
from tietracker.formatting import format_currency, format_time


class SummaryPanel(Static):
    """Shows tracked time and billable amount for the current week.

    Subscribes to a SummaryStore while mounted and re-renders on every
    change. Read-only: it never writes to the store.
    """

    DEFAULT_CSS = """
    SummaryPanel {
        background: $surface;
        padding: 1 2;
        border: solid $primary;
        height: auto;
    }

    SummaryPanel .summary-title {
        text-style: bold;
        margin-bottom: 1;
    }

    SummaryPanel #summary-tracked {
        color: $text-muted;
    }

    SummaryPanel #summary-billable {
        text-style: bold;
    }
    """

    def __init__(
        self,
        store: SummaryStore,
        settings: Settings,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._store = store
        self._user_settings = settings
        self._unsubscribe: Optional[Callable[[], None]] = None
        self.tracked_text = f"Tracked: {format_time(None)}"
        self.billable_text = f"Billable: {format_currency(None, settings)}"

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Weekly Summary", classes="summary-title")
            yield Static(self.tracked_text, id="summary-tracked")
            yield Static(self.billable_text, id="summary-billable")

    def on_mount(self) -> None:
        self._unsubscribe = self._store.subscribe(self.show_summary)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def show_summary(self, summary: Summary | None) -> None:
        """Render ``summary``, or placeholders when it is unavailable."""
        milliseconds = summary.milliseconds if summary is not None else None
        billable = summary.billable if summary is not None else None

        self.tracked_text = f"Tracked: {format_time(milliseconds)}"
        self.billable_text = f"Billable: {format_currency(billable, self._user_settings)}"

        self.query_one("#summary-tracked", Static).update(self.tracked_text)
        self.query_one("#summary-billable", Static).update(self.billable_text)
