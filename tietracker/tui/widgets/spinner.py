"""Busy indicator for loading and saving states.

Renders Rich's Spinner while ``busy`` is set, blank space otherwise.
"""

from typing import Optional

from rich.spinner import Spinner as RichSpinner
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Static


class BusySpinner(Static):
    """Spinner shown while a form is loading or saving."""

    DEFAULT_CSS = """
    BusySpinner {
        width: 2;
        height: 1;
        content-align: center middle;
    }
    """

    busy: reactive[bool] = reactive(False)

    def __init__(
        self,
        style: str = "dots",
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        self._spinner = RichSpinner(style)
        self._timer: Optional[Timer] = None
        super().__init__(id=id, classes=classes)

    def render(self) -> RichSpinner | str:
        if self.busy:
            return self._spinner
        return " "

    def watch_busy(self, busy: bool) -> None:
        if busy and self._timer is None:
            self._timer = self.set_interval(1 / 30, self.refresh)
        elif not busy and self._timer is not None:
            self._timer.stop()
            self._timer = None
        self.refresh()
