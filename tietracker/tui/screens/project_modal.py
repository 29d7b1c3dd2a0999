"""Project modal for the tietracker TUI.

Hosts a ProjectFormController: creates a new project or edits an existing
one. The modal dismisses with ``True`` when the project was saved and with
``None`` when the user closed it.
"""

from decimal import Decimal

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Checkbox, Input, Label

from tietracker.application.project_form import (
    FormState,
    ProjectFormController,
    SessionMode,
    parse_rate,
)
from tietracker.domain.project import NAME_MAX_LENGTH
from tietracker.tui.widgets import BusySpinner


def _rate_text(rate: float | None) -> str:
    """Render a rate for the input without losing digits (20.0 -> "20")."""
    if rate is None:
        return ""
    return format(Decimal(str(rate)).normalize(), "f")


class ProjectModal(ModalScreen[bool | None]):
    """Modal form for creating or updating a project."""

    BINDINGS = [
        ("escape", "cancel", "Close"),
    ]

    CSS = """
    ProjectModal {
        align: center middle;
    }

    #project-modal {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
    }

    #project-toolbar {
        height: 3;
        background: $primary;
        padding: 0 1;
    }

    #project-title {
        width: 1fr;
        text-style: bold;
        padding: 1;
    }

    #project-toolbar BusySpinner {
        margin: 1;
    }

    #project-form {
        height: auto;
        padding: 1 2;
    }

    .item-title {
        text-style: bold;
        margin-top: 1;
    }

    #project-error {
        color: $error;
        margin-top: 1;
    }

    #submit-btn {
        margin-top: 1;
    }
    """

    def __init__(
        self,
        controller: ProjectFormController,
        mode: SessionMode,
        project_id: str | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._session_mode = mode
        self._edit_project_id = project_id

    def compose(self) -> ComposeResult:
        settings = self._controller.settings
        submit_label = "Create" if self._session_mode is SessionMode.CREATE else "Update"

        with Vertical(id="project-modal"):
            with Horizontal(id="project-toolbar"):
                yield Button("Close", id="close-btn")
                yield Label("", id="project-title")
                yield BusySpinner(id="project-spinner")

            with Vertical(id="project-form"):
                yield Label("Project", classes="item-title")
                yield Input(
                    placeholder="Project name",
                    max_length=NAME_MAX_LENGTH,
                    id="project-name-input",
                )

                yield Label("Hourly rate", classes="item-title")
                yield Input(placeholder="0", type="number", id="project-rate-input")

                # VAT is left out entirely when it is disabled in settings
                if settings.vat_enabled:
                    yield Label("Vat", classes="item-title")
                    yield Checkbox(f"{settings.vat:g}%", id="project-vat-checkbox")

                yield Label("", id="project-error")
                yield Button(submit_label, id="submit-btn", variant="primary", disabled=True)

    def on_mount(self) -> None:
        self._apply_theme()
        self.query_one("#project-form").display = False
        self._refresh_form()
        self.run_worker(self._load(), exclusive=True, group="project-form")

    def on_unmount(self) -> None:
        self._controller.close()

    # =========================================================================
    # Workers
    # =========================================================================

    async def _load(self) -> None:
        """Load the project and fill the inputs from the draft."""
        await self._controller.initialize(self._session_mode, self._edit_project_id)
        if self._controller.state is not FormState.READY:
            return

        draft = self._controller.draft
        self.query_one("#project-name-input", Input).value = draft.name or ""
        self.query_one("#project-rate-input", Input).value = _rate_text(draft.hourly_rate)
        vat = self._controller.vat_display
        if vat is not None:
            self.query_one("#project-vat-checkbox", Checkbox).value = vat.checked

        self.query_one("#project-form").display = True
        self._refresh_form()
        self.query_one("#project-name-input", Input).focus()

    async def _submit(self) -> None:
        """Save the draft and close on success."""
        self.query_one("#submit-btn", Button).disabled = True
        self.query_one("#project-spinner", BusySpinner).busy = True

        if await self._controller.submit():
            self.dismiss(True)
            return

        self._refresh_form()
        if self._controller.error:
            self.notify(f"Could not save project: {self._controller.error}", severity="error")

    # =========================================================================
    # Events
    # =========================================================================

    @on(Input.Changed, "#project-name-input")
    def _name_changed(self, event: Input.Changed) -> None:
        self._controller.edit_name(event.value)
        self._refresh_form()

    @on(Input.Changed, "#project-rate-input")
    def _rate_changed(self, event: Input.Changed) -> None:
        self._controller.edit_rate(parse_rate(event.value))
        self._refresh_form()

    @on(Checkbox.Changed, "#project-vat-checkbox")
    def _vat_changed(self, event: Checkbox.Changed) -> None:
        self._controller.toggle_vat(event.value)
        self._refresh_form()

    @on(Input.Submitted)
    def _input_submitted(self) -> None:
        self.action_submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-btn":
            self.action_cancel()
        elif event.button.id == "submit-btn":
            self.action_submit()

    def action_submit(self) -> None:
        if self._controller.can_submit:
            self.run_worker(self._submit(), exclusive=True, group="project-form")

    def action_cancel(self) -> None:
        """Close without saving."""
        self._controller.cancel()
        self.dismiss(None)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _refresh_form(self) -> None:
        controller = self._controller

        self.query_one("#project-title", Label).update(controller.title)
        self.query_one("#project-spinner", BusySpinner).busy = controller.loading or controller.saving
        self.query_one("#submit-btn", Button).disabled = not controller.can_submit
        self.query_one("#project-error", Label).update(controller.error or "")

    def _apply_theme(self) -> None:
        theme = self._controller.theme
        toolbar = self.query_one("#project-toolbar")
        if theme.color:
            toolbar.styles.background = theme.color
        if theme.color_contrast:
            toolbar.styles.color = theme.color_contrast


__all__ = ["ProjectModal"]
