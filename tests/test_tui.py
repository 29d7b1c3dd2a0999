"""Tests for the Textual widgets and the project modal."""

import asyncio
from decimal import Decimal

from textual.app import App, ComposeResult
from textual.widgets import Checkbox, Input

from tietracker.application.project_form import FormOutcome, ProjectFormController, SessionMode
from tietracker.application.summary_service import SummaryStore
from tietracker.domain.settings import Settings
from tietracker.domain.summary import Summary
from tietracker.tui.screens import ProjectModal
from tietracker.tui.widgets import SummaryPanel
from tests.conftest import FakeGateway, make_project


class SummaryHost(App):
    def __init__(self, store: SummaryStore, settings: Settings) -> None:
        super().__init__()
        self.store = store
        self.user_settings = settings

    def compose(self) -> ComposeResult:
        yield SummaryPanel(self.store, self.user_settings, id="summary-panel")


class ModalHost(App):
    def __init__(self, modal: ProjectModal) -> None:
        super().__init__()
        self.modal = modal
        self.results: list[bool | None] = []

    def on_mount(self) -> None:
        self.push_screen(self.modal, self.results.append)


class TestSummaryPanel:
    """The summary panel follows the store."""

    def test_placeholders_then_values(self):
        store = SummaryStore()
        app = SummaryHost(store, Settings())

        async def scenario():
            async with app.run_test() as pilot:
                panel = app.query_one(SummaryPanel)
                assert panel.tracked_text == "Tracked: --:--:--"
                assert panel.billable_text == "Billable: -"

                store.publish(Summary(milliseconds=5_400_000, billable=Decimal("90.00")))
                await pilot.pause()

                assert panel.tracked_text == "Tracked: 01:30:00"
                assert panel.billable_text == "Billable: CHF 90.00"

                store.publish(None)
                await pilot.pause()
                assert panel.tracked_text == "Tracked: --:--:--"

        asyncio.run(scenario())


class TestProjectModal:
    """The modal drives a form controller."""

    def test_edit_and_save(self):
        """Test loading a project, changing its rate and saving it."""
        gateway = FakeGateway([make_project()])
        controller = ProjectFormController(gateway, Settings())
        app = ModalHost(ProjectModal(controller, SessionMode.UPDATE, "beta"))

        async def scenario():
            async with app.run_test() as pilot:
                await app.workers.wait_for_complete()
                await pilot.pause()

                modal = app.screen
                assert modal.query_one("#project-name-input", Input).value == "Beta"
                assert modal.query_one("#project-rate-input", Input).value == "20"

                modal.query_one("#project-rate-input", Input).value = "35"
                await pilot.pause()
                assert controller.draft.hourly_rate == 35

                modal.action_submit()
                await app.workers.wait_for_complete()
                await pilot.pause()

        asyncio.run(scenario())

        assert app.results == [True]
        assert controller.outcome.result() is FormOutcome.COMMITTED
        assert gateway.projects["beta"].data.rate.hourly == 35

    def test_escape_cancels(self):
        gateway = FakeGateway([make_project()])
        controller = ProjectFormController(gateway, Settings())
        app = ModalHost(ProjectModal(controller, SessionMode.UPDATE, "beta"))

        async def scenario():
            async with app.run_test() as pilot:
                await app.workers.wait_for_complete()
                await pilot.pause()
                await pilot.press("escape")
                await pilot.pause()

        asyncio.run(scenario())

        assert app.results == [None]
        assert controller.outcome.result() is FormOutcome.CANCELLED
        assert gateway.calls_named("update") == []

    def test_rename_keeps_precise_rate(self):
        """Test renaming only leaves a long rate exactly as stored."""
        gateway = FakeGateway([make_project(hourly=1234567.5)])
        controller = ProjectFormController(gateway, Settings())
        app = ModalHost(ProjectModal(controller, SessionMode.UPDATE, "beta"))

        async def scenario():
            async with app.run_test() as pilot:
                await app.workers.wait_for_complete()
                await pilot.pause()

                modal = app.screen
                assert modal.query_one("#project-rate-input", Input).value == "1234567.5"

                modal.query_one("#project-name-input", Input).value = "Beta2"
                await pilot.pause()

                modal.action_submit()
                await app.workers.wait_for_complete()
                await pilot.pause()

        asyncio.run(scenario())

        assert app.results == [True]
        saved = gateway.calls_named("update")[0]
        assert saved.data.name == "Beta2"
        assert saved.data.rate.hourly == 1234567.5


class TestProjectModalVat:
    """The VAT checkbox follows the VAT setting."""

    def run_modal(self, settings: Settings, check: bool = False):
        gateway = FakeGateway([make_project()])
        controller = ProjectFormController(gateway, settings)
        app = ModalHost(ProjectModal(controller, SessionMode.UPDATE, "beta"))
        found = {}

        async def scenario():
            async with app.run_test() as pilot:
                await app.workers.wait_for_complete()
                await pilot.pause()

                checkboxes = app.screen.query("#project-vat-checkbox")
                found["count"] = len(checkboxes)
                if checkboxes:
                    checkbox = app.screen.query_one("#project-vat-checkbox", Checkbox)
                    found["label"] = str(checkbox.label)
                    if check:
                        checkbox.value = True
                        await pilot.pause()

        asyncio.run(scenario())
        return controller, found

    def test_omitted_when_vat_disabled(self):
        _, found = self.run_modal(Settings())
        assert found["count"] == 0

    def test_shown_with_percentage(self):
        _, found = self.run_modal(Settings(vat=7.7))

        assert found["count"] == 1
        assert found["label"] == "7.7%"

    def test_ticking_updates_draft(self):
        """Test checking the box sets the draft's VAT flag."""
        controller, _ = self.run_modal(Settings(vat=7.7), check=True)
        assert controller.draft.vat_enabled is True
