"""Tests for summary aggregation and the summary store."""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from tietracker.application.summary_service import (
    SummaryStore,
    load_summary,
    refresh_summary,
)
from tietracker.domain.settings import Settings
from tietracker.domain.shared import Ok
from tietracker.domain.summary import Period, Summary, TrackedTask, compute_summary
from tietracker.infrastructure.storage import ProjectRepository, TaskRepository
from tests.conftest import make_project

HOUR = 3_600_000
WEEK = Period(start=0, end=7 * 24 * HOUR)


def task(project_id: str, start: int, end: int, task_id: str = "t") -> TrackedTask:
    return TrackedTask(id=task_id, project_id=project_id, from_=start, to=end)


class TestPeriod:
    """Summary windows."""

    def test_current_week(self):
        """Test the week runs from local Monday midnight for seven days."""
        period = Period.current_week(datetime(2024, 5, 15, 10, 30))

        assert period.start == int(datetime(2024, 5, 13).timestamp() * 1000)
        assert period.end == int(datetime(2024, 5, 20).timestamp() * 1000)

    def test_current_week_on_monday(self):
        period = Period.current_week(datetime(2024, 5, 13, 0, 0))
        assert period.start == int(datetime(2024, 5, 13).timestamp() * 1000)

    def test_overlap(self):
        period = Period(start=100, end=200)

        assert period.overlap(120, 180) == 60
        assert period.overlap(50, 150) == 50
        assert period.overlap(150, 250) == 50
        assert period.overlap(0, 100) == 0
        assert period.overlap(200, 300) == 0

    def test_rejects_inverted_bounds(self):
        with pytest.raises(ValidationError):
            Period(start=10, end=5)


class TestTrackedTask:
    def test_rejects_end_before_start(self):
        with pytest.raises(ValidationError):
            task("p", 10, 5)

    def test_serializes_from_alias(self):
        """Test tasks are stored with the ``from`` key."""
        data = task("p", 1, 2).model_dump(by_alias=True)
        assert data["from"] == 1
        assert TrackedTask.model_validate(data).milliseconds == 1


class TestComputeSummary:
    """Aggregating tracked tasks."""

    def test_sums_time_and_billable(self, settings):
        """Test 90 minutes at 60/h bill 90.00."""
        projects = [make_project("p", hourly=60)]
        tasks = [task("p", 0, HOUR), task("p", 2 * HOUR, 2 * HOUR + HOUR // 2)]

        summary = compute_summary(tasks, projects, settings, WEEK)

        assert summary.milliseconds == 90 * 60_000
        assert summary.billable == Decimal("90.00")

    def test_adds_vat_when_enabled(self, vat_settings):
        """Test VAT applies to projects opting in."""
        projects = [make_project("p", hourly=60, vat_enabled=True)]
        tasks = [task("p", 0, HOUR + HOUR // 2)]

        summary = compute_summary(tasks, projects, vat_settings, WEEK)

        assert summary.billable == Decimal("96.93")

    def test_no_vat_without_percentage(self, settings):
        """Test the project flag alone does not add VAT."""
        projects = [make_project("p", hourly=60, vat_enabled=True)]

        summary = compute_summary([task("p", 0, HOUR)], projects, settings, WEEK)

        assert summary.billable == Decimal("60.00")

    def test_counts_only_overlap(self, settings):
        """Test tasks straddling the period only count their overlap."""
        projects = [make_project("p", hourly=60)]
        period = Period(start=HOUR, end=3 * HOUR)
        tasks = [task("p", 0, 2 * HOUR), task("p", 5 * HOUR, 6 * HOUR)]

        summary = compute_summary(tasks, projects, settings, period)

        assert summary.milliseconds == HOUR
        assert summary.billable == Decimal("60.00")

    def test_unknown_project_not_billable(self, settings):
        """Test time for unknown projects counts but bills nothing."""
        summary = compute_summary([task("gone", 0, HOUR)], [], settings, WEEK)

        assert summary.milliseconds == HOUR
        assert summary.billable == Decimal("0.00")

    def test_rounds_once(self, settings):
        """Test one minute at 100/h rounds to 1.67."""
        projects = [make_project("p", hourly=100)]

        summary = compute_summary([task("p", 0, 60_000)], projects, settings, WEEK)

        assert summary.billable == Decimal("1.67")

    def test_empty(self, settings):
        summary = compute_summary([], [], settings, WEEK)
        assert summary == Summary(milliseconds=0, billable=Decimal("0"))

    def test_summary_is_frozen(self):
        summary = Summary(milliseconds=0, billable=Decimal("0"))
        with pytest.raises(ValidationError):
            summary.milliseconds = 10


class TestSummaryStore:
    """Publishing summaries to subscribers."""

    def test_subscribe_receives_current_value(self):
        store = SummaryStore()
        received = []

        store.subscribe(received.append)

        assert received == [None]

    def test_publish_notifies_on_change(self):
        """Test subscribers are only notified of actual changes."""
        store = SummaryStore()
        received = []
        store.subscribe(received.append)
        summary = Summary(milliseconds=HOUR, billable=Decimal("50.00"))

        store.publish(summary)
        store.publish(Summary(milliseconds=HOUR, billable=Decimal("50.00")))

        assert received == [None, summary]
        assert store.summary == summary

    def test_unsubscribe(self):
        store = SummaryStore()
        received = []
        unsubscribe = store.subscribe(received.append)

        unsubscribe()
        store.publish(Summary(milliseconds=1, billable=Decimal("0")))

        assert received == [None]

    def test_failing_subscriber_does_not_block_others(self):
        """Test an exception in one subscriber still notifies the rest."""
        store = SummaryStore()
        received = []

        def broken(summary):
            if summary is not None:
                raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(received.append)
        store.publish(Summary(milliseconds=1, billable=Decimal("0")))

        assert len(received) == 2


class TestLoadSummary:
    """Summaries from stored data."""

    def test_load_summary(self, tmp_path, settings):
        projects = ProjectRepository(tmp_path)
        tasks = TaskRepository(tmp_path)
        projects.save(make_project("p", hourly=40))
        tasks.add(task("p", 0, 2 * HOUR))

        result = load_summary(projects, tasks, settings, WEEK)

        assert isinstance(result, Ok)
        assert result.value.milliseconds == 2 * HOUR
        assert result.value.billable == Decimal("80.00")

    def test_refresh_publishes(self, tmp_path, settings):
        store = SummaryStore()
        projects = ProjectRepository(tmp_path)
        tasks = TaskRepository(tmp_path)

        store.refresh(projects, tasks, settings, WEEK)

        assert store.summary == Summary(milliseconds=0, billable=Decimal("0"))

    def test_refresh_resets_on_error(self, tmp_path, settings):
        """Test an unreadable task file makes the summary unavailable."""
        store = SummaryStore()
        store.publish(Summary(milliseconds=1, billable=Decimal("1")))
        (tmp_path / "tasks.json").write_text("{not json", encoding="utf-8")

        result = refresh_summary(
            store,
            ProjectRepository(tmp_path),
            TaskRepository(tmp_path),
            settings,
            WEEK,
        )

        assert not isinstance(result, Ok)
        assert store.summary is None

    def test_default_period_is_current_week(self, tmp_path, settings):
        """Test tasks tracked this week are included by default."""
        week = Period.current_week()
        projects = ProjectRepository(tmp_path)
        tasks = TaskRepository(tmp_path)
        tasks.add(task("p", week.start + HOUR, week.start + 2 * HOUR))
        tasks.add(task("p", week.start - 2 * HOUR, week.start - HOUR, task_id="old"))

        result = load_summary(projects, tasks, settings)

        assert result.value.milliseconds == HOUR
