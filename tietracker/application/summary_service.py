"""Summary application service.

Loads tracked tasks and projects, aggregates them for the current period
and publishes the result to a :class:`SummaryStore`. Views subscribe to the
store and re-render whenever the summary changes; they never write to it.
"""

import logging
from collections.abc import Callable

from tietracker.domain.settings import Settings
from tietracker.domain.shared import Err, Ok, Result
from tietracker.domain.summary import Period, Summary, compute_summary
from tietracker.infrastructure.storage.repositories import ProjectRepository, TaskRepository

logger = logging.getLogger(__name__)

Subscriber = Callable[[Summary | None], None]


class SummaryStore:
    """Holds the latest summary and notifies subscribers of changes.

    ``None`` means no summary is available yet.
    """

    def __init__(self) -> None:
        self._summary: Summary | None = None
        self._subscribers: list[Subscriber] = []

    @property
    def summary(self) -> Summary | None:
        return self._summary

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and call it once with the current value.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)
        callback(self._summary)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, summary: Summary | None) -> None:
        """Replace the summary, notifying subscribers if it changed."""
        if summary == self._summary:
            return
        self._summary = summary

        for callback in list(self._subscribers):
            try:
                callback(summary)
            except Exception:
                logger.exception(f"Summary subscriber {callback!r} failed")

    def refresh(
        self,
        projects: ProjectRepository,
        tasks: TaskRepository,
        settings: Settings,
        period: Period | None = None,
    ) -> Result[Summary, str]:
        """Recompute from the repositories and publish. See :func:`refresh_summary`."""
        return refresh_summary(self, projects, tasks, settings, period)


def load_summary(
    projects: ProjectRepository,
    tasks: TaskRepository,
    settings: Settings,
    period: Period | None = None,
) -> Result[Summary, str]:
    """Aggregate stored tasks for ``period`` (default: the current week).

    Args:
        projects: Repository providing project rates.
        tasks: Repository providing tracked tasks.
        settings: Current settings (VAT percentage).
        period: Window to summarize.

    Returns:
        Ok(Summary), or Err(str) if projects or tasks could not be loaded.
    """
    project_result = projects.list_all()
    if isinstance(project_result, Err):
        return project_result

    task_result = tasks.load_all()
    if isinstance(task_result, Err):
        return task_result

    summary = compute_summary(
        task_result.value,
        project_result.value,
        settings,
        period or Period.current_week(),
    )
    return Ok(summary)


def refresh_summary(
    store: SummaryStore,
    projects: ProjectRepository,
    tasks: TaskRepository,
    settings: Settings,
    period: Period | None = None,
) -> Result[Summary, str]:
    """Recompute the summary and publish it to ``store``.

    On failure the store is reset to "unavailable" and the error returned.
    """
    result = load_summary(projects, tasks, settings, period)
    if isinstance(result, Err):
        logger.error(f"Could not compute summary: {result.error}")
        store.publish(None)
        return result

    store.publish(result.value)
    return result
