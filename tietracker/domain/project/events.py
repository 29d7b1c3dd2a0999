"""Project domain events.

Recorded by the project form controller each time a submit commits.
"""

from tietracker.domain.shared.events import DomainEvent


class ProjectCreated(DomainEvent):
    """A new project was persisted and received its identity."""

    project_id: str
    name: str
    client_id: str | None = None


class ProjectUpdated(DomainEvent):
    """An existing project's name or rate was saved."""

    project_id: str
    name: str
    hourly: float
    vat_enabled: bool
