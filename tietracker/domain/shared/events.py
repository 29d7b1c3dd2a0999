"""Base domain event infrastructure.

Domain events are immutable records of something that happened to a
project (it was created, its rate changed, ...). The form controller records
them when a submit commits so that callers can react without re-reading
storage.

Example usage:
    >>> from tietracker.domain.project.events import ProjectCreated
    >>> event = ProjectCreated(project_id="a1b2", name="Acme")
    >>> print(f"{event.name} created at {event.timestamp:%Y-%m-%d}")
"""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event carries a unique ID and the UTC time it occurred.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}
