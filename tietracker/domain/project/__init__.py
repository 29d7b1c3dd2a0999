"""Project domain package.

Models, events and the validation policy for billable projects.
"""

from tietracker.domain.project.events import ProjectCreated, ProjectUpdated
from tietracker.domain.project.models import (
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    Client,
    Project,
    ProjectData,
    Rate,
)
from tietracker.domain.project.validation import validate, validate_draft

__all__ = [
    "Client",
    "NAME_MAX_LENGTH",
    "NAME_MIN_LENGTH",
    "Project",
    "ProjectCreated",
    "ProjectData",
    "ProjectUpdated",
    "Rate",
    "validate",
    "validate_draft",
]
