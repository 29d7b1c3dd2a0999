"""Application service layer for tietracker.

Services:
    project_form    - create/update session controller for project forms
    summary_service - summary loading and the observable summary store

Example usage:
    >>> from tietracker.application import ProjectFormController, SessionMode
    >>>
    >>> controller = ProjectFormController(gateway, settings)
    >>> await controller.initialize(SessionMode.UPDATE, project_id)
    >>> controller.edit_rate(35)
    >>> await controller.submit()
"""

from tietracker.application.project_form import (
    Draft,
    FormOutcome,
    FormState,
    ProjectFormController,
    SessionMode,
    Theme,
    VatDisplay,
    parse_rate,
)
from tietracker.application.summary_service import (
    SummaryStore,
    load_summary,
    refresh_summary,
)

__all__ = [
    # Project form
    "Draft",
    "FormOutcome",
    "FormState",
    "ProjectFormController",
    "SessionMode",
    "Theme",
    "VatDisplay",
    "parse_rate",
    # Summary
    "SummaryStore",
    "load_summary",
    "refresh_summary",
]
