"""Validation policy for project drafts.

Pure functions deciding whether user-entered values may be saved.
"""

from typing import Protocol

from tietracker.domain.project.models import NAME_MIN_LENGTH


class DraftFields(Protocol):
    name: str | None
    hourly_rate: float | None


def validate(name: str | None, hourly_rate: float | None) -> bool:
    """Return True if the name and hourly rate can be persisted.

    The name needs at least three characters and the rate must be a
    non-negative number. VAT is a plain flag and always valid.
    """
    name_ok = name is not None and len(name) >= NAME_MIN_LENGTH
    rate_ok = hourly_rate is not None and hourly_rate >= 0
    return name_ok and rate_ok


def validate_draft(draft: DraftFields) -> bool:
    """Apply :func:`validate` to anything carrying draft fields."""
    return validate(draft.name, draft.hourly_rate)
