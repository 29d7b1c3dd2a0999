"""Shared domain building blocks.

- Result monad for explicit error handling
- Base domain event

Example usage:
    >>> from tietracker.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def find_rate(project_id: str) -> Result[float, str]:
    ...     if project_id == "unknown":
    ...         return Err("Project not found")
    ...     return Ok(50.0)
"""

from tietracker.domain.shared.events import DomainEvent
from tietracker.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
    is_err,
    is_ok,
    map_result,
    unwrap_or,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "map_result",
    "flat_map",
    "unwrap_or",
    # Domain events
    "DomainEvent",
]
