"""Summary domain package.

Tracked tasks, periods and the weekly billing summary.
"""

from tietracker.domain.summary.aggregation import billable_amount, compute_summary
from tietracker.domain.summary.models import Period, Summary, TrackedTask

__all__ = [
    "Period",
    "Summary",
    "TrackedTask",
    "billable_amount",
    "compute_summary",
]
