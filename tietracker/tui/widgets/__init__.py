"""TUI widgets for tietracker."""

from .spinner import BusySpinner
from .summary_panel import SummaryPanel

__all__ = [
    "BusySpinner",
    "SummaryPanel",
]
