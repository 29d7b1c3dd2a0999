"""TUI screens for tietracker."""

from .project_modal import ProjectModal

__all__ = [
    "ProjectModal",
]
