"""Settings domain package."""

from tietracker.domain.settings.models import Settings

__all__ = ["Settings"]
