"""tietracker - time tracking and billing for client projects."""

__version__ = "0.1.0"
