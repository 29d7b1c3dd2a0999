"""Terminal user interface for tietracker, built on Textual."""
