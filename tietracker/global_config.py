"""Global configuration storage for tietracker.

Settings and small preferences live in the data directory,
``~/.tietracker`` unless ``TIETRACKER_HOME`` points elsewhere.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from tietracker.domain.settings.models import Settings

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "TIETRACKER_HOME"


def get_data_dir() -> Path:
    """Get the tietracker data directory, creating it if needed."""
    override = os.environ.get(HOME_ENV_VAR)
    data_dir = Path(override) if override else Path.home() / ".tietracker"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_settings(data_dir: Optional[Path] = None) -> Settings:
    """Load settings, falling back to defaults if missing or unreadable."""
    settings_file = (data_dir or get_data_dir()) / "settings.json"
    if settings_file.exists():
        try:
            data = json.loads(settings_file.read_text(encoding="utf-8"))
            return Settings(**data)
        except (json.JSONDecodeError, ValueError, TypeError) as e:
            logger.warning(f"Ignoring invalid settings in {settings_file}: {e}")
    return Settings()  # defaults


def save_settings(settings: Settings, data_dir: Optional[Path] = None) -> None:
    """Save settings."""
    settings_file = (data_dir or get_data_dir()) / "settings.json"
    settings_file.write_text(
        json.dumps(settings.model_dump(), indent=2),
        encoding="utf-8",
    )


def get_last_client_id(data_dir: Optional[Path] = None) -> Optional[str]:
    """Get the client used for the last created project."""
    client_file = (data_dir or get_data_dir()) / "last_client.txt"
    if client_file.exists():
        return client_file.read_text(encoding="utf-8").strip() or None
    return None


def save_last_client_id(client_id: str, data_dir: Optional[Path] = None) -> None:
    """Remember the client used for the last created project."""
    client_file = (data_dir or get_data_dir()) / "last_client.txt"
    client_file.write_text(client_id, encoding="utf-8")
