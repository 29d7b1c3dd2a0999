"""JSON file storage with Result-based error handling.

A thin wrapper around reading and writing JSON documents that returns
Result types instead of raising.
"""

import json
from pathlib import Path
from typing import Any

from tietracker.domain.shared.result import Err, Ok, Result


class JsonStorage:
    """Low-level JSON file I/O.

    Contains no domain logic. Repositories build on it to persist
    projects, tracked tasks and settings.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("settings.json"))
        if isinstance(result, Ok):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Load a JSON object from a file.

        Args:
            path: File to read.

        Returns:
            Ok(dict) on success, Err(str) describing the failure otherwise.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")

            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                return Err(f"Expected a JSON object in {path}")
            return Ok(data)

        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> Result[None, str]:
        """Write a JSON object to a file, creating parent directories.

        The document is written to a temporary sibling first and then
        renamed over the target, so readers never see a half-written file.

        Args:
            path: File to write.
            data: JSON-serializable dictionary.
            indent: Indentation level (default 2).

        Returns:
            Ok(None) on success, Err(str) describing the failure otherwise.
        """
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            content = json.dumps(data, indent=indent)
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(path)
            return Ok(None)

        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")
        except PermissionError:
            tmp_path.unlink(missing_ok=True)
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            return Err(f"Error writing {path}: {e}")
