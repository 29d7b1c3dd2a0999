"""Repository implementations for projects and tracked tasks.

Blocking, file-based persistence returning Result types. The async
gateway in ``gateway.py`` runs these off the event loop.

Layout under the data directory:

    projects/<project id>.json   one file per project
    tasks.json                   all tracked tasks
"""

import logging
import re
from pathlib import Path

from pydantic import ValidationError

from tietracker.domain.project.models import Project
from tietracker.domain.shared.result import Err, Ok, Result
from tietracker.domain.summary.models import TrackedTask
from tietracker.global_config import get_data_dir
from tietracker.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)

# Project IDs become file names; no separators or dots allowed
_PROJECT_ID = re.compile(r"[A-Za-z0-9_-]+")


def is_valid_project_id(project_id: str) -> bool:
    return bool(project_id) and _PROJECT_ID.fullmatch(project_id) is not None


class ProjectRepository:
    """Repository for project records."""

    def __init__(self, root: Path | None = None, storage: JsonStorage | None = None) -> None:
        """Initialize the repository.

        Args:
            root: Data directory. Defaults to the configured data directory.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self._root = root or get_data_dir()
        self._storage = storage or JsonStorage()

    @property
    def projects_dir(self) -> Path:
        return self._root / "projects"

    def _project_file(self, project_id: str) -> Path:
        return self.projects_dir / f"{project_id}.json"

    def list_all(self) -> Result[list[Project], str]:
        """List all projects.

        Unreadable project files are logged and skipped.

        Returns:
            Ok(list[Project]) sorted by name,
            Err(str) if the projects directory cannot be read.
        """
        try:
            self.projects_dir.mkdir(parents=True, exist_ok=True)
            projects: list[Project] = []

            for project_file in sorted(self.projects_dir.glob("*.json")):
                result = self._storage.load_json(project_file)
                if isinstance(result, Err):
                    logger.warning(result.error)
                    continue
                try:
                    projects.append(Project.model_validate(result.value))
                except ValidationError as e:
                    logger.warning(f"Skipping invalid project file {project_file}: {e}")

            projects.sort(key=lambda p: p.data.name.lower() if p.data else "")
            return Ok(projects)

        except PermissionError:
            return Err(f"Permission denied accessing {self.projects_dir}")
        except OSError as e:
            return Err(f"Error listing projects: {e}")

    def get(self, project_id: str) -> Result[Project | None, str]:
        """Get a project by ID.

        Args:
            project_id: ID of the project to retrieve.

        Returns:
            Ok(Project) if found, Ok(None) if there is no such project,
            Err(str) if the ID is malformed or the file cannot be read.
        """
        if not is_valid_project_id(project_id):
            return Err(f"Invalid project ID: {project_id!r}")

        project_file = self._project_file(project_id)
        if not project_file.exists():
            return Ok(None)

        result = self._storage.load_json(project_file)
        if isinstance(result, Err):
            return result

        try:
            return Ok(Project.model_validate(result.value))
        except ValidationError as e:
            return Err(f"Invalid project data for {project_id}: {e}")

    def save(self, project: Project) -> Result[None, str]:
        """Save a project record.

        Args:
            project: Project to persist.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        if not is_valid_project_id(project.id):
            return Err(f"Invalid project ID: {project.id!r}")

        return self._storage.save_json(
            self._project_file(project.id),
            project.model_dump(by_alias=True),
        )

    def exists(self, project_id: str) -> bool:
        """Check if a project record exists. Malformed IDs never exist."""
        if not is_valid_project_id(project_id):
            return False
        return self._project_file(project_id).exists()


class TaskRepository:
    """Repository for tracked tasks."""

    def __init__(self, root: Path | None = None, storage: JsonStorage | None = None) -> None:
        self._root = root or get_data_dir()
        self._storage = storage or JsonStorage()

    @property
    def tasks_file(self) -> Path:
        return self._root / "tasks.json"

    def load_all(self) -> Result[list[TrackedTask], str]:
        """Load all tracked tasks.

        Returns:
            Ok(list[TrackedTask]). A missing file means no tasks yet.
            Err(str) if the file exists but is invalid.
        """
        if not self.tasks_file.exists():
            # Nothing tracked yet - not an error
            return Ok([])

        result = self._storage.load_json(self.tasks_file)
        if isinstance(result, Err):
            return result

        try:
            tasks = [TrackedTask.model_validate(item) for item in result.value.get("tasks", [])]
            return Ok(tasks)
        except ValidationError as e:
            return Err(f"Invalid tracked task data: {e}")

    def add(self, task: TrackedTask) -> Result[None, str]:
        """Append a tracked task.

        Args:
            task: The finished task to store.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        loaded = self.load_all()
        if isinstance(loaded, Err):
            return loaded

        tasks = [*loaded.value, task]
        return self._storage.save_json(
            self.tasks_file,
            {"tasks": [t.model_dump(by_alias=True) for t in tasks]},
        )
