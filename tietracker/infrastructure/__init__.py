"""Infrastructure layer for tietracker.

Wraps file I/O behind Result-returning repositories and the async
project gateway.

Exports:
    - JsonStorage: Low-level JSON file I/O
    - ProjectRepository: Project record persistence
    - TaskRepository: Tracked task persistence
    - ProjectsGateway: Async contract used by the project form
    - JsonProjectsGateway: ProjectsGateway over ProjectRepository
"""

from tietracker.infrastructure.storage import (
    JsonProjectsGateway,
    JsonStorage,
    ProjectRepository,
    ProjectsGateway,
    TaskRepository,
)

__all__ = [
    "JsonStorage",
    "JsonProjectsGateway",
    "ProjectRepository",
    "ProjectsGateway",
    "TaskRepository",
]
