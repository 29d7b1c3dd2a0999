"""Storage infrastructure for tietracker.

JSON persistence for projects and tracked tasks, with Result-based
error handling, and the async project gateway built on top.
"""

from tietracker.infrastructure.storage.gateway import JsonProjectsGateway, ProjectsGateway
from tietracker.infrastructure.storage.json_storage import JsonStorage
from tietracker.infrastructure.storage.repositories import (
    ProjectRepository,
    TaskRepository,
)

__all__ = [
    "JsonStorage",
    "JsonProjectsGateway",
    "ProjectRepository",
    "ProjectsGateway",
    "TaskRepository",
]
