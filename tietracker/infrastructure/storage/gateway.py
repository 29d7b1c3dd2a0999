"""Async persistence gateway for project records.

``ProjectsGateway`` is the contract the project form controller talks to.
``JsonProjectsGateway`` implements it on top of :class:`ProjectRepository`,
running the blocking file I/O in a worker thread.
"""

import asyncio
import logging
from typing import Protocol
from uuid import uuid4

from tietracker.domain.project.models import Client, Project, ProjectData
from tietracker.domain.shared.result import Err, Ok, Result
from tietracker.infrastructure.storage.repositories import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectsGateway(Protocol):
    """Async find/create/update of project records.

    Expected failures are returned as ``Err``; "not found" is ``Ok(None)``.
    """

    async def find(self, project_id: str | None) -> Result[Project | None, str]: ...

    async def create(self, client: Client | None, data: ProjectData) -> Result[Project, str]: ...

    async def update(self, project: Project) -> Result[None, str]: ...


class JsonProjectsGateway:
    """ProjectsGateway backed by JSON files."""

    def __init__(self, repository: ProjectRepository | None = None) -> None:
        self._repository = repository or ProjectRepository()

    async def find(self, project_id: str | None) -> Result[Project | None, str]:
        """Load a project, ``Ok(None)`` if the ID is empty or unknown."""
        if not project_id:
            return Ok(None)
        return await asyncio.to_thread(self._repository.get, project_id)

    async def create(self, client: Client | None, data: ProjectData) -> Result[Project, str]:
        """Persist a new project and assign its identity.

        Args:
            client: Client the project belongs to. Required.
            data: The project payload.

        Returns:
            Ok(Project) with the new ID, or Err(str) if it could not be saved.
        """
        if client is None:
            return Err("A client is required to create a project")

        project = Project(id=uuid4().hex, client_id=client.id, data=data)

        result = await asyncio.to_thread(self._repository.save, project)
        if isinstance(result, Err):
            return result

        logger.info(f"Created project {project.id} ({data.name}) for client {client.id}")
        return Ok(project)

    async def update(self, project: Project) -> Result[None, str]:
        """Overwrite an existing project.

        Returns:
            Ok(None), or Err(str) if the project lacks an ID or payload,
            does not exist, or could not be saved.
        """
        if not project.id:
            return Err("Cannot update a project without an ID")
        if project.data is None:
            return Err(f"Cannot update project {project.id} without data")

        exists = await asyncio.to_thread(self._repository.exists, project.id)
        if not exists:
            return Err(f"Project not found: {project.id}")

        result = await asyncio.to_thread(self._repository.save, project)
        if isinstance(result, Ok):
            logger.info(f"Updated project {project.id} ({project.data.name})")
        return result
