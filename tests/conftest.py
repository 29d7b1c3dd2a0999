"""Shared pytest fixtures and test helpers for tietracker tests."""

import asyncio

import pytest

from tietracker.domain.project import Client, Project, ProjectData, Rate
from tietracker.domain.settings import Settings
from tietracker.domain.shared import Err, Ok


class FakeGateway:
    """In-memory ProjectsGateway recording every call.

    ``gates`` maps a project ID (for find) or ``"create"``/``"update"`` to an
    asyncio.Event the call waits on, so tests can control completion order.
    """

    def __init__(self, projects: list[Project] | None = None) -> None:
        self.projects: dict[str, Project] = {p.id: p for p in projects or []}
        self.calls: list[tuple[str, object]] = []
        self.gates: dict[str, asyncio.Event] = {}
        self.fail_with: str | None = None
        self.raise_with: Exception | None = None

    async def _wait(self, key: str | None) -> None:
        gate = self.gates.get(key) if key is not None else None
        if gate is not None:
            await gate.wait()

    def _failure(self):
        if self.raise_with is not None:
            raise self.raise_with
        if self.fail_with is not None:
            return Err(self.fail_with)
        return None

    async def find(self, project_id):
        self.calls.append(("find", project_id))
        await self._wait(project_id)
        if not project_id:
            return Ok(None)
        project = self.projects.get(project_id)
        return Ok(project.model_copy(deep=True) if project else None)

    async def create(self, client, data):
        self.calls.append(("create", data))
        await self._wait("create")
        failure = self._failure()
        if failure is not None:
            return failure
        project = Project(
            id=f"project-{len(self.projects) + 1}",
            client_id=client.id if client else None,
            data=data,
        )
        self.projects[project.id] = project.model_copy(deep=True)
        return Ok(project)

    async def update(self, project):
        self.calls.append(("update", project))
        await self._wait("update")
        failure = self._failure()
        if failure is not None:
            return failure
        self.projects[project.id] = project.model_copy(deep=True)
        return Ok(None)

    def calls_named(self, name: str) -> list[object]:
        return [arg for call, arg in self.calls if call == name]


def make_project(
    project_id: str = "beta",
    name: str = "Beta",
    hourly: float = 20,
    vat_enabled: bool = False,
    from_: int = 1_600_000_000_000,
    client_id: str | None = "client-1",
) -> Project:
    """Helper to build a project with a payload."""
    return Project(
        id=project_id,
        client_id=client_id,
        data=ProjectData(
            name=name,
            from_=from_,
            rate=Rate(hourly=hourly, vat_enabled=vat_enabled),
        ),
    )


@pytest.fixture
def settings():
    """Settings with VAT disabled."""
    return Settings()


@pytest.fixture
def vat_settings():
    """Settings with a 7.7% VAT."""
    return Settings(vat=7.7)


@pytest.fixture
def client():
    return Client(id="client-1", name="Acme Corp")


@pytest.fixture
def gateway():
    return FakeGateway([make_project()])


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the data directory at a temporary folder."""
    monkeypatch.setenv("TIETRACKER_HOME", str(tmp_path))
    monkeypatch.delenv("TIETRACKER_CLIENT", raising=False)
    return tmp_path
