"""Project form controller.

Drives one create-or-edit session of a project form:

    LOADING -> READY -> SUBMITTING -> CLOSED      (saved)
                 ^           |
                 +-----------+                    (save failed, retry allowed)

Every call to :meth:`ProjectFormController.initialize` opens a new session.
Gateway calls remember the session they were started in and their results
are dropped if the session has been replaced or closed in the meantime, so
a slow load can never overwrite the draft of a newer session.

Example usage:
    >>> controller = ProjectFormController(gateway, settings, client=client)
    >>> await controller.initialize(SessionMode.CREATE)
    >>> controller.edit_name("Acme")
    >>> controller.edit_rate(parse_rate("50"))
    >>> if controller.valid:
    ...     await controller.submit()
    >>> await controller.wait_outcome()
    <FormOutcome.COMMITTED: 'committed'>
"""

import asyncio
import logging
import math
import time
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from tietracker.domain.project import (
    NAME_MAX_LENGTH,
    Client,
    Project,
    ProjectCreated,
    ProjectData,
    ProjectUpdated,
    Rate,
    validate_draft,
)
from tietracker.domain.settings import Settings
from tietracker.domain.shared import DomainEvent, Err, Ok, Result
from tietracker.infrastructure.storage.gateway import ProjectsGateway

logger = logging.getLogger(__name__)


class SessionMode(str, Enum):
    """What a form session does with the draft on submit."""

    CREATE = "create"
    UPDATE = "update"


class FormState(str, Enum):
    """Lifecycle state of a form session."""

    LOADING = "loading"
    READY = "ready"
    SUBMITTING = "submitting"
    CLOSED = "closed"


class FormOutcome(str, Enum):
    """How a form session ended."""

    COMMITTED = "committed"
    CANCELLED = "cancelled"


class Draft(BaseModel):
    """Unsaved form values.

    Immutable: each edit produces a new Draft.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    hourly_rate: float | None = None
    vat_enabled: bool = False

    @classmethod
    def from_project(cls, project: Project | None) -> "Draft":
        """Draft prefilled from a loaded project, blank if there is no payload."""
        if project is None or project.data is None:
            return cls()
        return cls(
            name=project.data.name,
            hourly_rate=project.data.rate.hourly,
            vat_enabled=project.data.rate.vat_enabled,
        )


class VatDisplay(BaseModel):
    """What the form shows for the VAT checkbox."""

    model_config = ConfigDict(frozen=True)

    percent: float
    label: str
    checked: bool


class Theme(BaseModel):
    """Colors the host UI passes through. Not interpreted by the controller."""

    model_config = ConfigDict(frozen=True)

    color: str | None = None
    color_contrast: str | None = None


def parse_rate(text: str | None) -> float | None:
    """Parse a user-entered hourly rate.

    Blank or non-numeric input yields None, which the validation policy
    treats as missing.
    """
    if text is None or not text.strip():
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


class ProjectFormController:
    """Loads, edits, validates and saves one project per session.

    The controller owns its draft exclusively. It talks to persistence only
    through the injected gateway and reads the VAT percentage from the
    injected settings. At most one gateway call is in flight at any time;
    the LOADING and SUBMITTING states double as guards against re-entry.

    Attributes:
        client: Client new projects are created for.
        theme: Opaque colors for the host UI.
        events: Domain events recorded for committed submits.
    """

    def __init__(
        self,
        gateway: ProjectsGateway,
        settings: Settings,
        client: Client | None = None,
        theme: Theme | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._gateway = gateway
        self._settings = settings
        self._clock = clock
        self.client = client
        self.theme = theme or Theme()
        self.events: list[DomainEvent] = []

        self._session = 0
        self._mode: SessionMode | None = None
        self._state = FormState.LOADING
        self._project: Project | None = None
        self._draft = Draft()
        self._valid = False
        self._error: str | None = None
        self._outcome: asyncio.Future[FormOutcome] | None = None

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def mode(self) -> SessionMode | None:
        return self._mode

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state is FormState.LOADING

    @property
    def saving(self) -> bool:
        return self._state is FormState.SUBMITTING

    @property
    def valid(self) -> bool:
        return self._valid

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def project(self) -> Project | None:
        """The project loaded for this session, or the one just created."""
        return self._project

    @property
    def error(self) -> str | None:
        """Message of the last failed gateway call in this session."""
        return self._error

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def title(self) -> str:
        return self._draft.name or ""

    @property
    def can_submit(self) -> bool:
        return self._state is FormState.READY and self._valid

    @property
    def vat_display(self) -> VatDisplay | None:
        """VAT checkbox data, or None when VAT is disabled in settings."""
        if not self._settings.vat_enabled:
            return None
        percent = self._settings.vat or 0.0
        return VatDisplay(
            percent=percent,
            label=f"{percent:g}%",
            checked=self._draft.vat_enabled,
        )

    @property
    def outcome(self) -> "asyncio.Future[FormOutcome] | None":
        """Future resolving when the current session commits or is cancelled."""
        return self._outcome

    async def wait_outcome(self) -> FormOutcome:
        """Wait until the current session ends."""
        if self._outcome is None:
            return FormOutcome.CANCELLED
        return await self._outcome

    # =========================================================================
    # Session lifecycle
    # =========================================================================

    async def initialize(self, mode: SessionMode, project_id: str | None = None) -> None:
        """Start a new session and load its draft.

        In UPDATE mode the project is looked up through the gateway. A
        project that does not exist, or has no payload, gives a blank draft.
        A failed lookup is reported and also gives a blank draft.

        Args:
            mode: Whether submit creates a new project or updates one.
            project_id: Project to edit in UPDATE mode.
        """
        self._resolve_outcome(FormOutcome.CANCELLED)

        self._session += 1
        session = self._session

        self._outcome = asyncio.get_running_loop().create_future()
        self._mode = mode
        self._state = FormState.LOADING
        self._project = None
        self._draft = Draft()
        self._valid = False
        self._error = None

        project: Project | None = None

        if mode is SessionMode.UPDATE:
            result = await self._call_gateway("Loading project", self._gateway.find(project_id))

            if session != self._session:
                logger.debug(f"Discarding load of project {project_id} for a closed session")
                return

            if isinstance(result, Err):
                self._error = result.error
            else:
                project = result.value
                if project is None:
                    logger.info(f"Project {project_id} not found, starting with a blank draft")

        self._project = project
        self._set_draft(Draft.from_project(project))
        self._state = FormState.READY

    def cancel(self) -> None:
        """Close the session on user request."""
        self._resolve_outcome(FormOutcome.CANCELLED)
        self.close()

    def close(self) -> None:
        """Tear the session down.

        Results of gateway calls still in flight are ignored from now on.
        """
        self._session += 1
        self._state = FormState.CLOSED
        self._resolve_outcome(FormOutcome.CANCELLED)

    # =========================================================================
    # Draft edits
    # =========================================================================

    def edit_name(self, value: str | None) -> bool:
        """Set the draft name, clipped to the maximum name length.

        Returns:
            True if the edit was applied (session ready), False otherwise.
        """
        if value is not None:
            value = value[:NAME_MAX_LENGTH]
        return self._edit(name=value)

    def edit_rate(self, value: float | None) -> bool:
        """Set the draft hourly rate."""
        return self._edit(hourly_rate=value)

    def toggle_vat(self, checked: bool) -> bool:
        """Set the draft VAT flag. Ignored when VAT is disabled in settings."""
        if not self._settings.vat_enabled:
            return False
        return self._edit(vat_enabled=checked)

    def _edit(self, **changes: object) -> bool:
        if self._state is not FormState.READY:
            logger.debug(f"Ignoring edit while {self._state.value}")
            return False
        self._set_draft(self._draft.model_copy(update=changes))
        return True

    def _set_draft(self, draft: Draft) -> None:
        self._draft = draft
        self._valid = validate_draft(draft)

    # =========================================================================
    # Submit
    # =========================================================================

    async def submit(self) -> bool:
        """Persist the draft.

        Does nothing when there is no mode, when an UPDATE session never
        loaded a payload, when the session is not READY (loading, already
        submitting or closed) or when the draft is invalid.

        Returns:
            True if the project was saved and the session committed,
            False otherwise. On a failed save ``error`` holds the reason and
            the session is READY again with the draft unchanged.
        """
        if self._mode is None:
            return False
        if self._mode is SessionMode.UPDATE and (self._project is None or self._project.data is None):
            return False
        if self._state is not FormState.READY:
            logger.debug(f"Ignoring submit while {self._state.value}")
            return False
        if not validate_draft(self._draft):
            logger.warning("Refusing to save an invalid project draft")
            return False

        session = self._session
        self._state = FormState.SUBMITTING
        self._error = None

        try:
            if self._mode is SessionMode.CREATE:
                result = await self._create(self._draft)
            else:
                result = await self._update(self._draft)
        finally:
            if session == self._session:
                self._state = FormState.READY

        if session != self._session:
            logger.debug("Discarding save result for a closed session")
            return False

        if isinstance(result, Err):
            self._error = result.error
            return False

        self.events.append(result.value)
        self._state = FormState.CLOSED
        self._resolve_outcome(FormOutcome.COMMITTED)
        return True

    async def _create(self, draft: Draft) -> Result[DomainEvent, str]:
        try:
            data = ProjectData(
                name=draft.name,
                from_=self._clock(),
                rate=Rate(hourly=draft.hourly_rate, vat_enabled=draft.vat_enabled),
            )
        except ValueError as e:
            logger.error(f"Cannot build project from draft: {e}")
            return Err(str(e))

        result = await self._call_gateway("Creating project", self._gateway.create(self.client, data))
        if isinstance(result, Err):
            return result

        self._project = result.value
        return Ok(ProjectCreated(
            project_id=result.value.id,
            name=data.name,
            client_id=result.value.client_id,
        ))

    async def _update(self, draft: Draft) -> Result[DomainEvent, str]:
        loaded = self._project
        if loaded is None or loaded.data is None:
            return Err("No project loaded to update")

        # Copies only: the loaded project stays untouched until the save succeeds
        rate = loaded.data.rate.model_copy(
            update={"hourly": draft.hourly_rate, "vat_enabled": draft.vat_enabled}
        )
        data = loaded.data.model_copy(update={"name": draft.name, "rate": rate})
        project = loaded.model_copy(update={"data": data})

        result = await self._call_gateway("Updating project", self._gateway.update(project))
        if isinstance(result, Err):
            return result

        self._project = project
        return Ok(ProjectUpdated(
            project_id=project.id,
            name=data.name,
            hourly=rate.hourly,
            vat_enabled=rate.vat_enabled,
        ))

    # =========================================================================
    # Helpers
    # =========================================================================

    async def _call_gateway(self, action: str, call) -> Result:
        """Await a gateway call, turning exceptions into Err."""
        try:
            result = await call
        except Exception as e:
            logger.exception(f"{action} failed")
            return Err(f"{action} failed: {e}")

        if isinstance(result, Err):
            logger.error(f"{action} failed: {result.error}")
        return result

    def _resolve_outcome(self, outcome: FormOutcome) -> None:
        if self._outcome is not None and not self._outcome.done():
            self._outcome.set_result(outcome)


__all__ = [
    "Draft",
    "FormOutcome",
    "FormState",
    "ProjectFormController",
    "SessionMode",
    "Theme",
    "VatDisplay",
    "now_ms",
    "parse_rate",
]
