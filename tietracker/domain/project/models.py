"""Project domain models.

Pure data structures for clients, rates and projects. No I/O.
"""

from pydantic import BaseModel, ConfigDict, Field

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 32


class Client(BaseModel):
    """A client that projects are billed to.

    Projects only keep the client's ID; the client itself is managed
    elsewhere.
    """

    id: str
    name: str | None = None


class Rate(BaseModel):
    """Hourly rate of a project.

    The VAT percentage is not stored here: ``vat_enabled`` only says whether
    the process-wide VAT setting applies to this project.
    """

    hourly: float = Field(ge=0, description="Amount billed per hour")
    vat_enabled: bool = False


class ProjectData(BaseModel):
    """The persisted business fields of a project.

    ``from_`` is the creation time in epoch milliseconds. It is serialized
    as ``"from"`` and never changes once the project exists.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    from_: int = Field(alias="from", ge=0)
    rate: Rate


class Project(BaseModel):
    """A project record: identity plus an optional payload.

    A project without ``data`` has been allocated but never saved.
    """

    id: str
    client_id: str | None = None
    data: ProjectData | None = None
