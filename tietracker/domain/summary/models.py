"""Summary domain models.

Pure data structures describing tracked time and the period it is
summarized over. All timestamps are epoch milliseconds.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Summary(BaseModel):
    """Tracked time and billable amount for a period.

    Created fresh for every aggregation and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    milliseconds: int = Field(ge=0)
    billable: Decimal = Field(ge=0)


class TrackedTask(BaseModel):
    """A finished stretch of time tracked against a project."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    project_id: str
    from_: int = Field(alias="from", ge=0)
    to: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "TrackedTask":
        if self.to < self.from_:
            raise ValueError("Tracked task ends before it starts")
        return self

    @property
    def milliseconds(self) -> int:
        return self.to - self.from_


class Period(BaseModel):
    """Half-open time window ``[start, end)``."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @model_validator(mode="after")
    def _check_bounds(self) -> "Period":
        if self.end < self.start:
            raise ValueError("Period ends before it starts")
        return self

    @classmethod
    def current_week(cls, now: datetime | None = None) -> "Period":
        """Monday 00:00 up to the next Monday 00:00, in local time."""
        now = now or datetime.now()
        monday: date = now.date() - timedelta(days=now.weekday())
        next_monday = monday + timedelta(days=7)
        return cls(start=_local_midnight_ms(monday), end=_local_midnight_ms(next_monday))

    def overlap(self, start: int, end: int) -> int:
        """Milliseconds of ``[start, end)`` falling inside this period."""
        return max(0, min(end, self.end) - max(start, self.start))


def _local_midnight_ms(day: date) -> int:
    # astimezone() on a naive datetime interprets it as local time
    return int(datetime.combine(day, time.min).astimezone().timestamp() * 1000)
