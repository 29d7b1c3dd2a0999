"""Summary aggregation.

Turns tracked tasks into a period Summary. Pure functions, no I/O.

Billable amounts are computed with Decimal and rounded half-up to cents
once, after summing, so that many short tasks don't accumulate rounding
errors.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from tietracker.domain.project.models import Project, Rate
from tietracker.domain.settings.models import Settings
from tietracker.domain.summary.models import Period, Summary, TrackedTask

MS_PER_HOUR = Decimal(3_600_000)
CENTS = Decimal("0.01")


def billable_amount(milliseconds: int, rate: Rate, settings: Settings) -> Decimal:
    """Unrounded amount owed for ``milliseconds`` at ``rate``.

    VAT is added when the project opts in and a VAT percentage is
    configured. The percentage is always read from the current settings.
    """
    amount = Decimal(milliseconds) / MS_PER_HOUR * Decimal(str(rate.hourly))
    if rate.vat_enabled and settings.vat_enabled:
        amount *= 1 + Decimal(str(settings.vat)) / 100
    return amount


def compute_summary(
    tasks: Iterable[TrackedTask],
    projects: Iterable[Project],
    settings: Settings,
    period: Period,
) -> Summary:
    """Aggregate tracked tasks falling inside ``period``.

    Tasks straddling the period boundary only count with their overlap.
    Time tracked against a project that is unknown or has no payload counts
    toward the total duration but is not billable.

    Args:
        tasks: Tracked tasks, in any order.
        projects: Projects the tasks may refer to.
        settings: Current settings (VAT percentage).
        period: Window to aggregate over.

    Returns:
        Summary with total milliseconds and the billable amount in cents.
    """
    rates = {p.id: p.data.rate for p in projects if p.data is not None}

    total_ms = 0
    billable = Decimal(0)

    for task in tasks:
        ms = period.overlap(task.from_, task.to)
        if ms <= 0:
            continue

        total_ms += ms

        rate = rates.get(task.project_id)
        if rate is None:
            continue
        billable += billable_amount(ms, rate, settings)

    return Summary(
        milliseconds=total_ms,
        billable=billable.quantize(CENTS, rounding=ROUND_HALF_UP),
    )
