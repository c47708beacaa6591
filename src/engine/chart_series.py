"""Chart-ready series derived from a payment schedule.

Cumulative totals stop accumulating at the payoff record (the first record
whose remaining principal is exactly zero); later points are None so a
renderer hides them.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.models.mortgage import Schedule

ZERO = Decimal("0")


@dataclass
class ChartSeries:
    labels: list[str] = field(default_factory=list)
    cumulative_interest: list[Decimal | None] = field(default_factory=list)
    cumulative_principal: list[Decimal | None] = field(default_factory=list)
    remaining_principal: list[Decimal | None] = field(default_factory=list)
    principal_paid: list[Decimal] = field(default_factory=list)
    interest_paid: list[Decimal] = field(default_factory=list)


@dataclass(frozen=True)
class ScheduleSummary:
    periodic_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    payment_count: int
    final_payment_date: date | None


def build_chart_series(schedule: Schedule) -> ChartSeries:
    series = ChartSeries()
    sum_interest = ZERO
    sum_principal = ZERO
    completed = False

    for record in schedule:
        interest = record.interest_paid or ZERO
        principal = record.principal_paid or ZERO

        series.labels.append(record.payment_date.isoformat())
        series.remaining_principal.append(record.remaining_principal)
        series.interest_paid.append(interest)
        series.principal_paid.append(principal)

        if completed:
            series.cumulative_interest.append(None)
            series.cumulative_principal.append(None)
            continue

        sum_interest += interest
        sum_principal += principal
        series.cumulative_interest.append(sum_interest)
        series.cumulative_principal.append(sum_principal)
        if record.is_paid_off:
            completed = True

    return series


def summarize_schedule(schedule: Schedule) -> ScheduleSummary:
    """Headline numbers for a schedule: payment, totals, payoff date."""
    total_interest = ZERO
    total_principal = ZERO
    payment_count = 0
    final_payment_date = None

    for record in schedule:
        total_interest += record.interest_paid or ZERO
        total_principal += record.principal_paid or ZERO
        if record.principal_paid:
            payment_count += 1
        if final_payment_date is None and record.is_paid_off:
            final_payment_date = record.payment_date

    first = schedule[0] if schedule else None
    periodic = first.total_payment if first is not None and first.total_payment is not None else ZERO

    return ScheduleSummary(
        periodic_payment=periodic,
        total_interest=total_interest,
        total_principal=total_principal,
        payment_count=payment_count,
        final_payment_date=final_payment_date,
    )
