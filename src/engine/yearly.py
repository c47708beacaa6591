"""Aggregate a payment schedule by calendar year."""

from dataclasses import dataclass
from decimal import Decimal

from src.models.mortgage import Schedule


@dataclass(frozen=True)
class YearlySummary:
    year: int
    principal: Decimal
    interest: Decimal
    total_payments: Decimal
    ending_balance: Decimal
    payment_count: int


def yearly_summary(schedule: Schedule) -> list[YearlySummary]:
    """Roll real payments up by the calendar year they fall in.

    Unknown (merged) records and the payoff sentinel carry no payment and are
    skipped. Ending balance is the balance after the year's last payment.
    """
    yearly: list[YearlySummary] = []
    year = None
    principal = interest = total = Decimal("0")
    ending_balance = Decimal("0")
    count = 0

    for p in schedule:
        if p.is_unknown or not p.principal_paid:
            continue

        if year is not None and p.payment_date.year != year:
            yearly.append(YearlySummary(year, principal, interest, total, ending_balance, count))
            principal = interest = total = Decimal("0")
            count = 0

        year = p.payment_date.year
        principal += p.principal_paid
        interest += p.interest_paid
        total += p.total_payment
        ending_balance = p.remaining_principal - p.principal_paid
        count += 1

    if year is not None:
        yearly.append(YearlySummary(year, principal, interest, total, ending_balance, count))

    return yearly
