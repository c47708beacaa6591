"""Amortization schedule computation.

Pure functions: Decimal in, PaymentRecord list out. No I/O.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from decimal import Decimal

from src.models.mortgage import MortgageParameters, PaymentFrequency, PaymentRecord, Schedule

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Balance left below this after a payment is closed out in that payment
RESIDUAL_TOLERANCE = Decimal("1e-9")

# frequency -> (payments per year, days between payments)
FREQUENCY_TERMS: dict[PaymentFrequency, tuple[int, int]] = {
    PaymentFrequency.MONTHLY: (12, 30),
    PaymentFrequency.BI_WEEKLY: (26, 14),
    PaymentFrequency.ACCELERATED_BI_WEEKLY: (26, 14),
}


class InvalidParameters(ValueError):
    """Mortgage parameters that violate a precondition of the engine."""


@dataclass(frozen=True)
class PeriodicTerms:
    rate: Decimal
    num_payments: int
    interval_days: int


def coerce_frequency(value: PaymentFrequency | str) -> PaymentFrequency:
    if isinstance(value, PaymentFrequency):
        return value
    try:
        return PaymentFrequency(value)
    except ValueError:
        raise InvalidParameters(f"Invalid payment frequency: {value!r}") from None


def periodic_terms(
    frequency: PaymentFrequency | str,
    annual_rate_percent: Decimal,
    term_years: int,
) -> PeriodicTerms:
    """Derive per-period rate, payment count and calendar step from frequency."""
    freq = coerce_frequency(frequency)
    periods_per_year, interval_days = FREQUENCY_TERMS[freq]
    return PeriodicTerms(
        rate=Decimal(annual_rate_percent) / HUNDRED / periods_per_year,
        num_payments=term_years * periods_per_year,
        interval_days=interval_days,
    )


def periodic_payment(principal: Decimal, rate: Decimal, num_payments: int) -> Decimal:
    """Level payment for a fully amortizing loan.

    payment = P * r / (1 - (1 + r)^-n), or P / n when the rate is zero.
    """
    if num_payments <= 0:
        return ZERO
    if rate == 0:
        return principal / num_payments
    return principal * rate / (1 - (1 + rate) ** -num_payments)


def validate_parameters(params: MortgageParameters) -> None:
    if params.down_payment > params.total_price:
        raise InvalidParameters("Down payment cannot be greater than the total price of the home.")
    if params.down_payment < 0:
        raise InvalidParameters("Down payment cannot be negative.")
    coerce_frequency(params.frequency)


def accelerated_extra_payment(params: MortgageParameters) -> Decimal:
    """Extra per bi-weekly payment implied by the accelerated convention.

    Accelerated bi-weekly pays half the monthly payment every two weeks. The
    engine amortizes every bi-weekly schedule the same way, so callers that
    want acceleration add this amount to the lump sum.
    """
    validate_parameters(params)
    rate = Decimal(params.annual_interest_rate_percent)
    monthly = periodic_terms(PaymentFrequency.MONTHLY, rate, params.term_years)
    bi_weekly = periodic_terms(PaymentFrequency.BI_WEEKLY, rate, params.term_years)
    principal = Decimal(params.principal)
    half_monthly = periodic_payment(principal, monthly.rate, monthly.num_payments) / 2
    plain = periodic_payment(principal, bi_weekly.rate, bi_weekly.num_payments)
    return max(half_monthly - plain, ZERO)


def with_acceleration(params: MortgageParameters) -> MortgageParameters:
    """Copy of `params` with the accelerated bi-weekly extra folded into the lump sum.

    Only accelerated bi-weekly loans change; other frequencies come back as is.
    """
    if coerce_frequency(params.frequency) is not PaymentFrequency.ACCELERATED_BI_WEEKLY:
        return params
    extra = accelerated_extra_payment(params)
    return replace(params, lump_sum_per_payment=Decimal(params.lump_sum_per_payment) + extra)


def amortize(params: MortgageParameters) -> Schedule:
    """Generate the payment schedule, terminated by a payoff sentinel.

    The payment that closes the loan is trimmed to principal + interest, so its
    total_payment can be below the regular payment + lump sum.
    """
    validate_parameters(params)
    terms = periodic_terms(params.frequency, params.annual_interest_rate_percent, params.term_years)
    lump_sum = Decimal(params.lump_sum_per_payment)
    remaining = Decimal(params.principal)
    payment = periodic_payment(remaining, terms.rate, terms.num_payments)
    step = timedelta(days=terms.interval_days)
    current: date = params.start_date

    schedule: Schedule = []
    for _ in range(terms.num_payments):
        if remaining <= 0:
            break
        interest = remaining * terms.rate
        principal_paid = payment + lump_sum - interest
        total = payment + lump_sum

        # Final payment adjustment
        if principal_paid > remaining - RESIDUAL_TOLERANCE:
            principal_paid = remaining
            total = principal_paid + interest

        schedule.append(PaymentRecord(
            payment_date=current,
            remaining_principal=max(remaining, ZERO),
            principal_paid=principal_paid,
            interest_paid=interest,
            total_payment=total,
        ))
        remaining -= principal_paid
        current += step

    schedule.append(PaymentRecord(
        payment_date=current,
        remaining_principal=max(remaining, ZERO),
        principal_paid=ZERO,
        interest_paid=ZERO,
        total_payment=ZERO,
    ))

    logger.debug(
        "Amortized %s over %d %s payments: %d scheduled, payment %s",
        params.principal, terms.num_payments, coerce_frequency(params.frequency).value,
        len(schedule) - 1, payment,
    )
    return schedule


def merge_schedules(new: Schedule, existing: Schedule) -> Schedule:
    """Overlay a fresh schedule onto a previously rendered one.

    Positions past the end of `new` keep their old date with every numeric
    field set to None. Returns a new list; `existing` is left untouched.
    """
    merged: Schedule = list(new)
    for record in existing[len(new):]:
        merged.append(PaymentRecord(
            payment_date=record.payment_date,
            remaining_principal=None,
            principal_paid=None,
            interest_paid=None,
            total_payment=None,
        ))
    return merged


def compute_schedule(params: MortgageParameters, existing: Schedule | None = None) -> Schedule:
    """Compute the amortization schedule, merging onto `existing` when given."""
    schedule = amortize(params)
    if existing is None:
        return schedule
    return merge_schedules(schedule, existing)
