"""Mortgage input and schedule data types."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class PaymentFrequency(Enum):
    MONTHLY = "monthly"
    BI_WEEKLY = "bi-weekly"
    ACCELERATED_BI_WEEKLY = "accelerated-bi-weekly"


@dataclass(frozen=True)
class MortgageParameters:
    total_price: Decimal
    down_payment: Decimal = Decimal("0")
    annual_interest_rate_percent: Decimal = Decimal("5")  # 5 means 5%
    term_years: int = 25
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY
    lump_sum_per_payment: Decimal = Decimal("0")  # Added to every payment
    start_date: date = date(2024, 1, 1)

    @property
    def principal(self) -> Decimal:
        return self.total_price - self.down_payment


@dataclass(frozen=True)
class PaymentRecord:
    """One row of a schedule.

    Numeric fields are None only for merged positions that fall past the end
    of the active projection.
    """
    payment_date: date
    remaining_principal: Decimal | None
    principal_paid: Decimal | None
    interest_paid: Decimal | None
    total_payment: Decimal | None

    @property
    def is_unknown(self) -> bool:
        return self.remaining_principal is None

    @property
    def is_paid_off(self) -> bool:
        return self.remaining_principal is not None and self.remaining_principal == 0


Schedule = list[PaymentRecord]
