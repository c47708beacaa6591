"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class ScheduleRequest(BaseModel):
    total_price: Decimal = Field(..., gt=0, description="Home price")
    down_payment: Decimal = Field(Decimal("0"), description="Cash down; may not exceed the price")
    annual_interest_rate_percent: Decimal = Field(..., ge=0, description="Annual rate in percent (5 = 5%)")
    term_years: int = Field(25, ge=0)
    frequency: str = Field("monthly", description="monthly | bi-weekly | accelerated-bi-weekly")
    lump_sum_per_payment: Decimal = Field(Decimal("0"), ge=0, description="Extra added to every payment")
    start_date: date
    accelerate: bool = Field(
        False,
        description="Add the accelerated bi-weekly extra (half the monthly payment) to the lump sum",
    )


# ---- Response schemas ----

class PaymentRecordResponse(BaseModel):
    payment_date: date
    remaining_principal: Decimal | None = None
    principal_paid: Decimal | None = None
    interest_paid: Decimal | None = None
    total_payment: Decimal | None = None


class ScheduleSummaryResponse(BaseModel):
    periodic_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal
    payment_count: int
    final_payment_date: date | None = None


class ScheduleResponse(BaseModel):
    summary: ScheduleSummaryResponse
    payments: list[PaymentRecordResponse]


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    total_payments: Decimal
    ending_balance: Decimal
    payment_count: int
