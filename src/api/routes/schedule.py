"""Schedule routes — amortization engine over HTTP."""

import logging

from fastapi import APIRouter, HTTPException

from src.api.schemas import (
    ScheduleRequest,
    ScheduleResponse,
    ScheduleSummaryResponse,
    PaymentRecordResponse,
    YearlySummaryResponse,
)
from src.engine.amortization import (
    InvalidParameters,
    coerce_frequency,
    compute_schedule,
    with_acceleration,
)
from src.engine.chart_series import summarize_schedule
from src.engine.yearly import yearly_summary
from src.models.mortgage import MortgageParameters, Schedule

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["schedule"])


def _build_params(req: ScheduleRequest) -> MortgageParameters:
    """Build engine parameters from request data."""
    params = MortgageParameters(
        total_price=req.total_price,
        down_payment=req.down_payment,
        annual_interest_rate_percent=req.annual_interest_rate_percent,
        term_years=req.term_years,
        frequency=coerce_frequency(req.frequency),
        lump_sum_per_payment=req.lump_sum_per_payment,
        start_date=req.start_date,
    )
    return with_acceleration(params) if req.accelerate else params


def _run(req: ScheduleRequest) -> Schedule:
    try:
        return compute_schedule(_build_params(req))
    except InvalidParameters as e:
        logger.warning("Rejected schedule request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(req: ScheduleRequest):
    """Full payment schedule plus headline summary."""
    payments = _run(req)
    s = summarize_schedule(payments)
    return ScheduleResponse(
        summary=ScheduleSummaryResponse(
            periodic_payment=s.periodic_payment,
            total_interest=s.total_interest,
            total_principal=s.total_principal,
            payment_count=s.payment_count,
            final_payment_date=s.final_payment_date,
        ),
        payments=[
            PaymentRecordResponse(
                payment_date=p.payment_date,
                remaining_principal=p.remaining_principal,
                principal_paid=p.principal_paid,
                interest_paid=p.interest_paid,
                total_payment=p.total_payment,
            )
            for p in payments
        ],
    )


@router.post("/schedule/yearly", response_model=list[YearlySummaryResponse])
async def schedule_yearly(req: ScheduleRequest):
    payments = _run(req)
    return [
        YearlySummaryResponse(
            year=y.year,
            principal=y.principal,
            interest=y.interest,
            total_payments=y.total_payments,
            ending_balance=y.ending_balance,
            payment_count=y.payment_count,
        )
        for y in yearly_summary(payments)
    ]
