from dataclasses import replace
from datetime import date, timedelta
from decimal import Decimal

from src.engine.amortization import compute_schedule
from src.engine.chart_series import build_chart_series, summarize_schedule
from src.models.mortgage import PaymentRecord


def _longer_existing(length: int) -> list[PaymentRecord]:
    return [
        PaymentRecord(date(2024, 1, 1) + timedelta(days=30 * i), Decimal("1"), Decimal("1"), Decimal("1"), Decimal("2"))
        for i in range(length)
    ]


class TestBuildChartSeries:
    def test_cumulative_totals(self, short_loan_params):
        series = build_chart_series(compute_schedule(short_loan_params))
        assert series.labels == ["2024-01-01", "2024-01-31", "2024-03-01", "2024-03-31"]
        assert series.cumulative_principal == [Decimal("1000"), Decimal("2000"), Decimal("3000"), Decimal("3000")]
        assert series.cumulative_interest == [0, 0, 0, 0]
        assert series.remaining_principal == [Decimal("3000"), Decimal("2000"), Decimal("1000"), Decimal("0")]

    def test_accumulation_stops_after_payoff(self, short_loan_params):
        schedule = compute_schedule(short_loan_params, _longer_existing(6))
        series = build_chart_series(schedule)
        assert len(series.labels) == 6
        assert series.cumulative_principal[3] == Decimal("3000")
        assert series.cumulative_principal[4:] == [None, None]
        assert series.cumulative_interest[4:] == [None, None]
        # Unknown records have no balance and contribute zero per-payment amounts
        assert series.remaining_principal[4:] == [None, None]
        assert series.principal_paid[4:] == [0, 0]

    def test_interest_accumulates(self, canonical_params):
        schedule = compute_schedule(canonical_params)
        series = build_chart_series(schedule)
        assert series.cumulative_interest[1] == schedule[0].interest_paid + schedule[1].interest_paid
        assert series.cumulative_principal[-1] == sum(p.principal_paid for p in schedule)


class TestSummarizeSchedule:
    def test_short_loan(self, short_loan_params):
        summary = summarize_schedule(compute_schedule(short_loan_params))
        assert summary.periodic_payment == Decimal("1000")
        assert summary.total_principal == Decimal("3000")
        assert summary.total_interest == 0
        assert summary.payment_count == 3
        assert summary.final_payment_date == date(2024, 3, 31)

    def test_merged_schedule_ignores_unknowns(self, short_loan_params):
        summary = summarize_schedule(compute_schedule(short_loan_params, _longer_existing(8)))
        assert summary.payment_count == 3
        assert summary.total_principal == Decimal("3000")

    def test_total_interest(self, canonical_params):
        schedule = compute_schedule(canonical_params)
        summary = summarize_schedule(schedule)
        # 300 payments of ~1403.02 less the 240K borrowed
        expected = summary.periodic_payment * 300 - Decimal("240000")
        assert abs(summary.total_interest - expected) < Decimal("0.01")
        assert summary.payment_count == 300

    def test_not_paid_off(self, canonical_params):
        summary = summarize_schedule(compute_schedule(replace(canonical_params, term_years=0)))
        assert summary.final_payment_date is None
        assert summary.payment_count == 0
        assert summary.periodic_payment == 0

    def test_empty(self):
        summary = summarize_schedule([])
        assert summary.payment_count == 0
        assert summary.final_payment_date is None
