from datetime import date
from decimal import Decimal

import pytest

from src.dashboard.charts import (
    build_schedule_figure,
    format_currency,
    params_from_form,
    schedule_from_store,
    schedule_to_store,
    summary_cards,
)
from src.engine.amortization import InvalidParameters, compute_schedule
from src.engine.chart_series import build_chart_series, summarize_schedule


class TestFormatCurrency:
    def test_positive(self):
        assert format_currency(1234.5) == "$1,234.50"

    def test_decimal(self):
        assert format_currency(Decimal("1403.0249")) == "$1,403.02"

    def test_negative(self):
        assert format_currency(-12) == "-$12.00"

    def test_none(self):
        assert format_currency(None) == ""


class TestParamsFromForm:
    def test_converts_dash_values(self):
        params = params_from_form(300000, 60000.0, 5.25, 25, "bi-weekly", None, "2024-03-15T00:00:00")
        assert params.total_price == Decimal("300000")
        assert params.down_payment == Decimal("60000.0")
        assert params.annual_interest_rate_percent == Decimal("5.25")
        assert params.lump_sum_per_payment == Decimal("0")
        assert params.start_date == date(2024, 3, 15)

    def test_unknown_frequency_rejected_by_engine(self):
        params = params_from_form(300000, 0, 5, 25, "weekly", 0, "2024-01-01")
        with pytest.raises(InvalidParameters):
            compute_schedule(params)


class TestStore:
    def test_merged_schedule_survives_store(self, short_loan_params, zero_rate_params):
        schedule = compute_schedule(short_loan_params, compute_schedule(zero_rate_params))
        rows = schedule_to_store(schedule)
        assert rows[0]["payment_date"] == "2024-01-01"
        assert rows[-1]["remaining_principal"] is None
        assert schedule_from_store(rows) == schedule

    def test_empty_store(self):
        assert schedule_from_store(None) is None
        assert schedule_from_store([]) is None


class TestFigure:
    def test_traces(self, short_loan_params, zero_rate_params):
        schedule = compute_schedule(short_loan_params, compute_schedule(zero_rate_params))
        fig = build_schedule_figure(build_chart_series(schedule))
        names = [t.name for t in fig.data]
        assert names == ["Cumulative Interest Paid", "Cumulative Principal Paid", "Remaining Principal"]
        assert fig.layout.barmode == "stack"

        principal = fig.data[1].y
        assert principal[:4] == (1000.0, 2000.0, 3000.0, 3000.0)
        assert principal[4] is None
        assert fig.data[2].y[4] is None

    def test_summary_cards(self, short_loan_params):
        cards = dict(summary_cards(summarize_schedule(compute_schedule(short_loan_params))))
        assert cards["Payment"] == "$1,000.00"
        assert cards["Payments"] == "3"
        assert cards["Payoff Date"] == "2024-03-31"
