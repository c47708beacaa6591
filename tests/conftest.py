"""Canonical test fixtures used across engine, API and dashboard tests.

Fixture: $300K home, $60K down, 5% rate, 25yr monthly, first payment 2024-01-01.
"""

import pytest
from datetime import date
from decimal import Decimal

from src.models.mortgage import MortgageParameters, PaymentFrequency


@pytest.fixture
def canonical_params() -> MortgageParameters:
    """$240K loan, standard 25-year monthly mortgage."""
    return MortgageParameters(
        total_price=Decimal("300000"),
        down_payment=Decimal("60000"),
        annual_interest_rate_percent=Decimal("5"),
        term_years=25,
        frequency=PaymentFrequency.MONTHLY,
        lump_sum_per_payment=Decimal("0"),
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def zero_rate_params() -> MortgageParameters:
    """$120K interest-free loan over 10 years: exactly $1,000/month."""
    return MortgageParameters(
        total_price=Decimal("120000"),
        down_payment=Decimal("0"),
        annual_interest_rate_percent=Decimal("0"),
        term_years=10,
        frequency=PaymentFrequency.MONTHLY,
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def short_loan_params() -> MortgageParameters:
    """$3K interest-free loan, $250 + $750 lump sum: paid off in 3 payments."""
    return MortgageParameters(
        total_price=Decimal("3000"),
        down_payment=Decimal("0"),
        annual_interest_rate_percent=Decimal("0"),
        term_years=1,
        frequency=PaymentFrequency.MONTHLY,
        lump_sum_per_payment=Decimal("750"),
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def api_payload() -> dict:
    """JSON body for the canonical mortgage."""
    return {
        "total_price": 300000,
        "down_payment": 60000,
        "annual_interest_rate_percent": 5,
        "term_years": 25,
        "frequency": "monthly",
        "lump_sum_per_payment": 0,
        "start_date": "2024-01-01",
    }
