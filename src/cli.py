"""CLI for printing an amortization schedule.

Usage:
    python -m src.cli --price 300000 --down 60000 --rate 5 --term 25
    python -m src.cli --price 300000 --rate 5 --frequency bi-weekly --lump-sum 100 --yearly
    python -m src.cli --price 300000 --rate 5 --frequency accelerated-bi-weekly --accelerate
"""

import argparse
import sys
from datetime import date
from decimal import Decimal

from src.config import configure_logging, settings
from src.engine.amortization import InvalidParameters, compute_schedule, with_acceleration
from src.engine.chart_series import summarize_schedule
from src.engine.yearly import yearly_summary
from src.models.mortgage import MortgageParameters, PaymentFrequency


def print_summary(params: MortgageParameters, summary) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Mortgage: ${params.principal:,.2f} over {params.term_years} years")
    print(f"{'=' * 60}")
    print(f"  Frequency:        {params.frequency.value}")
    print(f"  Payment:          ${summary.periodic_payment:,.2f}")
    print(f"  Payments:         {summary.payment_count}")
    print(f"  Total interest:   ${summary.total_interest:,.2f}")
    payoff = summary.final_payment_date.isoformat() if summary.final_payment_date else "not paid off"
    print(f"  Payoff date:      {payoff}")
    print()


def print_schedule(schedule) -> None:
    print(f"  {'Date':<12}{'Balance':>16}{'Principal':>14}{'Interest':>12}{'Payment':>12}")
    for p in schedule:
        print(
            f"  {p.payment_date.isoformat():<12}{p.remaining_principal:>16,.2f}"
            f"{p.principal_paid:>14,.2f}{p.interest_paid:>12,.2f}{p.total_payment:>12,.2f}"
        )
    print()


def print_yearly(rows) -> None:
    print(f"  {'Year':<8}{'Principal':>14}{'Interest':>14}{'Paid':>14}{'End Balance':>16}")
    for y in rows:
        print(
            f"  {y.year:<8}{y.principal:>14,.2f}{y.interest:>14,.2f}"
            f"{y.total_payments:>14,.2f}{y.ending_balance:>16,.2f}"
        )
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mortgage amortization schedule")
    parser.add_argument("--price", type=Decimal, default=settings.default_total_price, help="Home price")
    parser.add_argument("--down", type=Decimal, default=settings.default_down_payment, help="Down payment")
    parser.add_argument("--rate", type=Decimal, default=settings.default_interest_rate_percent,
                        help="Annual interest rate in percent")
    parser.add_argument("--term", type=int, default=settings.default_term_years, help="Term in years")
    parser.add_argument("--frequency", choices=[f.value for f in PaymentFrequency],
                        default=settings.default_frequency, help="Payment frequency")
    parser.add_argument("--lump-sum", type=Decimal, default=settings.default_lump_sum,
                        help="Extra added to every payment")
    parser.add_argument("--start", type=date.fromisoformat, default=None,
                        help="First payment date, YYYY-MM-DD (default: today)")
    parser.add_argument("--accelerate", action="store_true",
                        help="Add the accelerated bi-weekly extra to the lump sum")
    parser.add_argument("--yearly", action="store_true", help="Print yearly totals instead of every payment")
    parser.add_argument("--log-level", default=None, help="Override MORTGAGE_LOG_LEVEL")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    params = MortgageParameters(
        total_price=args.price,
        down_payment=args.down,
        annual_interest_rate_percent=args.rate,
        term_years=args.term,
        frequency=PaymentFrequency(args.frequency),
        lump_sum_per_payment=args.lump_sum,
        start_date=args.start or settings.default_start_date or date.today(),
    )

    try:
        if args.accelerate:
            params = with_acceleration(params)
        schedule = compute_schedule(params)
    except InvalidParameters as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print_summary(params, summarize_schedule(schedule))
    if args.yearly:
        print_yearly(yearly_summary(schedule))
    else:
        print_schedule(schedule)
    return 0


if __name__ == "__main__":
    sys.exit(main())
