"""Figure and store helpers for the visualizer page.

Kept free of Dash page registration so callbacks stay thin and the pieces
can be exercised without a running app.
"""

from datetime import date
from decimal import Decimal, InvalidOperation

import plotly.graph_objects as go

from src.config import settings
from src.engine.chart_series import ChartSeries, ScheduleSummary
from src.models.mortgage import MortgageParameters, PaymentRecord, Schedule

INTEREST_COLORS = ("#ffc9c9", "#ff8787")
PRINCIPAL_COLORS = ("#b2f2bb", "#69db7c")
BALANCE_COLORS = ("#a5d8ff", "#4dabf7")

_RECORD_FIELDS = ("remaining_principal", "principal_paid", "interest_paid", "total_payment")


def format_currency(value) -> str:
    """US dollar formatting, e.g. -1234.5 -> '-$1,234.50'."""
    if value is None:
        return ""
    amount = float(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def _to_decimal(value, default: Decimal) -> Decimal:
    if value is None or value == "":
        return default
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return default


def params_from_form(
    price, down_payment, rate, term_years, frequency, lump_sum, start_date,
) -> MortgageParameters:
    """Form values (floats/strings from Dash inputs) -> engine parameters.

    Empty fields fall back to zero; the frequency string is passed through
    so the engine rejects unknown values.
    """
    if isinstance(start_date, str):
        start = date.fromisoformat(start_date[:10])
    else:
        start = start_date or settings.default_start_date or date.today()
    return MortgageParameters(
        total_price=_to_decimal(price, Decimal("0")),
        down_payment=_to_decimal(down_payment, Decimal("0")),
        annual_interest_rate_percent=_to_decimal(rate, Decimal("0")),
        term_years=int(term_years or 0),
        frequency=frequency,
        lump_sum_per_payment=_to_decimal(lump_sum, Decimal("0")),
        start_date=start,
    )


# ---------------------------------------------------------------------------
# Store (de)serialization — dcc.Store only holds JSON
# ---------------------------------------------------------------------------


def schedule_to_store(schedule: Schedule) -> list[dict]:
    rows = []
    for p in schedule:
        row = {"payment_date": p.payment_date.isoformat()}
        for name in _RECORD_FIELDS:
            value = getattr(p, name)
            row[name] = None if value is None else str(value)
        rows.append(row)
    return rows


def schedule_from_store(rows: list[dict] | None) -> Schedule | None:
    if not rows:
        return None
    return [
        PaymentRecord(
            payment_date=date.fromisoformat(row["payment_date"]),
            **{
                name: None if row.get(name) is None else Decimal(row[name])
                for name in _RECORD_FIELDS
            },
        )
        for row in rows
    ]


# ---------------------------------------------------------------------------
# Figure
# ---------------------------------------------------------------------------


def _floats(values) -> list[float | None]:
    return [None if v is None else float(v) for v in values]


def build_schedule_figure(series: ChartSeries) -> go.Figure:
    """Stacked cumulative interest/principal bars with a remaining-balance line."""
    per_payment = [
        [float(p), float(i)] for p, i in zip(series.principal_paid, series.interest_paid)
    ]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=series.labels,
        y=_floats(series.cumulative_interest),
        name="Cumulative Interest Paid",
        marker=dict(color=INTEREST_COLORS[0], line=dict(color=INTEREST_COLORS[1], width=1)),
        hovertemplate="Cumulative Interest: $%{y:,.2f}<extra></extra>",
    ))
    fig.add_trace(go.Bar(
        x=series.labels,
        y=_floats(series.cumulative_principal),
        name="Cumulative Principal Paid",
        marker=dict(color=PRINCIPAL_COLORS[0], line=dict(color=PRINCIPAL_COLORS[1], width=1)),
        hovertemplate="Cumulative Principal: $%{y:,.2f}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=series.labels,
        y=_floats(series.remaining_principal),
        name="Remaining Principal",
        mode="lines",
        line=dict(color=BALANCE_COLORS[1], width=2),
        customdata=per_payment,
        hovertemplate=(
            "Payment Principal: $%{customdata[0]:,.2f}<br>"
            "Payment Interest: $%{customdata[1]:,.2f}<extra></extra>"
        ),
    ))
    fig.update_layout(
        barmode="stack",
        hovermode="x unified",
        xaxis=dict(nticks=settings.chart_max_ticks),
        yaxis_title="Amount ($)",
        margin=dict(l=40, r=20, t=30, b=40),
        legend=dict(orientation="h"),
    )
    return fig


def summary_cards(summary: ScheduleSummary) -> list[tuple[str, str]]:
    """(label, display value) pairs for the summary row."""
    payoff = summary.final_payment_date.isoformat() if summary.final_payment_date else "Not paid off"
    return [
        ("Payment", format_currency(summary.periodic_payment)),
        ("Total Interest", format_currency(summary.total_interest)),
        ("Payments", str(summary.payment_count)),
        ("Payoff Date", payoff),
    ]
