"""Mortgage visualizer page — recompute on every (debounced) input change.

The previous schedule is kept in a dcc.Store and fed back to the engine in
merge mode, so shortening the loan blanks trailing points instead of
collapsing the x-axis.
"""

import logging
from datetime import date

import dash
from dash import html, dcc, callback, Input, Output, State, no_update

from src.config import settings
from src.dashboard.charts import (
    build_schedule_figure,
    params_from_form,
    schedule_from_store,
    schedule_to_store,
    summary_cards,
)
from src.engine.amortization import InvalidParameters, compute_schedule, with_acceleration
from src.engine.chart_series import build_chart_series, summarize_schedule
from src.models.mortgage import PaymentFrequency

logger = logging.getLogger(__name__)

dash.register_page(__name__, path="/", name="Visualizer")

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

CARD_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #ddd",
    "borderRadius": "8px",
    "padding": "1rem 1.5rem",
    "minWidth": "160px",
    "textAlign": "center",
}

FREQUENCY_OPTIONS = [
    {"label": " Monthly", "value": PaymentFrequency.MONTHLY.value},
    {"label": " Bi-Weekly", "value": PaymentFrequency.BI_WEEKLY.value},
    {"label": " Accelerated Bi-Weekly", "value": PaymentFrequency.ACCELERATED_BI_WEEKLY.value},
]

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "140px"})


def _number(id_, value, step=1):
    return dcc.Input(
        id=id_, type="number", value=value, step=step, min=0,
        debounce=settings.recompute_debounce, style=FIELD_STYLE,
    )


def layout():
    start = (settings.default_start_date or date.today()).isoformat()
    return html.Div([
        html.H2("Mortgage Visualizer"),

        html.Div([
            _field("Purchase Price ($)", _number("mv-price", float(settings.default_total_price), step=1000)),
            _field("Down Payment ($)", _number("mv-down", float(settings.default_down_payment), step=1000)),
            _field("Interest Rate (%)", _number("mv-rate", float(settings.default_interest_rate_percent), step=0.05)),
            _field("Term (years)", _number("mv-term", settings.default_term_years)),
        ], style={"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}),

        html.Div([
            _field("Lump Sum per Payment ($)", _number("mv-lump", float(settings.default_lump_sum), step=50)),
            _field("Start Date", dcc.DatePickerSingle(id="mv-start", date=start)),
            _field("Payment Frequency", dcc.RadioItems(
                id="mv-frequency",
                options=FREQUENCY_OPTIONS,
                value=settings.default_frequency,
                inline=True,
            )),
        ], style={"display": "flex", "gap": "1rem", "marginBottom": "1.5rem", "alignItems": "end"}),

        dcc.Store(id="mv-schedule-store"),
        html.Div(id="mv-error", style={"color": "red", "marginBottom": "1rem"}),
        html.Div(id="mv-summary", style={"display": "flex", "gap": "1rem", "marginBottom": "1.5rem", "flexWrap": "wrap"}),
        dcc.Graph(id="mv-chart", style={"height": "480px"}),
    ])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


def _card(label, value):
    return html.Div([
        html.Div(label, style={"fontSize": "0.85rem", "color": "#666"}),
        html.Div(value, style={"fontSize": "1.5rem", "fontWeight": "bold"}),
    ], style=CARD_STYLE)


@callback(
    [
        Output("mv-chart", "figure"),
        Output("mv-summary", "children"),
        Output("mv-schedule-store", "data"),
        Output("mv-error", "children"),
    ],
    [
        Input("mv-price", "value"),
        Input("mv-down", "value"),
        Input("mv-rate", "value"),
        Input("mv-term", "value"),
        Input("mv-frequency", "value"),
        Input("mv-lump", "value"),
        Input("mv-start", "date"),
    ],
    State("mv-schedule-store", "data"),
)
def update_schedule(price, down_payment, rate, term_years, frequency, lump_sum, start_date, stored):
    if not price:
        return no_update, no_update, no_update, ""

    try:
        params = params_from_form(price, down_payment, rate, term_years, frequency, lump_sum, start_date)
        params = with_acceleration(params)
        schedule = compute_schedule(params, schedule_from_store(stored))
    except InvalidParameters as e:
        logger.warning("Visualizer rejected inputs: %s", e)
        return no_update, no_update, no_update, str(e)

    figure = build_schedule_figure(build_chart_series(schedule))
    cards = [_card(label, value) for label, value in summary_cards(summarize_schedule(schedule))]
    return figure, cards, schedule_to_store(schedule), ""
