"""Plotly Dash application — mortgage visualizer."""

import sys
from pathlib import Path

# Ensure project root is on sys.path so `src.*` imports work
# even when Dash's reloader spawns a child process.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from dash import Dash, html, page_container

from src.config import configure_logging, settings

configure_logging()

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Mortgage Visualizer",
)

app.layout = html.Div([
    # Navigation
    html.Nav([
        html.Div([
            html.H1("Mortgage Visualizer", style={"fontSize": "1.5rem", "margin": "0"}),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=settings.dashboard_port)
