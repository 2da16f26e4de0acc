"""
Layout helpers for the Order Browser Dash application.

This module defines the root layout structure including:
- dcc.Store components for state management
- Interval timers for banner expiry and optional auto-refresh
- Banner regions, search panel, result count and results container
- Detail panel for the selected order
"""

import os

from dash import dcc, html

from order_ui.banner import BANNER_TIMEOUT
from order_ui.components.order_results import build_loading_state
from order_ui.components.order_search import build_search_panel
from order_ui.models.common import ViewState

APP_TITLE = "Order Service"
APP_SUBTITLE = "Browse, search and create orders."

# 0 disables the periodic refresh
AUTO_REFRESH_MS = int(os.getenv("ORDER_UI_AUTO_REFRESH_MS", "0"))


def build_layout() -> html.Div:
    """
    Build the root layout for the Order Browser application.

    The layout renders immediately with a loading indicator. Orders are
    fetched by the main callback, which fires once on page load.

    Returns:
        Root html.Div containing the complete application layout.
    """
    return html.Div(
        className="app-shell",
        children=[
            # Serialized ViewState shared between callbacks
            dcc.Store(id="view-state", data=ViewState(loading=True).to_dict()),
            # Set to 1 to trigger initial data load on app mount
            dcc.Store(id="initial-load-trigger", data=1),
            # Fires once per banner to clear it after its lifetime
            dcc.Interval(
                id="banner-timer",
                interval=int((BANNER_TIMEOUT or 5) * 1000),
                n_intervals=0,
                disabled=True,
            ),
            dcc.Interval(
                id="auto-refresh",
                interval=max(AUTO_REFRESH_MS, 1000),
                n_intervals=0,
                disabled=AUTO_REFRESH_MS <= 0,
            ),
            html.Div(
                className="app-container",
                children=[
                    _build_page_header(),
                    html.Div(id="error-message", className="banner-region"),
                    html.Div(id="success-message", className="banner-region"),
                    build_search_panel(""),
                    html.Div(id="order-count", className="results-summary muted"),
                    html.Div(
                        id="loading-message",
                        children=build_loading_state(),
                        style={"display": "block"},
                    ),
                    html.Div(id="orders-container", style={"display": "none"}),
                    html.Div(id="detail-container"),
                ],
            ),
        ],
    )


def _build_page_header() -> html.Div:
    """Return the hero text area at the top of the page."""
    return html.Div(
        className="page-header",
        children=[
            html.H1(APP_TITLE),
            html.P(APP_SUBTITLE),
        ],
    )
