from __future__ import annotations

from typing import Sequence

from dash import html
from dash_iconify import DashIconify

from order_ui.components.order_card import build_order_card
from order_ui.models.order import Order

"""Helpers that render the order result list."""


def build_loading_state() -> html.Div:
    """Return a loading indicator shown while a request is outstanding."""
    return html.Div(
        className="card loading-state",
        children=[
            html.Div(className="spinner"),
            html.P("Loading orders...", className="muted"),
        ],
    )


def build_order_results(orders: Sequence[Order]) -> html.Div:
    """Return either the empty state or one card per visible order."""
    if not orders:
        return html.Div(
            className="card empty-state no-orders",
            children=[
                DashIconify(icon="lucide:package-x", className="empty-icon"),
                html.H3("No orders found"),
            ],
        )
    return html.Div(
        className="results orders-grid",
        children=[build_order_card(order) for order in orders],
    )


def summary_text(visible: int, total: int) -> str:
    """Return the result count summary."""
    return f"Showing {visible} of {total} orders"
