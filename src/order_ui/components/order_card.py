from __future__ import annotations

from dash import html
from dash_iconify import DashIconify

from order_ui.models.order import Order

"""Clickable order summary card."""


def card_id(order_uid: str) -> dict:
    """Return the pattern-matching id used by card click callbacks."""
    return {"type": "order-card", "index": order_uid}


def build_order_card(order: Order) -> html.Div:
    """Return a card styled container summarizing a single order."""
    return html.Div(
        id=card_id(order.order_uid),
        className="card order-card",
        n_clicks=0,
        title="Show order details",
        children=[
            html.Div(
                className="order-header",
                children=[
                    html.Div(
                        className="title-row",
                        children=[
                            DashIconify(icon="lucide:package", className="title-icon"),
                            html.Span(f"ID: {order.order_uid}", className="order-id"),
                        ],
                    ),
                    _meta_item("lucide:calendar", order.formatted_date),
                ],
            ),
            _info_row("Recipient", order.delivery.name),
            _info_row("Address", order.full_address),
        ],
    )


def _info_row(label: str, value: str) -> html.Div:
    """Return a labelled line of the card body."""
    return html.Div(
        className="order-info",
        children=[
            html.Strong(f"{label}:", className="label"),
            html.Span(value, className="value"),
        ],
    )


def _meta_item(icon: str, label: str) -> html.Span:
    """Return a metadata chip."""
    return html.Span(
        className="meta-item order-date",
        children=[
            DashIconify(icon=icon, className="meta-icon"),
            html.Span(label),
        ],
    )
