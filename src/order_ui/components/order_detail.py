"""
Order detail panel component.

Shows everything the order service returns for a single order:
- Metadata (track number, entry point, creation date, customer)
- Delivery recipient and address
- Payment transaction
- One line per item, formatted as "name (brand) - size"

format_order_details() returns the same content as plain text, which is
what the panel copies to the clipboard and what the logs record.
"""

from typing import Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from order_ui.models.order import Item, Order


def _sections(order: Order) -> list[tuple[str, str, list[tuple[str, str]]]]:
    """Return (title, icon, rows) for every detail section."""
    delivery = order.delivery
    payment = order.payment
    return [
        (
            "Summary",
            "lucide:info",
            [
                ("Track number", order.track_number),
                ("Entry", order.entry),
                ("Created", order.formatted_date),
                ("Customer", order.customer_id),
            ],
        ),
        (
            "Delivery",
            "lucide:truck",
            [
                ("Recipient", delivery.name),
                ("Phone", delivery.phone),
                ("Email", delivery.email),
                ("Address", order.full_address),
                ("Region", delivery.region),
                ("Zip", delivery.zip),
                ("Delivery service", order.delivery_service),
            ],
        ),
        (
            "Payment",
            "lucide:credit-card",
            [
                ("Transaction", payment.transaction),
                ("Provider", payment.provider),
                ("Bank", payment.bank),
                ("Currency", payment.currency),
            ],
        ),
    ]


def format_order_details(order: Order) -> str:
    """
    Return the detail view as plain text.

    Args:
        order: Order fetched fresh from the service.

    Returns:
        Multi-line text with one bullet per field and per item.
    """
    lines = [f"ORDER DETAILS {order.order_uid}"]
    for title, _, rows in _sections(order):
        lines.append("")
        lines.append(f"{title}:")
        lines.extend(f"• {label}: {value}" for label, value in rows)
    lines.append("")
    lines.append("Items:")
    lines.extend(f"• {item.describe()}" for item in order.items)
    return "\n".join(lines)


def build_order_detail(order: Order | None) -> html.Div | None:
    """
    Build the detail panel for an order.

    Args:
        order: The order to show, or None to hide the panel.

    Returns:
        Card-styled div, or None when there is nothing to show.
    """
    if order is None:
        return None
    return html.Div(
        className="card order-detail",
        children=[
            html.Div(
                className="card-header",
                children=[
                    html.H3(f"Order details {order.order_uid}"),
                    html.Div(
                        className="button-row",
                        children=[
                            dcc.Clipboard(
                                content=format_order_details(order),
                                className="button ghost",
                                title="Copy details",
                            ),
                            html.Button(
                                id={"type": "close-detail", "index": order.order_uid},
                                className="button ghost",
                                n_clicks=0,
                                children=[
                                    DashIconify(icon="lucide:x", className="button-icon")
                                ],
                            ),
                        ],
                    ),
                ],
            ),
            html.Div(
                className="card-body",
                children=[
                    *[
                        _section(title, icon, rows)
                        for title, icon, rows in _sections(order)
                    ],
                    _build_items(order.items),
                ],
            ),
        ],
    )


def _section(title: str, icon: str, rows: list[tuple[str, str]]) -> html.Div:
    return html.Div(
        className="detail-section",
        children=[
            html.Div(
                className="summary-header",
                children=[
                    DashIconify(icon=icon, className="title-icon"),
                    html.H4(title),
                ],
            ),
            html.Div(
                className="info-grid surface",
                children=[_info_block(label, value) for label, value in rows],
            ),
        ],
    )


def _build_items(items: Sequence[Item]) -> html.Div:
    """Return the item list, one line per item."""
    return html.Div(
        className="detail-section line-items",
        children=[
            html.Div(
                className="summary-header",
                children=[
                    DashIconify(icon="lucide:package", className="title-icon"),
                    html.H4(f"Items ({len(items)})"),
                ],
            ),
            html.Ul(
                className="line-items-list",
                children=[html.Li(item.describe()) for item in items],
            ),
        ],
    )


def _info_block(label: str, value: str) -> html.Div:
    """Return a small info block."""
    return html.Div(
        className="info-block",
        children=[
            html.Span(label, className="label"),
            html.Span(value, className="value"),
        ],
    )
