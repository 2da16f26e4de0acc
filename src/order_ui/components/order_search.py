from __future__ import annotations

from dash import dcc, html
from dash_iconify import DashIconify

"""Search panel with the refresh and create controls."""

CREATE_LABEL = "Create order"
CREATE_BUSY_LABEL = "Creating..."


def build_search_panel(initial_value: str = "") -> html.Div:
    """
    Build the search panel with input and action buttons.

    The input submits on Enter (n_submit) and through the search button.

    Args:
        initial_value: Pre-populated search term.

    Returns:
        Card-styled div containing the search UI elements.
    """
    return html.Div(
        className="card search-card",
        children=[
            html.Div(
                className="input-with-icon",
                children=[
                    DashIconify(icon="lucide:search", className="input-icon"),
                    dcc.Input(
                        id="search-input",
                        type="text",
                        value=initial_value,
                        placeholder="Search by Order UID...",
                        className="search-input",
                        n_submit=0,
                    ),
                ],
            ),
            html.Div(
                className="button-row",
                children=[
                    _button("search-btn", "lucide:search", "Search", "primary"),
                    _button("refresh-btn", "lucide:refresh-cw", "Refresh", "ghost"),
                    html.Button(
                        CREATE_LABEL,
                        id="create-order-btn",
                        className="button success",
                        n_clicks=0,
                    ),
                ],
            ),
        ],
    )


def _button(button_id: str, icon: str, label: str, variant: str) -> html.Button:
    return html.Button(
        id=button_id,
        className=f"button {variant} gap",
        n_clicks=0,
        children=[DashIconify(icon=icon, className="button-icon"), label],
    )
