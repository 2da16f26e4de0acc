"""
Reusable Dash UI components for the Order Browser application.

This package provides modular, composable components:
- banners: Error and success banner regions
- order_card: Clickable order summary card
- order_detail: Detail panel for a single order
- order_results: Results list with loading and empty states
- order_search: Search input with refresh and create controls
- presenter: OrderPresenter implementation backing the Dash callbacks

All builders are pure functions that return Dash html/dcc elements,
making them easy to test and compose.
"""

from order_ui.components.banners import build_banner
from order_ui.components.order_card import build_order_card
from order_ui.components.order_detail import build_order_detail, format_order_details
from order_ui.components.order_results import (
    build_loading_state,
    build_order_results,
    summary_text,
)
from order_ui.components.order_search import build_search_panel
from order_ui.components.presenter import DashPresenter

__all__ = [
    "DashPresenter",
    "build_banner",
    "build_loading_state",
    "build_order_card",
    "build_order_detail",
    "build_order_results",
    "build_search_panel",
    "format_order_details",
    "summary_text",
]
