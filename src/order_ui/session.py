"""
Per-request controller sessions for the Dash callbacks.

Dash keeps no server-side state between callbacks, so every user action
rebuilds an OrderListController from the ViewState held in dcc.Store, runs
one operation, and hands the updated ViewState back to the callback.
Banner expiry is driven by a dcc.Interval in the page, so the controller
here runs without its own auto-clear timer.
"""

from typing import Literal

from order_ui.components.presenter import DashPresenter
from order_ui.controller import SEARCH_MODE, OrderListController, SearchMode
from order_ui.lib import logs
from order_ui.models.common import ViewState
from order_ui.models.order import deserialize_order, serialize_order
from order_ui.services.order_service import OrderService
from order_ui.state import OrderStore

LOG = logs.logger(__file__)

Action = Literal[
    "load",
    "refresh",
    "search",
    "filter",
    "create",
    "details",
    "close_detail",
    "clear_banner",
]


def restore_store(view: ViewState) -> OrderStore:
    """Rebuild the order store, including its visible subset, from a ViewState."""
    store = OrderStore(deserialize_order(payload) for payload in view.orders)
    visible = set(view.visible_uids)
    store.apply_filter(lambda order: order.order_uid in visible)
    return store


async def dispatch(
    action: Action,
    view: ViewState,
    service: OrderService,
    argument: str | None = None,
    search_mode: SearchMode = SEARCH_MODE,
) -> ViewState:
    """
    Run one controller operation against a restored ViewState.

    Args:
        action: The user action to perform.
        view: Page state from the previous callback; updated in place.
        service: Order service to call. The caller owns and closes it.
        argument: Search term or order id for search, filter and details.
        search_mode: Search box behavior, see OrderListController.

    Returns:
        The updated ViewState.

    Raises:
        ValueError: If the action is unknown.
    """
    LOG.info("dispatch - action:%s argument:%s", action, argument)
    store = restore_store(view)
    presenter = DashPresenter(view)
    controller = OrderListController(
        service,
        presenter,
        store=store,
        banner_timeout=None,
        search_mode=search_mode,
    )
    controller.banner.current = view.banner

    try:
        if action == "load":
            await controller.load_orders()
        elif action == "refresh":
            view.query = ""
            await controller.refresh()
        elif action == "search":
            view.query = argument or ""
            await controller.search(view.query)
        elif action == "filter":
            view.query = argument or ""
            controller.filter_orders(view.query)
        elif action == "create":
            await controller.create_order()
        elif action == "details":
            await controller.show_order_details(argument or "")
        elif action == "close_detail":
            view.detail = None
        elif action == "clear_banner":
            controller.banner.hide()
        else:
            raise ValueError(f"Unknown action: {action}")
    finally:
        await controller.close()

    view.orders = [serialize_order(order) for order in store.all_orders]
    view.visible_uids = [order.order_uid for order in store.visible_orders]
    return view
