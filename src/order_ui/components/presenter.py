"""
Dash implementation of the OrderPresenter contract.

Dash callbacks are stateless, so this presenter does not draw anything
itself. It records what the controller asked for into a ViewState; the
callbacks in order_ui.app then build components from that state and keep
it in a dcc.Store for the next request.
"""

from typing import Sequence

from order_ui.models.common import Banner, ViewState
from order_ui.models.order import Order, serialize_order
from order_ui.presenter import OrderPresenter


class DashPresenter(OrderPresenter):
    """Records presentation requests into a ViewState."""

    def __init__(self, view: ViewState | None = None) -> None:
        self.view = view or ViewState()

    def render_orders(self, visible: Sequence[Order], total: int) -> None:
        self.view.visible_uids = [order.order_uid for order in visible]

    def render_detail(self, order: Order) -> None:
        self.view.detail = serialize_order(order)

    def show_banner(self, banner: Banner) -> None:
        self.view.banner = banner

    def hide_banner(self) -> None:
        self.view.banner = None

    def show_loading(self) -> None:
        self.view.loading = True

    def hide_loading(self) -> None:
        self.view.loading = False

    def set_create_busy(self, busy: bool) -> None:
        self.view.create_busy = busy
