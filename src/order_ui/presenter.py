"""
Presentation contract for the order list controller.

The controller never touches a rendering tree directly. It talks to an
OrderPresenter injected by the UI layer; the Dash implementation lives in
order_ui.components.presenter.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from order_ui.models.common import Banner
from order_ui.models.order import Order


class OrderPresenter(ABC):
    """Capability set the controller needs from the UI layer."""

    @abstractmethod
    def render_orders(self, visible: Sequence[Order], total: int) -> None:
        """Render the visible orders and the result count."""

    @abstractmethod
    def render_detail(self, order: Order) -> None:
        """Render the detail view of a single order."""

    @abstractmethod
    def show_banner(self, banner: Banner) -> None:
        """Display a status banner, replacing any other banner."""

    @abstractmethod
    def hide_banner(self) -> None:
        """Remove any status banner; a no-op when none is shown."""

    @abstractmethod
    def show_loading(self) -> None:
        """Show the loading indicator in place of the results."""

    @abstractmethod
    def hide_loading(self) -> None:
        """Hide the loading indicator and reveal the results."""

    def set_create_busy(self, busy: bool) -> None:
        """
        Toggle the create control between its in-progress and idle state.

        Presenters without a create control may ignore this.
        """
