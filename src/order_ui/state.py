"""
In-memory order state for the Order Browser UI.

OrderStore holds the full order set from the last fetch and the
filtered view derived from it. It also hands out request-generation
tokens so the controller can tell a stale response from a current one.
"""

from typing import Callable, Iterable

from order_ui.models.order import Order


class OrderStore:
    """
    Holds all_orders and visible_orders.

    visible_orders is always a subsequence of all_orders in the same
    relative order; set_full resets it to the full set.
    """

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self.all_orders: tuple[Order, ...] = tuple(orders)
        self.visible_orders: tuple[Order, ...] = self.all_orders
        self.generation = 0

    def set_full(self, orders: Iterable[Order]) -> None:
        """Replace the full set and discard any local filter."""
        self.all_orders = tuple(orders)
        self.visible_orders = self.all_orders

    def apply_filter(self, predicate: Callable[[Order], bool]) -> None:
        """Recompute the visible set from the full set."""
        self.visible_orders = tuple(o for o in self.all_orders if predicate(o))

    def clear(self) -> None:
        self.set_full(())

    def next_generation(self) -> int:
        """Issue a new request token; older tokens become stale."""
        self.generation += 1
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation
