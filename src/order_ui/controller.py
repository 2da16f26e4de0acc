"""
Order list controller: state store, request orchestration and banners.

OrderListController runs every user action as a coroutine against an
OrderService and reports the outcome through an injected OrderPresenter.
Each failure is recovered at the operation boundary: it is logged and
turned into an error banner, and the controller stays usable.

Operations that replace the order list (list-fetch and single-lookup)
take a request-generation token from the store. When a response arrives
after a newer request was issued it is discarded, so the last request
issued wins rather than the last response received.

After a successful create the list is refreshed immediately through a
path that leaves banners alone, so the success banner stays visible for
its full lifetime.
"""

import asyncio
import os
from typing import Literal

from order_ui.banner import BANNER_TIMEOUT, StatusBanner
from order_ui.errors import NotFound, OrderUIError, ValidationError
from order_ui.lib import logs
from order_ui.models.order import Order
from order_ui.presenter import OrderPresenter
from order_ui.services.order_service import OrderService
from order_ui.state import OrderStore
from order_ui.utils import matches_query

LOG = logs.logger(__file__)

SearchMode = Literal["server", "local"]

AUTO_REFRESH_INTERVAL = 30.0
_SEARCH_MODE_ENV = os.getenv("ORDER_UI_SEARCH_MODE", "server").lower()
SEARCH_MODE: SearchMode = "local" if _SEARCH_MODE_ENV == "local" else "server"

EMPTY_SEARCH_MESSAGE = "Enter an Order UID to search"


class OrderListController:
    """
    Drives the order list UI.

    Attributes:
        store: Full and visible order sets.
        banner: Status banner owner.
        search_mode: Whether search() uses the server lookup or the local filter.
    """

    def __init__(
        self,
        service: OrderService,
        presenter: OrderPresenter,
        store: OrderStore | None = None,
        banner_timeout: float | None = BANNER_TIMEOUT,
        search_mode: SearchMode = SEARCH_MODE,
    ) -> None:
        self.service = service
        self.presenter = presenter
        self.store = store or OrderStore()
        self.banner = StatusBanner(presenter, timeout=banner_timeout)
        self.search_mode = search_mode
        self._auto_refresh: asyncio.Task | None = None

    async def load_orders(self, clear_banners: bool = True) -> bool:
        """
        Fetch the full order list and replace the store contents.

        Args:
            clear_banners: Hide any banner when the fetch starts. The
                post-create refresh passes False to keep its success banner.

        Returns:
            True if the store was updated.
        """
        token = self.store.next_generation()
        self.presenter.show_loading()
        if clear_banners:
            self.banner.hide()
        try:
            orders = await self.service.list_orders()
        except Exception as exc:
            return self._fail(token, "Failed to load orders", exc)

        if self._is_stale(token, "order list"):
            return False
        self.store.set_full(orders)
        self._render()
        self.presenter.hide_loading()
        LOG.info("Loaded %d orders", len(orders))
        return True

    async def refresh(self) -> bool:
        """Reload the full list; bound to the refresh control."""
        return await self.load_orders()

    async def search_order(self, order_uid: str) -> bool:
        """
        Look up a single order on the server and show only that order.

        A 404 empties both collections; an empty id never reaches the
        network.

        Returns:
            True if the order was found.
        """
        order_uid = (order_uid or "").strip()
        if not order_uid:
            self._report(EMPTY_SEARCH_MESSAGE, ValidationError(EMPTY_SEARCH_MESSAGE))
            return False

        token = self.store.next_generation()
        self.presenter.show_loading()
        self.banner.hide()
        try:
            order = await self.service.get_order(order_uid)
        except NotFound as exc:
            if self._is_stale(token, "order lookup"):
                return False
            LOG.info("Order %s not found", order_uid)
            self.store.clear()
            self._render()
            self.presenter.hide_loading()
            self.banner.show_error(str(exc))
            return False
        except Exception as exc:
            return self._fail(token, "Failed to search order", exc)

        if self._is_stale(token, "order lookup"):
            return False
        self.store.set_full([order])
        self._render()
        self.presenter.hide_loading()
        self.banner.show_success(f"Found order: {order_uid}")
        return True

    async def create_order(self) -> str | None:
        """
        Generate a new order, announce it and refresh the list.

        The create control is marked busy for the duration of the call and
        restored whatever the outcome.

        Returns:
            The new order_uid, or None if creation failed.
        """
        self.presenter.set_create_busy(True)
        try:
            order_uid = await self.service.generate_order()
        except Exception as exc:
            self._report("Failed to create order", exc)
            return None
        finally:
            self.presenter.set_create_busy(False)

        LOG.info("Created order %s", order_uid)
        self.banner.show_success(f"Order {order_uid} created successfully!")
        await self.load_orders(clear_banners=False)
        return order_uid

    def filter_orders(self, term: str) -> None:
        """
        Narrow the visible set to orders matching term, without a request.

        Matches order id, recipient name, phone, city, address and track
        number case-insensitively. A blank term shows every order again.
        """
        term = term or ""
        self.store.apply_filter(lambda order: matches_query(order, term))
        self._render()

    async def search(self, term: str) -> None:
        """Run the search box action according to search_mode."""
        if self.search_mode == "local":
            self.filter_orders(term)
        else:
            await self.search_order(term)

    async def show_order_details(self, order_uid: str) -> Order | None:
        """Fetch one order fresh from the server and render its detail view."""
        try:
            order = await self.service.get_order(order_uid)
        except Exception as exc:
            self._report("Failed to load order details", exc)
            return None
        self.presenter.render_detail(order)
        return order

    def start_auto_refresh(
        self, interval: float = AUTO_REFRESH_INTERVAL
    ) -> asyncio.Task:
        """Reload the list every interval seconds until stopped."""
        self.stop_auto_refresh()
        self._auto_refresh = asyncio.create_task(self._auto_refresh_loop(interval))
        return self._auto_refresh

    def stop_auto_refresh(self) -> None:
        if self._auto_refresh is not None:
            self._auto_refresh.cancel()
            self._auto_refresh = None

    async def close(self) -> None:
        """Stop background work; the service is owned by the caller."""
        self.stop_auto_refresh()
        self.banner.cancel()

    async def _auto_refresh_loop(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            try:
                await self.load_orders()
            except Exception:
                LOG.error("Auto-refresh failed", exc_info=True)

    def _render(self) -> None:
        self.presenter.render_orders(
            self.store.visible_orders, len(self.store.all_orders)
        )

    def _is_stale(self, token: int, what: str) -> bool:
        if self.store.is_current(token):
            return False
        LOG.info(
            "Discarding stale %s response (request %d, current %d)",
            what,
            token,
            self.store.generation,
        )
        return True

    def _fail(self, token: int, prefix: str, exc: Exception) -> bool:
        if self._is_stale(token, "failed"):
            return False
        self.presenter.hide_loading()
        self._report(prefix, exc)
        return False

    def _report(self, prefix: str, exc: Exception) -> None:
        if isinstance(exc, ValidationError):
            LOG.warning("%s", exc.detail)
            self.banner.show_error(exc.detail)
            return
        if isinstance(exc, OrderUIError):
            LOG.warning("%s: %s", prefix, exc.detail)
            detail = exc.detail
        else:
            LOG.error("%s: %s", prefix, exc, exc_info=True)
            detail = str(exc) or exc.__class__.__name__
        self.banner.show_error(f"{prefix}: {detail}")
