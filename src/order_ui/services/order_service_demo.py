"""
Demo implementation of OrderService using in-memory data.

This service is useful for:
- Local development without a running order service
- Testing UI components with realistic data
- Demonstrating the application without network dependencies

Generated orders follow the same template the order service uses for its
generate endpoint, with a random numeric order_uid.
"""

import asyncio
import random
from typing import Any, Sequence

from order_ui.data.demo_orders import DEMO_ORDERS, sample_order
from order_ui.errors import NotFound
from order_ui.lib import logs
from order_ui.models.order import Order, parse_order
from order_ui.services.order_service import OrderService

LOG = logs.logger(__file__)


class DemoOrderService(OrderService):
    """
    In-memory order service backed by static demo payloads.

    Attributes:
        latency: Simulated round trip in seconds for every call.
    """

    def __init__(
        self, payloads: Sequence[dict[str, Any]] | None = None, latency: float = 0.0
    ) -> None:
        """
        Initialize with order data.

        Args:
            payloads: Custom order payloads, or None to use DEMO_ORDERS.
            latency: Simulated delay per call in seconds.
        """
        source = DEMO_ORDERS if payloads is None else payloads
        self._orders: dict[str, Order] = {}
        for payload in source:
            order = parse_order(payload)
            self._orders[order.order_uid] = order
        self.latency = latency

    async def list_orders(self) -> list[Order]:
        await self._pause()
        return list(self._orders.values())

    async def get_order(self, order_uid: str) -> Order:
        await self._pause()
        try:
            return self._orders[order_uid]
        except KeyError:
            raise NotFound(order_uid) from None

    async def generate_order(self) -> str:
        await self._pause()
        order_uid = str(random.randrange(1_000_000))
        self._orders[order_uid] = parse_order(sample_order(order_uid))
        LOG.info("Generated demo order %s", order_uid)
        return order_uid

    async def _pause(self) -> None:
        if self.latency:
            await asyncio.sleep(self.latency)
