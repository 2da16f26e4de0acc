"""
Service factory for the Order Browser UI.

This module provides the get_order_service() factory function that returns
the appropriate OrderService implementation based on configuration.

Available Implementations:
- demo: In-memory service with static order data (no API required)
- http: httpx client for the order service API (default)

Configure via the ORDER_UI_SERVICE environment variable. A new instance is
returned on every call; the caller owns it and closes it when done.
"""

import os
from typing import Callable, Dict

from order_ui.lib import logs
from order_ui.services.order_service import OrderService
from order_ui.services.order_service_demo import DemoOrderService
from order_ui.services.order_service_http import HttpOrderService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], OrderService]] = {
    "demo": lambda: DemoOrderService(),
    "http": lambda: HttpOrderService(),
}


def get_order_service(kind: str | None = None) -> OrderService:
    """Return a new instance of the configured order service implementation."""
    resolved_kind = (kind or os.getenv("ORDER_UI_SERVICE", "http")).lower()
    LOG.info("get_order_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown order service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoOrderService",
    "HttpOrderService",
    "OrderService",
    "get_order_service",
]
