"""
Data models and serialization helpers for the Order Browser UI.

This package provides:
- Order domain models (Order, Delivery, Payment, Item)
- Page state models (Banner, ViewState)
- Serialization/deserialization for dcc.Store compatibility

All models use Python dataclasses for type safety and IDE support.
"""

from order_ui.models.common import Banner, BannerKind, ViewState
from order_ui.models.order import (
    Delivery,
    Item,
    Order,
    Payment,
    deserialize_order,
    parse_order,
    parse_orders,
    serialize_order,
)

__all__ = [
    "Banner",
    "BannerKind",
    "Delivery",
    "Item",
    "Order",
    "Payment",
    "ViewState",
    "deserialize_order",
    "parse_order",
    "parse_orders",
    "serialize_order",
]
