"""
Shared test fixtures and helpers for the Order Browser UI test suite.
"""

import asyncio
from typing import Any, Dict, List, Optional, Sequence

import pytest

from order_ui.errors import NotFound
from order_ui.models.common import Banner
from order_ui.models.order import Order, parse_order
from order_ui.presenter import OrderPresenter
from order_ui.services.order_service import OrderService


# ============================================================================
# Payload helpers
# ============================================================================


def make_payload(
    order_uid: str = "A1",
    name: str = "Jane",
    phone: str = "1",
    city: str = "X",
    address: str = "Y",
    track_number: str = "T1",
    date_created: Optional[str] = "2021-11-26T06:22:19Z",
    items: Optional[List[Dict[str, Any]]] = None,
) -> dict:
    """Build an order payload in the order service wire format."""
    return {
        "order_uid": order_uid,
        "track_number": track_number,
        "entry": "WBIL",
        "delivery": {
            "name": name,
            "phone": phone,
            "zip": "2639809",
            "city": city,
            "address": address,
            "region": "Kraiot",
            "email": "test@gmail.com",
        },
        "payment": {
            "transaction": order_uid,
            "request_id": "",
            "currency": "USD",
            "provider": "wbpay",
            "amount": 1817,
            "payment_dt": 1637907727,
            "bank": "alpha",
            "delivery_cost": 1500,
            "goods_total": 317,
            "custom_fee": 0,
        },
        "items": items
        if items is not None
        else [{"name": "Mascaras", "brand": "Vivienne Sabo", "size": "0"}],
        "customer_id": "test",
        "delivery_service": "meest",
        "date_created": date_created,
    }


def make_order(order_uid: str = "A1", **kwargs: Any) -> Order:
    return parse_order(make_payload(order_uid, **kwargs))


# ============================================================================
# Test doubles
# ============================================================================


class RecordingPresenter(OrderPresenter):
    """Presenter that remembers every call and the resulting UI state."""

    def __init__(self) -> None:
        self.events: List[str] = []
        self.visible: Optional[Sequence[Order]] = None
        self.total: Optional[int] = None
        self.banner: Optional[Banner] = None
        self.banners: List[Banner] = []
        self.loading = False
        self.detail: Optional[Order] = None
        self.create_busy = False
        self.busy_history: List[bool] = []

    def render_orders(self, visible, total):
        self.events.append("render_orders")
        self.visible = list(visible)
        self.total = total

    def render_detail(self, order):
        self.events.append("render_detail")
        self.detail = order

    def show_banner(self, banner):
        self.events.append(f"show_banner:{banner.kind.value}")
        self.banner = banner
        self.banners.append(banner)

    def hide_banner(self):
        self.events.append("hide_banner")
        self.banner = None

    def show_loading(self):
        self.events.append("show_loading")
        self.loading = True

    def hide_loading(self):
        self.events.append("hide_loading")
        self.loading = False

    def set_create_busy(self, busy):
        self.events.append(f"create_busy:{busy}")
        self.create_busy = busy
        self.busy_history.append(busy)

    @property
    def visible_uids(self) -> List[str]:
        return [order.order_uid for order in self.visible or []]


class FakeOrderService(OrderService):
    """
    Scripted OrderService.

    Set *_error attributes to make a call raise. Put an asyncio.Event in
    gates[name] to hold a call until the test releases it.
    """

    def __init__(self, orders: Sequence[Order] = (), generated_uid: str = "B2") -> None:
        self.orders: List[Order] = list(orders)
        self.generated_uid = generated_uid
        self.list_error: Optional[Exception] = None
        self.get_error: Optional[Exception] = None
        self.generate_error: Optional[Exception] = None
        self.calls: List[str] = []
        self.gates: Dict[str, asyncio.Event] = {}

    async def list_orders(self):
        self.calls.append("list")
        await self._gate("list")
        if self.list_error:
            raise self.list_error
        return list(self.orders)

    async def get_order(self, order_uid):
        self.calls.append(f"get:{order_uid}")
        await self._gate("get")
        if self.get_error:
            raise self.get_error
        for order in self.orders:
            if order.order_uid == order_uid:
                return order
        raise NotFound(order_uid)

    async def generate_order(self):
        self.calls.append("generate")
        await self._gate("generate")
        if self.generate_error:
            raise self.generate_error
        self.orders.append(make_order(self.generated_uid))
        return self.generated_uid

    async def _gate(self, name: str) -> None:
        gate = self.gates.get(name)
        if gate is not None:
            await gate.wait()


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def service() -> FakeOrderService:
    return FakeOrderService(
        [
            make_order("A1", name="Jane", phone="1", city="X", address="Y"),
            make_order(
                "C3",
                name="Ivan Petrov",
                phone="+79990001122",
                city="Moscow",
                address="Tverskaya 7",
                track_number="WBILMTESTTRACK",
            ),
        ]
    )
