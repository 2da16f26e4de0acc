"""
Order domain models and serialization helpers.

This module defines the order data structures that mirror the JSON
documents served by the order service API. The hierarchy is:

    Order
    ├── Delivery (recipient and address)
    ├── Payment (transaction, provider, amounts)
    └── Item[] (products with brand, size and prices)

Parsing uses benedict keypaths so missing or null values degrade to
empty defaults instead of raising KeyError. Serialization converts orders
back to the wire format for storage in dcc.Store.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, List, Mapping, Sequence

from benedict import benedict

from order_ui.errors import ParseError
from order_ui.utils import format_date

DEFAULT_ITEM_SIZE = "1"


@dataclass(slots=True)
class Delivery:
    """Recipient and shipping address of an order."""

    name: str = ""
    phone: str = ""
    zip: str = ""
    city: str = ""
    address: str = ""
    region: str = ""
    email: str = ""


@dataclass(slots=True)
class Payment:
    """Payment transaction attached to an order."""

    transaction: str = ""
    request_id: str = ""
    currency: str = ""
    provider: str = ""
    amount: int = 0
    payment_dt: int = 0
    bank: str = ""
    delivery_cost: int = 0
    goods_total: int = 0
    custom_fee: int = 0


@dataclass(slots=True)
class Item:
    """Represents an individual product line of the order."""

    name: str = ""
    brand: str = ""
    size: str = DEFAULT_ITEM_SIZE
    chrt_id: int = 0
    track_number: str = ""
    price: int = 0
    rid: str = ""
    sale: int = 0
    total_price: int = 0
    nm_id: int = 0
    status: int = 0

    def describe(self) -> str:
        """Return the single line used by the detail view."""
        return f"{self.name} ({self.brand}) - {self.size or DEFAULT_ITEM_SIZE}"


@dataclass(slots=True)
class Order:
    """Primary dataclass for orders."""

    order_uid: str
    track_number: str = ""
    entry: str = ""
    delivery: Delivery = field(default_factory=Delivery)
    payment: Payment = field(default_factory=Payment)
    items: Sequence[Item] = field(default_factory=list)
    locale: str = ""
    internal_signature: str = ""
    customer_id: str = ""
    delivery_service: str = ""
    shardkey: str = ""
    sm_id: int = 0
    date_created: str | None = None
    oof_shard: str = ""

    @property
    def formatted_date(self) -> str:
        """Return the creation date formatted for display."""
        return format_date(self.date_created)

    @property
    def full_address(self) -> str:
        """Return the address and city as shown on the summary card."""
        return f"{self.delivery.address}, {self.delivery.city}"

    def searchable_terms(self) -> List[str]:
        """Return the lower-cased values matched by the local filter."""
        terms = [
            self.order_uid,
            self.delivery.name,
            self.delivery.phone,
            self.delivery.city,
            self.delivery.address,
            self.track_number,
        ]
        return [value.lower() for value in terms if value]


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _parse_item(li: Mapping[str, Any]) -> Item:
    return Item(
        name=_str(li.get("name")),
        brand=_str(li.get("brand")),
        size=_str(li.get("size")) or DEFAULT_ITEM_SIZE,
        chrt_id=_int(li.get("chrt_id")),
        track_number=_str(li.get("track_number")),
        price=_int(li.get("price")),
        rid=_str(li.get("rid")),
        sale=_int(li.get("sale")),
        total_price=_int(li.get("total_price")),
        nm_id=_int(li.get("nm_id")),
        status=_int(li.get("status")),
    )


def parse_order(payload: Any) -> Order:
    """
    Convert a decoded JSON object into an Order dataclass.

    Args:
        payload: Decoded response body for a single order.

    Returns:
        Fully populated Order dataclass.

    Raises:
        ParseError: If the payload is not an object or has no order_uid.
    """
    if not isinstance(payload, Mapping):
        raise ParseError(f"expected an order object, got {type(payload).__name__}")
    try:
        b = benedict(dict(payload), keyattr_dynamic=True)
    except ValueError as exc:
        raise ParseError(f"malformed order payload: {exc}") from exc
    order_uid = b.get("order_uid")
    if not order_uid:
        raise ParseError("order payload has no order_uid")

    items = b.get("items") or []
    if not isinstance(items, list):
        raise ParseError("order items must be a list")

    return Order(
        order_uid=_str(order_uid),
        track_number=_str(b.get("track_number")),
        entry=_str(b.get("entry")),
        delivery=Delivery(
            name=_str(b.get("delivery.name")),
            phone=_str(b.get("delivery.phone")),
            zip=_str(b.get("delivery.zip")),
            city=_str(b.get("delivery.city")),
            address=_str(b.get("delivery.address")),
            region=_str(b.get("delivery.region")),
            email=_str(b.get("delivery.email")),
        ),
        payment=Payment(
            transaction=_str(b.get("payment.transaction")),
            request_id=_str(b.get("payment.request_id")),
            currency=_str(b.get("payment.currency")),
            provider=_str(b.get("payment.provider")),
            amount=_int(b.get("payment.amount")),
            payment_dt=_int(b.get("payment.payment_dt")),
            bank=_str(b.get("payment.bank")),
            delivery_cost=_int(b.get("payment.delivery_cost")),
            goods_total=_int(b.get("payment.goods_total")),
            custom_fee=_int(b.get("payment.custom_fee")),
        ),
        items=[_parse_item(li) for li in items if isinstance(li, Mapping)],
        locale=_str(b.get("locale")),
        internal_signature=_str(b.get("internal_signature")),
        customer_id=_str(b.get("customer_id")),
        delivery_service=_str(b.get("delivery_service")),
        shardkey=_str(b.get("shardkey")),
        sm_id=_int(b.get("sm_id")),
        date_created=_str(b.get("date_created")) or None,
        oof_shard=_str(b.get("oof_shard")),
    )


def parse_orders(payload: Any) -> list[Order]:
    """
    Convert a decoded list response into Order dataclasses.

    A null body is an empty list, not an error.

    Raises:
        ParseError: If the payload is neither null nor a list of objects.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ParseError(f"expected a list of orders, got {type(payload).__name__}")
    return [parse_order(item) for item in payload]


def serialize_order(order: Order) -> dict:
    """Convert an Order dataclass into its JSON wire representation."""
    return asdict(order)


def deserialize_order(payload: Mapping[str, Any]) -> Order:
    """Convert a dictionary produced by serialize_order back into an Order."""
    return parse_order(payload)
