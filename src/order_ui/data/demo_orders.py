"""Demo order payloads in the order service wire format."""

from datetime import datetime, timezone


def sample_order(order_uid: str, date_created: str | None = None) -> dict:
    """Return a test order shaped like the ones the order service generates."""
    return {
        "order_uid": order_uid,
        "track_number": "WBILMTESTTRACK",
        "entry": "WBIL",
        "delivery": {
            "name": "Test Testov",
            "phone": "+9720000000",
            "zip": "2639809",
            "city": "Kiryat Mozkin",
            "address": "Ploshad Mira 15",
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
        "items": [
            {
                "chrt_id": 9934930,
                "track_number": "WBILMTESTTRACK",
                "price": 453,
                "rid": "ab4219087a764ae0btest",
                "name": "Mascaras",
                "sale": 30,
                "size": "0",
                "total_price": 317,
                "nm_id": 2389212,
                "brand": "Vivienne Sabo",
                "status": 202,
            }
        ],
        "locale": "en",
        "internal_signature": "",
        "customer_id": "test",
        "delivery_service": "meest",
        "shardkey": "9",
        "sm_id": 99,
        "date_created": date_created
        or datetime.now(timezone.utc).replace(microsecond=0).isoformat(),
        "oof_shard": "1",
    }


DEMO_ORDERS = [
    sample_order("b563feb7b2b84b6test", "2021-11-26T06:22:19Z"),
    {
        **sample_order("7f1c2e90aa3d4c5demo", "2023-03-14T09:41:00Z"),
        "track_number": "WBILDEMOTRACK2",
        "customer_id": "jane",
        "delivery": {
            "name": "Jane Doe",
            "phone": "+15550000001",
            "zip": "10001",
            "city": "New York",
            "address": "5th Avenue 1",
            "region": "NY",
            "email": "jane@example.com",
        },
    },
    {
        **sample_order("c0ffee00beef42demo", None),
        "date_created": "not-a-date",
        "track_number": "WBILDEMOTRACK3",
    },
]
