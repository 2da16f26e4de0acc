"""
Order service implementations and the service factory.

The HTTP client is exercised against httpx.MockTransport so every wire
case (null body, 404, 5xx, bad JSON, connection failure) is covered
without a running server.
"""

import json

import httpx
import pytest

from conftest import make_payload
from order_ui.errors import HttpError, NetworkError, NotFound, ParseError
from order_ui.services import (
    DemoOrderService,
    HttpOrderService,
    get_order_service,
)


def _service(handler) -> HttpOrderService:
    return HttpOrderService(
        base_url="http://orders.test/", transport=httpx.MockTransport(handler)
    )


def _json_response(status: int, body) -> httpx.Response:
    return httpx.Response(status, content=json.dumps(body).encode())


# ============================================================================
# HttpOrderService
# ============================================================================


class TestHttpListOrders:

    async def test_list(self):
        seen = []

        def handler(request):
            seen.append((request.method, str(request.url)))
            return _json_response(200, [make_payload("A1"), make_payload("B2")])

        service = _service(handler)
        orders = await service.list_orders()
        await service.close()
        assert [o.order_uid for o in orders] == ["A1", "B2"]
        assert seen == [("GET", "http://orders.test/orders")]

    async def test_null_body_is_empty(self):
        service = _service(lambda request: _json_response(200, None))
        assert await service.list_orders() == []
        await service.close()

    async def test_server_error(self):
        service = _service(lambda request: httpx.Response(500, text="oops"))
        with pytest.raises(HttpError) as exc_info:
            await service.list_orders()
        await service.close()
        assert exc_info.value.status == 500
        assert str(exc_info.value) == "HTTP error! status: 500"

    async def test_invalid_json(self):
        service = _service(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(ParseError):
            await service.list_orders()
        await service.close()

    async def test_object_instead_of_list(self):
        service = _service(lambda request: _json_response(200, {"orders": []}))
        with pytest.raises(ParseError):
            await service.list_orders()
        await service.close()

    async def test_connection_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        service = _service(handler)
        with pytest.raises(NetworkError) as exc_info:
            await service.list_orders()
        await service.close()
        assert "connection refused" in exc_info.value.detail


class TestHttpGetOrder:

    async def test_get(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return _json_response(200, make_payload("A1"))

        service = _service(handler)
        order = await service.get_order("A1")
        await service.close()
        assert order.order_uid == "A1"
        assert paths == ["/order/A1"]

    async def test_uid_is_escaped(self):
        raw_paths = []

        def handler(request):
            raw_paths.append(request.url.raw_path)
            return _json_response(200, make_payload("a/b"))

        service = _service(handler)
        await service.get_order("a/b")
        await service.close()
        assert raw_paths == [b"/order/a%2Fb"]

    async def test_not_found(self):
        service = _service(lambda request: httpx.Response(404, text="not found"))
        with pytest.raises(NotFound) as exc_info:
            await service.get_order("ZZZ")
        await service.close()
        assert exc_info.value.uid == "ZZZ"
        assert "ZZZ" in str(exc_info.value)

    async def test_other_status(self):
        service = _service(lambda request: httpx.Response(502))
        with pytest.raises(HttpError) as exc_info:
            await service.get_order("A1")
        await service.close()
        assert exc_info.value.status == 502


class TestHttpGenerateOrder:

    async def test_generate(self):
        seen = []

        def handler(request):
            seen.append((request.method, request.url.path))
            return _json_response(200, {"order_uid": "B2", "status": "created"})

        service = _service(handler)
        assert await service.generate_order() == "B2"
        await service.close()
        assert seen == [("POST", "/orders/generate")]

    async def test_missing_uid(self):
        service = _service(lambda request: _json_response(200, {"status": "ok"}))
        with pytest.raises(ParseError):
            await service.generate_order()
        await service.close()

    async def test_failure_status(self):
        service = _service(lambda request: httpx.Response(500))
        with pytest.raises(HttpError):
            await service.generate_order()
        await service.close()


# ============================================================================
# DemoOrderService
# ============================================================================


class TestDemoOrderService:

    async def test_list_default_data(self):
        orders = await DemoOrderService().list_orders()
        assert len(orders) == 3
        assert orders[0].order_uid == "b563feb7b2b84b6test"

    async def test_get_unknown(self):
        with pytest.raises(NotFound):
            await DemoOrderService().get_order("missing")

    async def test_generate_adds_order(self):
        service = DemoOrderService(payloads=[make_payload("A1")])
        order_uid = await service.generate_order()
        assert (await service.get_order(order_uid)).order_uid == order_uid
        assert len(await service.list_orders()) == 2


# ============================================================================
# get_order_service
# ============================================================================


class TestServiceFactory:

    def test_demo(self):
        assert isinstance(get_order_service("demo"), DemoOrderService)

    async def test_http(self):
        service = get_order_service("HTTP")
        assert isinstance(service, HttpOrderService)
        await service.close()

    def test_env_selects_kind(self, monkeypatch):
        monkeypatch.setenv("ORDER_UI_SERVICE", "demo")
        assert isinstance(get_order_service(), DemoOrderService)

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown order service kind"):
            get_order_service("grpc")
