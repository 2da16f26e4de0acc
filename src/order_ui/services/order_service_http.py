"""
httpx-backed implementation of OrderService.

Talks to the order service HTTP API:

    GET  /orders            -> list of orders, or null
    GET  /order/{uid}       -> single order, 404 when unknown
    POST /orders/generate   -> {"order_uid": ..., "status": ...}

Transport failures become NetworkError, undecodable bodies ParseError,
and any other non-2xx status HttpError carrying the status code.
"""

import os
from typing import Any
from urllib.parse import quote

import httpx

from order_ui.errors import HttpError, NetworkError, NotFound, ParseError
from order_ui.lib import logs
from order_ui.models.order import Order, parse_order, parse_orders
from order_ui.services.order_service import OrderService

LOG = logs.logger(__file__)

# The UI calls the API from the Dash server, not the browser, so it needs an absolute host
API_BASE = os.getenv("ORDER_UI_API_BASE", "http://localhost:8080")
REQUEST_TIMEOUT = float(os.getenv("ORDER_UI_TIMEOUT", "10"))


class HttpOrderService(OrderService):
    """
    Order service client using a shared httpx.AsyncClient.

    Attributes:
        base_url: Prefix prepended to every endpoint path.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API base URL, defaults to ORDER_UI_API_BASE.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = (API_BASE if base_url is None else base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def list_orders(self) -> list[Order]:
        response = await self._request("GET", "/orders")
        _raise_for_status(response)
        return parse_orders(_json(response))

    async def get_order(self, order_uid: str) -> Order:
        response = await self._request("GET", f"/order/{quote(order_uid, safe='')}")
        if response.status_code == 404:
            raise NotFound(order_uid)
        _raise_for_status(response)
        return parse_order(_json(response))

    async def generate_order(self) -> str:
        response = await self._request(
            "POST", "/orders/generate", headers={"Content-Type": "application/json"}
        )
        _raise_for_status(response)
        body = _json(response)
        if not isinstance(body, dict) or not body.get("order_uid"):
            raise ParseError("generate response has no order_uid")
        return str(body["order_uid"])

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        LOG.debug("%s %s%s", method, self.base_url, path)
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc


def _raise_for_status(response: httpx.Response) -> None:
    if not response.is_success:
        raise HttpError(response.status_code)


def _json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ParseError(f"invalid JSON body: {exc}") from exc
