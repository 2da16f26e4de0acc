"""
Abstract base class defining the order data access contract.

All order service implementations must extend OrderService and provide
the three calls the controller issues: list, single lookup and create.
Failures are reported by raising the exceptions in order_ui.errors.

Implementations:
- DemoOrderService: In-memory orders for development/testing
- HttpOrderService: httpx client for the order service API
"""

from abc import ABC, abstractmethod

from order_ui.models.order import Order


class OrderService(ABC):
    """
    Abstract base class for order data access.

    Every call is a coroutine so the controller can keep serving other
    operations while a request is outstanding.
    """

    @abstractmethod
    async def list_orders(self) -> list[Order]:
        """
        Return every order known to the service.

        Raises:
            HttpError, NetworkError, ParseError
        """

    @abstractmethod
    async def get_order(self, order_uid: str) -> Order:
        """
        Return a single order by id.

        Raises:
            NotFound: If the service has no such order.
            HttpError, NetworkError, ParseError
        """

    @abstractmethod
    async def generate_order(self) -> str:
        """
        Ask the service to generate a new order and return its order_uid.

        Raises:
            HttpError, NetworkError, ParseError
        """

    async def close(self) -> None:
        """Release any held resources. Default implementation does nothing."""
