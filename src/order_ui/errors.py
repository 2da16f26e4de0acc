"""
Error taxonomy for order service calls.

Services raise these exceptions; the controller catches every
OrderUIError at the operation boundary and turns it into an error banner.
"""


class OrderUIError(Exception):
    """Base class for all recoverable order UI failures."""

    @property
    def detail(self) -> str:
        """Return the human readable failure detail."""
        return str(self) or self.__class__.__name__


class ValidationError(OrderUIError):
    """Raised when user input is rejected before reaching the network."""


class NotFound(OrderUIError):
    """Raised when a single-order lookup answers 404."""

    def __init__(self, uid: str) -> None:
        super().__init__(f'Order with ID "{uid}" not found')
        self.uid = uid


class HttpError(OrderUIError):
    """Raised for any non-2xx status that has no dedicated handling."""

    def __init__(self, status: int) -> None:
        super().__init__(f"HTTP error! status: {status}")
        self.status = status


class NetworkError(OrderUIError):
    """Raised on transport failures (connection, DNS, timeout)."""


class ParseError(OrderUIError):
    """Raised when a success response body cannot be decoded."""
