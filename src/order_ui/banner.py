"""
Status banner with a cancellable auto-clear timer.

Only one banner is visible at a time. Showing a new banner replaces the
previous one and cancels its pending auto-clear, so a banner is never
removed early by a timer that belonged to its predecessor.
"""

import asyncio
import os

from order_ui.lib import logs
from order_ui.models.common import Banner
from order_ui.presenter import OrderPresenter

LOG = logs.logger(__file__)

BANNER_TIMEOUT = int(os.getenv("ORDER_UI_BANNER_TIMEOUT_MS", "5000")) / 1000


class StatusBanner:
    """
    Owns the current banner and its auto-clear timer.

    Attributes:
        timeout: Seconds a banner stays visible; None or 0 disables auto-clear.
    """

    def __init__(
        self, presenter: OrderPresenter, timeout: float | None = BANNER_TIMEOUT
    ) -> None:
        self._presenter = presenter
        self.timeout = timeout
        self.current: Banner | None = None
        self._timer: asyncio.TimerHandle | None = None

    def show_error(self, message: str) -> None:
        self.show(Banner.error(message))

    def show_success(self, message: str) -> None:
        self.show(Banner.success(message))

    def show(self, banner: Banner) -> None:
        """Display a banner and schedule its auto-clear."""
        self.cancel()
        self.current = banner
        self._presenter.show_banner(banner)
        self._schedule_clear()

    def hide(self) -> None:
        """Remove the banner; safe to call when nothing is shown."""
        self.cancel()
        if self.current is None:
            return
        self.current = None
        self._presenter.hide_banner()

    @property
    def pending(self) -> bool:
        """True while an auto-clear is scheduled."""
        return self._timer is not None

    def _schedule_clear(self) -> None:
        if not self.timeout:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            LOG.debug("No running event loop, banner will not auto-clear")
            return
        self._timer = loop.call_later(self.timeout, self._expire)

    def _expire(self) -> None:
        self._timer = None
        try:
            self.hide()
        except Exception:
            LOG.warning("Failed to clear status banner", exc_info=True)

    def cancel(self) -> None:
        """Drop any pending auto-clear without touching the banner."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
