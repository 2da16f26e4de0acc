"""
Common state models for the Order Browser UI application.

This module defines shared state objects:

- Banner: transient error / success status message
- ViewState: everything the Dash layer needs to render one page state,
  serialized to dcc.Store between callbacks

All models include to_dict/from_dict methods for JSON serialization
required by Dash's dcc.Store component.
"""

from dataclasses import dataclass, field
from enum import Enum


class BannerKind(str, Enum):
    """Kind of status banner shown to the operator."""

    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class Banner:
    """A transient status message."""

    kind: BannerKind
    message: str

    @classmethod
    def error(cls, message: str) -> "Banner":
        return cls(BannerKind.ERROR, message)

    @classmethod
    def success(cls, message: str) -> "Banner":
        return cls(BannerKind.SUCCESS, message)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return {"kind": self.kind.value, "message": self.message}

    @classmethod
    def from_dict(cls, data: dict | None) -> "Banner | None":
        """Deserialize from dictionary."""
        if not data:
            return None
        return cls(BannerKind(data.get("kind", "error")), data.get("message", ""))


@dataclass
class ViewState:
    """
    Unified page state stored in dcc.Store.

    Orders are kept in their serialized wire form. visible_uids holds the
    ids of the filtered view in display order.

    Attributes:
        orders: Serialized list of all orders from the last fetch.
        visible_uids: Ids of the orders currently displayed.
        banner: Current status banner, if any.
        loading: Whether the loading indicator is shown.
        create_busy: Whether the create control is disabled.
        detail: Serialized order shown in the detail panel, if any.
        query: Current search box contents.
    """

    orders: list[dict] = field(default_factory=list)
    visible_uids: list[str] = field(default_factory=list)
    banner: Banner | None = None
    loading: bool = False
    create_busy: bool = False
    detail: dict | None = None
    query: str = ""

    def to_dict(self) -> dict:
        """Serialize state to JSON-compatible dictionary."""
        return {
            "orders": self.orders,
            "visible_uids": self.visible_uids,
            "banner": self.banner.to_dict() if self.banner else None,
            "loading": self.loading,
            "create_busy": self.create_busy,
            "detail": self.detail,
            "query": self.query,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "ViewState":
        """Deserialize dictionary to ViewState."""
        if not data:
            return cls()
        return cls(
            orders=data.get("orders", []),
            visible_uids=data.get("visible_uids", []),
            banner=Banner.from_dict(data.get("banner")),
            loading=data.get("loading", False),
            create_busy=data.get("create_busy", False),
            detail=data.get("detail"),
            query=data.get("query", ""),
        )
