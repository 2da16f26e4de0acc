from __future__ import annotations

from dash import html
from dash_iconify import DashIconify

from order_ui.models.common import Banner, BannerKind

"""Error and success banner regions."""

_ICONS = {
    BannerKind.ERROR: "lucide:circle-alert",
    BannerKind.SUCCESS: "lucide:circle-check",
}


def build_banner(banner: Banner | None, kind: BannerKind) -> list:
    """
    Return the children of the banner region for kind.

    Each region only shows a banner of its own kind, so at most one of the
    two regions is populated at any time.
    """
    if banner is None or banner.kind is not kind:
        return []
    return [
        html.Div(
            className=kind.value,
            children=[
                DashIconify(icon=_ICONS[kind], className="banner-icon"),
                html.Span(banner.message),
            ],
        )
    ]
