"""
Dash application entry point for the Order Browser UI.

Wires the page controls to order_ui.session.dispatch. List, create and
detail callbacks restore the ViewState from dcc.Store, run one controller
operation and render the result. Callbacks that change only part of the
state return a Patch, so a slower callback never writes back an older
order list.
"""

import asyncio
import os
from pathlib import Path

from dash import ALL, Dash, Input, Output, Patch, State, ctx, no_update
from dash.exceptions import PreventUpdate

from order_ui.components.banners import build_banner
from order_ui.components.order_detail import build_order_detail
from order_ui.components.order_results import build_order_results, summary_text
from order_ui.components.order_search import CREATE_BUSY_LABEL, CREATE_LABEL
from order_ui.layout import APP_TITLE, build_layout
from order_ui.lib import logs
from order_ui.models.common import Banner, BannerKind, ViewState
from order_ui.models.order import deserialize_order
from order_ui.services import get_order_service
from order_ui.session import Action, dispatch, restore_store

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("ORDER_UI_PORT", "8050"))
DEBUG = os.getenv("ORDER_UI_DEBUG", "false").lower() in {"1", "true", "yes"}
SERVICE_KIND = os.getenv("ORDER_UI_SERVICE", "http").lower()
LOG.info("ORDER_UI_SERVICE: %s", SERVICE_KIND)

# The demo service keeps generated orders in memory, so it must outlive a
# single callback. httpx clients are bound to the event loop of the callback
# that created them and are opened per request instead.
_SHARED_SERVICE = get_order_service("demo") if SERVICE_KIND == "demo" else None

_assets_path = Path(__file__).resolve().parent / "assets"

app = Dash(__name__, title=APP_TITLE, assets_folder=str(_assets_path))
app.layout = build_layout()



# Shown only while a list-fetch or lookup is in flight
LOADING_RUNNING = [
    (Output("loading-message", "style"), {"display": "block"}, {"display": "none"}),
    (Output("orders-container", "style"), {"display": "none"}, {"display": "grid"}),
]
CREATE_RUNNING = [
    (Output("create-order-btn", "disabled"), True, False),
    (Output("create-order-btn", "children"), CREATE_BUSY_LABEL, CREATE_LABEL),
]


async def _run(action: Action, view: ViewState, argument: str | None) -> ViewState:
    service = _SHARED_SERVICE or get_order_service(SERVICE_KIND)
    try:
        return await dispatch(action, view, service, argument)
    finally:
        if service is not _SHARED_SERVICE:
            await service.close()


def _resolve_action(
    triggered_id: str | dict | None, query: str | None
) -> tuple[Action, str | None]:
    """Map the list control that fired the callback to a controller action."""
    if triggered_id in (None, "initial-load-trigger", "auto-refresh"):
        return "load", None
    if triggered_id in ("search-btn", "search-input"):
        return "search", query
    if triggered_id == "refresh-btn":
        return "refresh", None
    raise PreventUpdate


def _resolve_detail_action(triggered_id: dict | None) -> tuple[Action, str | None]:
    """Map a card or close button click to a detail action."""
    if isinstance(triggered_id, dict):
        if triggered_id.get("type") == "order-card":
            return "details", triggered_id.get("index")
        if triggered_id.get("type") == "close-detail":
            return "close_detail", None
    raise PreventUpdate


def _ignore_unclicked() -> None:
    # Pattern-matching inputs also fire when components are re-rendered with n_clicks=0
    if ctx.triggered_id is not None and not ctx.triggered[0]["value"]:
        raise PreventUpdate


def banner_outputs(banner: Banner | None) -> tuple:
    """Return the banner regions and the banner timer state for a banner."""
    return (
        build_banner(banner, BannerKind.ERROR),
        build_banner(banner, BannerKind.SUCCESS),
        banner is None,
        0,
    )


def render(view: ViewState) -> tuple:
    """Return the values of the list callback outputs for a ViewState."""
    store = restore_store(view)
    detail = deserialize_order(view.detail) if view.detail else None
    error, success, timer_disabled, timer_intervals = banner_outputs(view.banner)
    return (
        view.to_dict(),
        build_order_results(store.visible_orders),
        summary_text(len(store.visible_orders), len(store.all_orders)),
        error,
        success,
        {"display": "block" if view.loading else "none"},
        {"display": "none" if view.loading else "grid"},
        build_order_detail(detail),
        timer_disabled,
        timer_intervals,
        view.query,
    )


def detail_patch(view: ViewState) -> Patch:
    """Return a view-state update that touches only the detail and banner."""
    patch = Patch()
    patch["detail"] = view.detail
    patch["banner"] = view.banner.to_dict() if view.banner else None
    return patch


def banner_cleared_patch() -> Patch:
    """Return a view-state update that removes the banner and nothing else."""
    patch = Patch()
    patch["banner"] = None
    return patch


def _list_outputs(allow_duplicate: bool = False) -> list[Output]:
    return [
        Output("view-state", "data", allow_duplicate=allow_duplicate),
        Output("orders-container", "children", allow_duplicate=allow_duplicate),
        Output("order-count", "children", allow_duplicate=allow_duplicate),
        Output("error-message", "children", allow_duplicate=allow_duplicate),
        Output("success-message", "children", allow_duplicate=allow_duplicate),
        Output("loading-message", "style", allow_duplicate=allow_duplicate),
        Output("orders-container", "style", allow_duplicate=allow_duplicate),
        Output("detail-container", "children", allow_duplicate=allow_duplicate),
        Output("banner-timer", "disabled", allow_duplicate=allow_duplicate),
        Output("banner-timer", "n_intervals", allow_duplicate=allow_duplicate),
        Output("search-input", "value", allow_duplicate=allow_duplicate),
    ]


@app.callback(
    *_list_outputs(),
    Input("initial-load-trigger", "data"),
    Input("search-btn", "n_clicks"),
    Input("search-input", "n_submit"),
    Input("refresh-btn", "n_clicks"),
    Input("auto-refresh", "n_intervals"),
    State("search-input", "value"),
    State("view-state", "data"),
    running=LOADING_RUNNING,
)
def handle_action(*args: object) -> tuple:
    """Run the load, search or refresh operation for whichever control fired."""
    query, state_data = args[-2], args[-1]
    _ignore_unclicked()
    action, argument = _resolve_action(ctx.triggered_id, query)
    view = asyncio.run(_run(action, ViewState.from_dict(state_data), argument))
    return render(view)


@app.callback(
    *_list_outputs(allow_duplicate=True),
    Input("create-order-btn", "n_clicks"),
    State("view-state", "data"),
    running=CREATE_RUNNING + LOADING_RUNNING,
    prevent_initial_call=True,
)
def handle_create(n_clicks: int, state_data: dict | None) -> tuple:
    """Generate an order, then show the refreshed list."""
    if not n_clicks:
        raise PreventUpdate
    view = asyncio.run(_run("create", ViewState.from_dict(state_data), None))
    return render(view)


@app.callback(
    Output("view-state", "data", allow_duplicate=True),
    Output("detail-container", "children", allow_duplicate=True),
    Output("error-message", "children", allow_duplicate=True),
    Output("success-message", "children", allow_duplicate=True),
    Output("banner-timer", "disabled", allow_duplicate=True),
    Output("banner-timer", "n_intervals", allow_duplicate=True),
    Input({"type": "order-card", "index": ALL}, "n_clicks"),
    Input({"type": "close-detail", "index": ALL}, "n_clicks"),
    State("view-state", "data"),
    prevent_initial_call=True,
)
def handle_detail(
    card_clicks: list, close_clicks: list, state_data: dict | None
) -> tuple:
    """Open or close the detail panel without touching the order list."""
    _ignore_unclicked()
    action, order_uid = _resolve_detail_action(ctx.triggered_id)
    if action == "close_detail":
        patch = Patch()
        patch["detail"] = None
        return patch, None, no_update, no_update, no_update, no_update

    before = ViewState.from_dict(state_data)
    view = asyncio.run(_run(action, ViewState.from_dict(state_data), order_uid))
    detail = deserialize_order(view.detail) if view.detail else None
    banners = (
        banner_outputs(view.banner)
        if view.banner != before.banner
        else (no_update,) * 4
    )
    return (detail_patch(view), build_order_detail(detail), *banners)


@app.callback(
    Output("view-state", "data", allow_duplicate=True),
    Output("error-message", "children", allow_duplicate=True),
    Output("success-message", "children", allow_duplicate=True),
    Output("banner-timer", "disabled", allow_duplicate=True),
    Input("banner-timer", "n_intervals"),
    prevent_initial_call=True,
)
def clear_banner(n_intervals: int) -> tuple:
    """Hide the banner once its lifetime has elapsed."""
    if not n_intervals:
        raise PreventUpdate
    return banner_cleared_patch(), [], [], True


def main() -> None:
    """Entrypoint used by `order-ui`."""
    app.run(debug=DEBUG, host="0.0.0.0", port=APP_PORT)


if __name__ == "__main__":
    main()
