"""
Per-callback dispatch: ViewState in, controller operation, ViewState out.
"""

import pytest

from conftest import make_payload
from order_ui.models.common import Banner, BannerKind, ViewState
from order_ui.services import DemoOrderService
from order_ui.session import dispatch, restore_store


@pytest.fixture
def demo():
    return DemoOrderService(
        payloads=[
            make_payload("A1", name="Jane"),
            make_payload("C3", name="Ivan", city="Moscow"),
        ]
    )


async def _loaded(demo) -> ViewState:
    return await dispatch("load", ViewState(loading=True), demo)


class TestDispatch:

    async def test_load(self, demo):
        view = await _loaded(demo)
        assert [o["order_uid"] for o in view.orders] == ["A1", "C3"]
        assert view.visible_uids == ["A1", "C3"]
        assert not view.loading
        assert view.banner is None

    async def test_filter_keeps_all_orders(self, demo):
        view = await dispatch("filter", await _loaded(demo), demo, "moscow")
        assert view.visible_uids == ["C3"]
        assert len(view.orders) == 2
        assert view.query == "moscow"

    async def test_filter_survives_restore(self, demo):
        view = await dispatch("filter", await _loaded(demo), demo, "jane")
        store = restore_store(ViewState.from_dict(view.to_dict()))
        assert [o.order_uid for o in store.visible_orders] == ["A1"]
        assert len(store.all_orders) == 2

    async def test_server_search(self, demo):
        view = await dispatch(
            "search", await _loaded(demo), demo, "C3", search_mode="server"
        )
        assert view.visible_uids == ["C3"]
        assert [o["order_uid"] for o in view.orders] == ["C3"]
        assert view.banner == Banner.success("Found order: C3")

    async def test_server_search_not_found(self, demo):
        view = await dispatch(
            "search", await _loaded(demo), demo, "nope", search_mode="server"
        )
        assert view.orders == []
        assert view.visible_uids == []
        assert view.banner.kind is BannerKind.ERROR

    async def test_local_search(self, demo):
        view = await dispatch(
            "search", await _loaded(demo), demo, "ivan", search_mode="local"
        )
        assert view.visible_uids == ["C3"]

    async def test_create(self, demo):
        view = await dispatch("create", await _loaded(demo), demo)
        assert len(view.orders) == 3
        assert view.banner.kind is BannerKind.SUCCESS
        assert "created successfully" in view.banner.message
        assert not view.create_busy

    async def test_refresh_clears_query(self, demo):
        view = await dispatch("filter", await _loaded(demo), demo, "jane")
        view = await dispatch("refresh", view, demo)
        assert view.query == ""
        assert view.visible_uids == ["A1", "C3"]

    async def test_details_and_close(self, demo):
        view = await dispatch("details", await _loaded(demo), demo, "A1")
        assert view.detail["order_uid"] == "A1"
        assert view.visible_uids == ["A1", "C3"]
        view = await dispatch("close_detail", view, demo)
        assert view.detail is None

    async def test_clear_banner(self, demo):
        view = await _loaded(demo)
        view.banner = Banner.error("boom")
        view = await dispatch("clear_banner", view, demo)
        assert view.banner is None

    async def test_unknown_action(self, demo):
        with pytest.raises(ValueError, match="Unknown action"):
            await dispatch("explode", ViewState(), demo)
