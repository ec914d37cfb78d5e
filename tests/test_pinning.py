from PySide6.QtTest import QTest

from conftest import app_item, wait_until

from userapps.pinning import PinController
from userapps.state import AppsStore, loaded


def _setup(make_ctx, fail=False):
    ctx = make_ctx(fail=fail)
    store = AppsStore()
    store.dispatch(loaded(catalog=[app_item("c1"), app_item("c2")], pinned=[app_item("p1")]))
    return ctx, store, PinController(ctx, store)


def test_pin_moves_item_and_flags_it(qapp, make_ctx):
    ctx, store, pins = _setup(make_ctx)

    pins.pin(app_item("c2"))

    assert store.state.pinned_ids == ["c2", "p1"]
    assert store.state.catalog_ids == ["c1"]
    assert store.state.pinned[0].pinned is True

    # settle timer clears the animation flag
    assert wait_until(lambda: store.state.pinned[0].pinned is False)
    assert store.state.pinned_ids == ["c2", "p1"]

    ctx.persister.flush()
    assert ctx.store.writes == [("alice", ["c2", "p1"])]


def test_unpin_moves_item_back_and_flags_it(qapp, make_ctx):
    ctx, store, pins = _setup(make_ctx)

    pins.unpin(app_item("p1"))

    assert store.state.pinned_ids == []
    assert store.state.catalog_ids == ["p1", "c1", "c2"]
    assert store.state.catalog[0].unpinned is True
    assert wait_until(lambda: store.state.catalog[0].unpinned is False)

    ctx.persister.flush()
    assert ctx.store.writes == [("alice", [])]


def test_toggle_picks_direction(qapp, make_ctx):
    _ctx, store, pins = _setup(make_ctx)

    pins.toggle(app_item("c1"))
    assert "c1" in store.state.pinned_ids

    pins.toggle(app_item("p1"))
    assert "p1" in store.state.catalog_ids


# A failing write never undoes the optimistic change, and the flag still clears
def test_failed_persist_keeps_local_state(qapp, make_ctx):
    ctx, store, pins = _setup(make_ctx, fail=True)

    pins.pin(app_item("c1"))
    ctx.persister.flush()

    assert store.state.pinned_ids == ["c1", "p1"]
    assert wait_until(lambda: not store.state.pinned[0].pinned)
    assert ctx.store.writes == []


# Settle timers belong to the controller and die with it
def test_settle_timer_dropped_with_controller(qapp, make_ctx):
    _ctx, store, pins = _setup(make_ctx)

    pins.pin(app_item("c1"))
    pins.deleteLater()
    QTest.qWait(4 * _ctx.config.pin_settle_ms)

    assert store.state.pinned_ids == ["c1", "p1"]
    assert store.state.pinned[0].pinned is True
