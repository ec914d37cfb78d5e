from conftest import app_item, wait_until

from userapps.apps_panel import AppsPanel
from userapps.state import AppsStore, SetSearch, loaded


def _panel(make_ctx, pinned=("p1",), catalog=("c1", "c2")):
    ctx = make_ctx()
    store = AppsStore()
    store.dispatch(loaded(
        catalog=[app_item(i, f"App {i}") for i in catalog],
        pinned=[app_item(i, f"App {i}") for i in pinned],
    ))
    return ctx, AppsPanel(ctx, store)


def _ids(tile_list):
    return [tile_list.app_at_row(r).id for r in range(tile_list.count())]


def test_panel_renders_both_lists(qapp, make_ctx):
    _ctx, panel = _panel(make_ctx)

    assert _ids(panel.pinned_list) == ["p1"]
    assert _ids(panel.catalog_list) == ["c1", "c2"]
    assert panel.pinned_empty.isHidden()
    assert panel.catalog_empty.isHidden()
    assert panel.search_box.placeholderText() == "Search applications"


def test_empty_states_only_after_load(qapp, make_ctx):
    ctx = make_ctx()
    panel = AppsPanel(ctx, AppsStore())
    assert panel.pinned_empty.isHidden()

    panel.store.dispatch(loaded(catalog=[app_item("c1")], pinned=[]))

    assert not panel.pinned_empty.isHidden()
    assert panel.catalog_empty.isHidden()


def test_pin_button_moves_tile(qapp, make_ctx):
    ctx, panel = _panel(make_ctx)
    tile = panel.catalog_list.itemWidget(panel.catalog_list.item(1))

    tile.pin_button.click()

    assert _ids(panel.pinned_list) == ["c2", "p1"]
    assert _ids(panel.catalog_list) == ["c1"]
    ctx.persister.flush()
    assert ctx.store.writes[-1] == ("alice", ["c2", "p1"])


def test_search_box_filters_after_debounce(qapp, make_ctx):
    _ctx, panel = _panel(make_ctx, catalog=("mail", "chat"))

    panel.search_box.setText("MAI")

    assert wait_until(lambda: _ids(panel.catalog_list) == ["mail"])
    assert panel.store.state.catalog_ids == ["mail", "chat"]


def test_catalog_view_sorted_by_order_then_name(qapp, make_ctx):
    ctx = make_ctx()
    store = AppsStore()
    store.dispatch(loaded(
        catalog=[
            app_item("n", "no order"),
            app_item("z", "Zeta", order=3),
            app_item("m", "mu", order=1),
            app_item("a", "Alpha", order=1),
        ],
        pinned=[],
    ))

    panel = AppsPanel(ctx, store)

    assert _ids(panel.catalog_list) == ["a", "m", "z", "n"]
    assert store.state.catalog_ids == ["n", "z", "m", "a"]


def test_empty_texts_without_search(qapp, make_ctx):
    ctx = make_ctx()
    panel = AppsPanel(ctx, AppsStore())

    panel.store.dispatch(loaded(catalog=[], pinned=[]))

    assert panel.pinned_empty.text() == "You have not pinned any applications yet."
    assert panel.catalog_empty.text() == "There are no applications available."
    assert not panel.catalog_empty.isHidden()


def test_empty_texts_while_searching(qapp, make_ctx):
    _ctx, panel = _panel(make_ctx)

    panel.store.dispatch(SetSearch("nothing like this"))

    assert not panel.pinned_empty.isHidden()
    assert not panel.catalog_empty.isHidden()
    assert panel.pinned_empty.text() == "No applications match your search."
    assert panel.catalog_empty.text() == "No applications match your search."

    panel.store.dispatch(SetSearch(""))
    assert panel.pinned_empty.isHidden()
    assert panel.pinned_empty.text() == "You have not pinned any applications yet."
