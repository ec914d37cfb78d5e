from PySide6.QtTest import QTest

from conftest import wait_until

from userapps.search import SearchDebouncer
from userapps.state import AppsStore, SetSearch


def test_only_last_value_of_burst_is_dispatched(qapp):
    store = AppsStore()
    seen = []
    store.changed.connect(lambda s: seen.append(s.search_text))
    debounce = SearchDebouncer(store, 50)

    for text in ("m", "ma", "mai", "mail"):
        debounce.on_text_changed(text)
        QTest.qWait(5)

    assert store.state.search_text == ""
    assert wait_until(lambda: store.state.search_text == "mail")
    QTest.qWait(80)
    assert seen == ["mail"]


def test_flush_dispatches_pending_text(qapp):
    store = AppsStore()
    debounce = SearchDebouncer(store, 10_000)

    debounce.on_text_changed("cal")
    debounce.flush()

    assert store.state.search_text == "cal"


def test_flush_without_pending_is_noop(qapp):
    store = AppsStore()
    store.dispatch(SetSearch("x"))
    debounce = SearchDebouncer(store, 10)

    debounce.flush()

    assert store.state.search_text == "x"
