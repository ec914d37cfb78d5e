"""Pytest configuration: project root on sys.path, headless Qt, shared helpers.

Qt runs with the offscreen platform so the widget tests work without a display.
"""

import os
import sys
import time
from pathlib import Path

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtTest import QTest  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from userapps.config import AppConfig  # noqa: E402
from userapps.context import AppContext  # noqa: E402
from userapps.models import AppViewItem, CatalogEntry, LanguageInfo  # noqa: E402
from userapps.persistence import PersistWorker  # noqa: E402
from userapps.store import JsonCatalogSource, JsonUserAppStore  # noqa: E402
from userapps.strings import builtin_strings  # noqa: E402


@pytest.fixture(autouse=True)
def clean_userapps_env(monkeypatch):
    """Keep a developer's USERAPPS_* variables out of AppConfig()."""
    for name in list(os.environ):
        if name.upper().startswith("USERAPPS_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def wait_until(predicate, timeout_ms=2000, step_ms=10):
    """Spin the Qt event loop until `predicate()` is true or the timeout hits."""
    deadline = time.monotonic() + timeout_ms / 1000.0
    while time.monotonic() < deadline:
        if predicate():
            return True
        QTest.qWait(step_ms)
    return bool(predicate())


def app_item(app_id, name=None, **kw):
    return AppViewItem(id=app_id, name=name or app_id.upper(), **kw)


def entry(app_id, locale="Default", title=None, **kw):
    return CatalogEntry(id=app_id, title=title or app_id.upper(), locale=locale, **kw)


class RecordingStore(JsonUserAppStore):
    """JSON store that also remembers every write, in order."""

    def __init__(self, path: Path, fail=False):
        super().__init__(path)
        self.writes = []
        self.fail = fail

    def write_ids(self, user_id, ordered_ids):
        if self.fail:
            raise RuntimeError("store is down")
        self.writes.append((user_id, list(ordered_ids)))
        super().write_ids(user_id, ordered_ids)


@pytest.fixture
def config(tmp_path):
    return AppConfig(
        state_dir=tmp_path / "state",
        catalog_file=tmp_path / "catalog.json",
        pin_settle_ms=30,
        unpin_settle_ms=20,
        search_debounce_ms=40,
        locale="en-US",
    )


@pytest.fixture
def make_ctx(config, tmp_path):
    """Build an AppContext around a RecordingStore; call with store kwargs."""
    workers = []

    def _make(fail=False, user_id="alice", locale="en-US"):
        store = RecordingStore(tmp_path / "user_apps.json", fail=fail)
        persister = PersistWorker(store, user_id)
        workers.append(persister)
        return AppContext(
            config=config,
            catalog_source=JsonCatalogSource(config.catalog_file),
            store=store,
            persister=persister,
            user_id=user_id,
            language=LanguageInfo.from_code(locale),
            strings=builtin_strings(),
        )

    yield _make
    for w in workers:
        w.stop()
