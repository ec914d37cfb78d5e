#===============================================================================
#  UserApps_Pinboard | loader.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Loads catalog + saved ids off the UI thread and hands the merged result
#  back through a Qt signal.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import threading

from PySide6.QtCore import QObject, Signal

from .catalog import MergeResult, merge_and_heal
from .context import AppContext
from .state import AppsStore, loaded

log = logging.getLogger(__name__)


def load_user_apps(ctx: AppContext) -> MergeResult:
    """Blocking load: catalog for the active locale, the user's ids, merge + repair."""
    locale = ctx.language.dashed
    entries = ctx.catalog_source.fetch_catalog(locale)
    saved_ids = ctx.store.read_ids(ctx.user_id)
    return merge_and_heal(entries, locale, saved_ids, repair=ctx.persister.submit)


class LoadSignals(QObject):
    finished = Signal(object)
    failed = Signal(str)


class AppsLoader(QObject):
    """Runs load_user_apps on a worker thread and dispatches Loaded into the store."""

    def __init__(self, ctx: AppContext, store: AppsStore, parent=None):
        super().__init__(parent)
        self.ctx = ctx
        self.store = store
        self.last_error = ""
        self._signals = LoadSignals()
        self._signals.finished.connect(self._on_finished)
        self._signals.failed.connect(self._on_failed)
        self._thread = None

    def start(self) -> None:
        if self.store.state.loaded:
            return
        if self._thread and self._thread.is_alive():
            return

        def worker():
            try:
                result = load_user_apps(self.ctx)
            except Exception as e:
                log.exception("Loading apps failed")
                self._signals.failed.emit(str(e))
                return
            self._signals.finished.emit(result)

        self._thread = threading.Thread(target=worker, name="userapps-load", daemon=True)
        self._thread.start()

    def _on_finished(self, result: MergeResult) -> None:
        self.store.dispatch(loaded(result.catalog, result.pinned))

    def _on_failed(self, message: str) -> None:
        self.last_error = message
