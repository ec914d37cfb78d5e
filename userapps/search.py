#===============================================================================
#  UserApps_Pinboard | search.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Trailing-edge debounce for the search box: only the last value of a typing
#  burst is dispatched as SetSearch.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QObject, QTimer

from .state import AppsStore, SetSearch


class SearchDebouncer(QObject):
    def __init__(self, store: AppsStore, delay_ms: int, parent=None):
        super().__init__(parent)
        self.store = store
        self._pending = ""
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(self._fire)

    def on_text_changed(self, text: str) -> None:
        self._pending = text
        self._timer.start()  # restarts a running timer

    def flush(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            self._fire()

    def _fire(self) -> None:
        self.store.dispatch(SetSearch(self._pending))
