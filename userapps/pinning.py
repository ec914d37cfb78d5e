#===============================================================================
#  UserApps_Pinboard | pinning.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Optimistic pin / unpin. Local state changes immediately, the new pinned
#  order is written in the background, and a settle timer clears the
#  animation flag independently of the write.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer

from .context import AppContext
from .models import AppViewItem
from .state import AddCatalog, AddPinned, AppsStore, RemoveCatalog, RemovePinned, UpdateCatalog, UpdatePinned

log = logging.getLogger(__name__)


class PinController(QObject):
    def __init__(self, ctx: AppContext, store: AppsStore, parent=None):
        super().__init__(parent)
        self.ctx = ctx
        self.store = store

    def pin(self, item: AppViewItem) -> None:
        self.store.dispatch(RemoveCatalog(item))
        self.store.dispatch(AddPinned(item.with_flags(pinned=True)))

        settled = item.with_flags()
        QTimer.singleShot(self.ctx.config.pin_settle_ms, self, lambda: self.store.dispatch(UpdatePinned(settled)))

        self._persist("pin", item)

    def unpin(self, item: AppViewItem) -> None:
        self.store.dispatch(RemovePinned(item))
        self.store.dispatch(AddCatalog(item.with_flags(unpinned=True)))

        settled = item.with_flags()
        QTimer.singleShot(self.ctx.config.unpin_settle_ms, self, lambda: self.store.dispatch(UpdateCatalog(settled)))

        self._persist("unpin", item)

    def toggle(self, item: AppViewItem) -> None:
        if item.id in self.store.state.pinned_ids:
            self.unpin(item)
        else:
            self.pin(item)

    def _persist(self, gesture: str, item: AppViewItem) -> None:
        ids = self.store.state.pinned_ids
        log.info("%s %s -> %d pinned", gesture, item.id, len(ids))
        try:
            self.ctx.persister.submit(ids)
        except Exception:
            log.exception("Error in %s for %s", gesture, item.id)
