#===============================================================================
#  UserApps_Pinboard | extension.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Attaches the pinboard to a host window. On every "host ready" notification
#  the collapsible header watcher is activated and a fresh locator looks for
#  the primary mount point; both mount the same header menu.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QWidget

from . import strings as S
from .apps_panel import AppsPanel
from .context import AppContext
from .host_locator import (
    CollapsibleHeaderWatcher,
    HostEvents,
    HostMarkers,
    HostMountLocator,
    ensure_container,
    mount_into,
)
from .menu_widget import UserAppsMenuButton
from .state import AppsStore

log = logging.getLogger(__name__)


class UserAppsExtension(QObject):
    def __init__(self, ctx: AppContext, host_root: QWidget, host_events: HostEvents, markers: Optional[HostMarkers] = None, parent=None):
        super().__init__(parent)
        self.ctx = ctx
        self.host_root = host_root
        self.host_events = host_events
        self.markers = markers or HostMarkers()
        self.store = AppsStore(parent=self)

        self.locator: Optional[HostMountLocator] = None
        self.header_watcher: Optional[CollapsibleHeaderWatcher] = None
        self.mounted: Optional[QWidget] = None
        self.panel: Optional[AppsPanel] = None
        self._remove_listener: Optional[Callable[[], None]] = None

    def attach(self) -> None:
        if self._remove_listener is None:
            self._remove_listener = self.host_events.add_ready_listener(self.on_host_ready)
            self.ctx.persister.start()

    def detach(self) -> None:
        if self._remove_listener is not None:
            self._remove_listener()
            self._remove_listener = None
        self._drop_watchers()
        self.ctx.persister.stop()

    def _drop_watchers(self) -> None:
        for obj in (self.locator, self.header_watcher):
            if obj is not None:
                obj.stop()
                obj.deleteLater()
        self.locator = None
        self.header_watcher = None

    def on_host_ready(self) -> None:
        log.info("Host ready, attaching")
        self._drop_watchers()

        self.header_watcher = CollapsibleHeaderWatcher(self.host_root, self.build_menu, self.markers, self)
        if not self.header_watcher.activate():
            log.debug("No header row, collapsible header not watched")

        self.locator = HostMountLocator(self.host_root, self.markers, self)
        self.locator.locate(self._mount, self._on_locator_error)

    def _mount(self, anchor: QWidget) -> None:
        container = ensure_container(self.host_root, anchor, self.markers.mount_id)
        self.mounted = mount_into(container, self.build_menu)

    def _on_locator_error(self, e: Exception) -> None:
        log.error("Mounting user apps failed: %s", e)

    def build_menu(self, parent: QWidget) -> QWidget:
        button = UserAppsMenuButton(self.ctx, self.store, parent)
        if not self.ctx.config.uses_sharepoint:
            button.manage_requested.connect(self.show_panel)
        return button

    def show_panel(self) -> AppsPanel:
        if self.panel is None:
            self.panel = AppsPanel(self.ctx, self.store)
            self.panel.setWindowTitle(self.ctx.text(S.MANAGE_USER_APPS))
            self.panel.resize(360, 640)
        self.panel.show()
        self.panel.raise_()
        return self.panel
