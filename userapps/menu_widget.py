#===============================================================================
#  UserApps_Pinboard | menu_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Header button mounted into the host: drops down the pinned apps and a
#  "manage" entry.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenu, QToolButton

from . import strings as S
from .constants import COLOR_CALLOUT_FONT
from .context import AppContext
from .launcher import open_link
from .loader import AppsLoader
from .state import AppsState, AppsStore


class UserAppsMenuButton(QToolButton):
    """Menu of pinned apps. Loads lazily the first time it is opened."""

    manage_requested = Signal()

    def __init__(self, ctx: AppContext, store: AppsStore, parent=None):
        super().__init__(parent)
        self.ctx = ctx
        self.store = store
        self.loader = AppsLoader(ctx, store, self)

        self.setObjectName("UserAppsMenuButton")
        self.setText(ctx.text(S.MY_APPLICATIONS_BUTTON))
        self.setPopupMode(QToolButton.InstantPopup)
        self.setStyleSheet(f"""
        QToolButton#UserAppsMenuButton {{
            font-family: "{ctx.config.font_family}";
            color: {ctx.config.color_widget_text};
            background: {ctx.config.color_primary};
            border: none;
            padding: 6px 10px;
        }}
        QMenu {{
            font-family: "{ctx.config.font_family}";
            color: {COLOR_CALLOUT_FONT};
            background: white;
        }}
        """)

        self._menu = QMenu(self)
        self._menu.aboutToShow.connect(self.loader.start)
        self.setMenu(self._menu)

        self.store.changed.connect(self.render)
        self.render(self.store.state)

    def render(self, state: AppsState) -> None:
        self._menu.clear()
        self._menu.setTitle(self.ctx.text(S.MY_APPLICATIONS_TITLE))

        if state.loaded and not state.pinned:
            empty = QAction(self.ctx.text(S.NO_APPLICATIONS_PINNED), self._menu)
            empty.setEnabled(False)
            self._menu.addAction(empty)

        for app in state.pinned:
            act = QAction(app.name, self._menu)
            act.setToolTip(app.description)
            act.triggered.connect(lambda checked=False, url=app.url: open_link(url))
            self._menu.addAction(act)

        self._menu.addSeparator()
        manage = QAction(self.ctx.text(S.MANAGE_USER_APPS), self._menu)
        manage.triggered.connect(self._manage)
        self._menu.addAction(manage)

    def _manage(self) -> None:
        self.manage_requested.emit()
        if self.ctx.config.uses_sharepoint:
            open_link(self.ctx.config.management_url)
