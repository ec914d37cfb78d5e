#===============================================================================
#  UserApps_Pinboard | apps_panel.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Management panel:
#    - Search box (debounced) filtering both lists by name
#    - "My applications": pinned tiles, drag & drop ordering (persisted)
#    - "All applications": catalog tiles not pinned yet
#    - Pin button on every tile toggles between the two lists
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QLabel, QLineEdit, QSplitter, QVBoxLayout, QWidget
from PySide6.QtCore import Qt

from . import strings as S
from .constants import METRO_BG
from .context import AppContext
from .loader import AppsLoader
from .pinning import PinController
from .reorder import DragReorderCoordinator
from .search import SearchDebouncer
from .state import AppsState, AppsStore
from .ui_widgets import PinnedTileList, TileList


class AppsPanel(QWidget):
    def __init__(self, ctx: AppContext, store: Optional[AppsStore] = None, parent=None):
        super().__init__(parent)
        self.ctx = ctx
        self.store = store if store is not None else AppsStore(parent=self)
        self.pins = PinController(ctx, self.store, self)
        self.reorder = DragReorderCoordinator(ctx, self.store)
        self.search = SearchDebouncer(self.store, ctx.config.search_debounce_ms, self)
        self.loader = AppsLoader(ctx, self.store, self)

        family = ctx.config.font_family
        self.setObjectName("AppsPanel")
        self.setStyleSheet(f"""
        QWidget#AppsPanel {{ background: {METRO_BG}; }}
        QLabel {{ color: white; font-family: "{family}"; }}
        QLineEdit {{
            font-family: "{family}";
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 6px 10px;
        }}
        QListWidget {{ background: transparent; border: none; }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        self.search_box = QLineEdit()
        self.search_box.setPlaceholderText(ctx.text(S.SEARCH_BOX_PLACEHOLDER))
        self.search_box.setClearButtonEnabled(True)
        self.search_box.textChanged.connect(self.search.on_text_changed)
        layout.addWidget(self.search_box)

        split = QSplitter(Qt.Vertical)
        layout.addWidget(split, 1)

        self.pinned_title = QLabel(f"<b>{ctx.text(S.MY_APPLICATIONS_TITLE)}</b>")
        self.pinned_empty = QLabel(ctx.text(S.NO_APPLICATIONS_PINNED))
        self.pinned_list = PinnedTileList(self.reorder)
        split.addWidget(self._section(self.pinned_title, self.pinned_empty, self.pinned_list))

        self.catalog_title = QLabel(f"<b>{ctx.text(S.ALL_APPLICATIONS_TITLE)}</b>")
        self.catalog_empty = QLabel(ctx.text(S.NO_APPLICATIONS_AVAILABLE))
        self.catalog_list = TileList()
        split.addWidget(self._section(self.catalog_title, self.catalog_empty, self.catalog_list))

        self.store.changed.connect(self.render)
        self.render(self.store.state)

    def _section(self, title: QLabel, empty: QLabel, tiles: TileList) -> QWidget:
        w = QWidget()
        lay = QVBoxLayout(w)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(title)
        lay.addWidget(empty)
        lay.addWidget(tiles, 1)
        return w

    def showEvent(self, event):
        super().showEvent(event)
        self.loader.start()

    def render(self, state: AppsState) -> None:
        family = self.ctx.config.font_family
        pinned = self.store.visible_pinned()
        catalog = self.store.visible_catalog()

        self.pinned_list.set_items(pinned, True, self.ctx.text(S.UNPIN_SCREENREADER_TEXT), self.pins.unpin, family)
        self.catalog_list.set_items(catalog, False, self.ctx.text(S.PIN_SCREENREADER_TEXT), self.pins.pin, family)

        searching = bool(state.search_text)
        self.pinned_empty.setText(self.ctx.text(S.NO_APPLICATIONS_FOUND if searching else S.NO_APPLICATIONS_PINNED))
        self.catalog_empty.setText(self.ctx.text(S.NO_APPLICATIONS_FOUND if searching else S.NO_APPLICATIONS_AVAILABLE))

        # empty-state labels only once data is there, never while loading
        self.pinned_empty.setVisible(state.loaded and not pinned)
        self.catalog_empty.setVisible(state.loaded and not catalog)
