#===============================================================================
#  UserApps_Pinboard | ui_widgets.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Tile lists. The pinned list forwards drag gestures to the reorder
#  coordinator instead of letting Qt move rows itself, so the state store
#  stays the only owner of the order.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from PySide6.QtCore import QLine, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QAbstractItemView, QListWidget, QListWidgetItem

from .constants import TILE_SIZE
from .models import AppViewItem
from .reorder import DragReorderCoordinator, DropHint
from .tile_widget import TileWidget


class TileList(QListWidget):
    """A vertical tile list."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setViewMode(QListWidget.ListMode)
        self.setUniformItemSizes(True)
        self.setSpacing(4)
        self.setSelectionMode(QListWidget.SingleSelection)
        self._items: List[AppViewItem] = []

    def set_items(self, items: Sequence[AppViewItem], is_pinned: bool, pin_text: str, on_pin: Callable[[AppViewItem], None], font_family: str = "Segoe UI") -> None:
        self.clear()
        self._items = list(items)
        for app in self._items:
            row = QListWidgetItem()
            row.setData(Qt.UserRole, app.id)
            row.setSizeHint(TILE_SIZE)
            self.addItem(row)
            tile = TileWidget(app, is_pinned=is_pinned, size=TILE_SIZE, pin_text=pin_text, font_family=font_family)
            tile.pin_clicked.connect(on_pin)
            self.setItemWidget(row, tile)

    def app_at_row(self, row: int) -> Optional[AppViewItem]:
        if 0 <= row < len(self._items):
            return self._items[row]
        return None

    def selected_ids(self) -> List[str]:
        rows = sorted(self.row(i) for i in self.selectedItems())
        return [self._items[r].id for r in rows if 0 <= r < len(self._items)]


class PinnedTileList(TileList):
    """Pinned apps: multi-select + drag to reorder through DragReorderCoordinator."""

    def __init__(self, coordinator: DragReorderCoordinator, parent=None):
        super().__init__(parent)
        self.coordinator = coordinator
        self.drop_hint: Optional[DropHint] = None
        self.hover_row = -1
        self.setSelectionMode(QListWidget.ExtendedSelection)
        self.setDragEnabled(True)
        self.setAcceptDrops(True)
        # the hint line below replaces Qt's own indicator
        self.setDropIndicatorShown(False)
        self.setDragDropMode(QAbstractItemView.InternalMove)
        self.setDefaultDropAction(Qt.MoveAction)

    def startDrag(self, supportedActions):
        row = self.currentRow()
        app = self.app_at_row(row)
        if app is not None:
            self.coordinator.start_drag(app, row)
        try:
            super().startDrag(supportedActions)
        finally:
            # QDrag.exec returns when the gesture ends, dropped or not
            self.coordinator.end_drag()
            self._set_hint(None, -1)

    def _set_hint(self, hint: Optional[DropHint], row: int) -> None:
        if (hint, row) != (self.drop_hint, self.hover_row):
            self.drop_hint = hint
            self.hover_row = row
            self.viewport().update()

    def _track(self, event) -> None:
        pos = event.position().toPoint()
        hint = self.coordinator.drag_enter(pos.y())
        self._set_hint(hint, self.indexAt(pos).row())

    def dragEnterEvent(self, event):
        self._track(event)
        super().dragEnterEvent(event)

    def dragMoveEvent(self, event):
        self._track(event)
        super().dragMoveEvent(event)

    def dragLeaveEvent(self, event):
        self._set_hint(None, -1)
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        self._set_hint(None, -1)
        if event.source() is not self:
            event.ignore()
            return
        target = self.app_at_row(self.indexAt(event.position().toPoint()).row())
        self.coordinator.drop(target, self.selected_ids())
        # the store re-renders the list; keep Qt from moving rows on its own
        event.setDropAction(Qt.IgnoreAction)
        event.accept()

    def hint_line(self) -> Optional[QLine]:
        """Viewport line for the current drop hint, or None when there is none."""
        item = self.item(self.hover_row) if self.drop_hint is not None else None
        if item is None:
            return None
        rect = self.visualItemRect(item)
        y = rect.top() if self.drop_hint == DropHint.ABOVE else rect.bottom()
        return QLine(rect.left(), y, rect.right(), y)

    def paintEvent(self, event):
        super().paintEvent(event)
        line = self.hint_line()
        if line is None:
            return
        painter = QPainter(self.viewport())
        painter.setPen(QPen(QColor(self.coordinator.ctx.config.color_primary), 3))
        painter.drawLine(line)
        painter.end()
