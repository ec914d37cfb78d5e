#===============================================================================
#  UserApps_Pinboard | tile_widget.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Metro-style row tile for one app: title link, description tooltip and a
#  pin toggle. Pinned / unpinned flags flash the tile while they are set.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import hashlib
import html

from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QToolButton

from .constants import PINNED_FLASH, TILE_COLORS, UNPINNED_FLASH
from .models import AppViewItem


def tile_color_for_key(k: str) -> str:
    h = hashlib.sha1(k.encode("utf-8")).hexdigest()
    idx = int(h[:2], 16) % len(TILE_COLORS)
    return TILE_COLORS[idx]


class TileWidget(QFrame):
    """A flat tile used inside a QListWidget item."""

    pin_clicked = Signal(object)

    def __init__(self, item: AppViewItem, is_pinned: bool, size: QSize, pin_text: str = "", font_family: str = "Segoe UI", parent=None):
        super().__init__(parent)
        self.item = item
        self.setObjectName("AppTile")
        self.setFixedSize(size)

        if item.pinned:
            bg = PINNED_FLASH
        elif item.unpinned:
            bg = UNPINNED_FLASH
        else:
            bg = tile_color_for_key(item.id)
        self.setStyleSheet(f"""
        QFrame#AppTile {{
            background: {bg};
        }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 6, 6, 6)
        layout.setSpacing(6)

        title = QLabel(f'<a href="{html.escape(item.url)}" style="color:white;text-decoration:none;">{html.escape(item.name)}</a>')
        title.setOpenExternalLinks(True)
        title.setTextInteractionFlags(Qt.TextBrowserInteraction)
        title.setToolTip(item.description)
        f = QFont(font_family, 11)
        f.setBold(True)
        title.setFont(f)
        layout.addWidget(title, 1)

        self.pin_button = QToolButton()
        self.pin_button.setText("\U0001F4CC" if is_pinned else "☆")
        self.pin_button.setAccessibleName(pin_text)
        self.pin_button.setToolTip(pin_text)
        self.pin_button.setAutoRaise(True)
        self.pin_button.clicked.connect(lambda: self.pin_clicked.emit(self.item))
        layout.addWidget(self.pin_button)
