#===============================================================================
#  UserApps_Pinboard | demo_host.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Stand-in host window that renders its site header the way the portal
#  does: piecemeal, after the window is already on screen. Used by main.py
#  to run the pinboard outside the portal, and by the tests.
#
#    headerRow_*            stable region, present from the start
#      SiteHeader           coarse anchor, added after a delay
#        <title row>        grandparent of the follow button (mount point)
#          <actions>
#            SiteHeaderFollowButton
#      shyHeader_*          collapsible copy, added last
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from . import constants as C
from .host_locator import HostEvents

log = logging.getLogger(__name__)

DEMO_CATALOG = [
    {"pb_AppId": "outlook", "Title": "Outlook", "pb_LinkUrl": "https://outlook.office.com", "pb_MUILanguage": "Default", "pb_SortOrder": 1, "pb_Description": "Mail and calendar"},
    {"pb_AppId": "teams", "Title": "Teams", "pb_LinkUrl": "https://teams.microsoft.com", "pb_MUILanguage": "Default", "pb_SortOrder": 2, "pb_Description": "Chat and meetings"},
    {"pb_AppId": "sap", "Title": "SAP Fiori", "pb_LinkUrl": "https://fiori.example.com", "pb_MUILanguage": "Default", "pb_SortOrder": 3, "pb_Description": "SAP launchpad"},
    {"pb_AppId": "sap", "Title": "SAP Fiori (DE)", "pb_LinkUrl": "https://fiori.example.com/de", "pb_MUILanguage": "de-DE", "pb_SortOrder": 3, "pb_Description": "SAP Launchpad"},
    {"pb_AppId": "hr", "Title": "HR Portal", "pb_LinkUrl": "https://hr.example.com", "pb_MUILanguage": "en-US", "pb_SortOrder": 4, "pb_Description": "Leave and payroll"},
    {"pb_AppId": "travel", "Title": "Travel", "pb_LinkUrl": "https://travel.example.com", "pb_MUILanguage": "Default", "pb_SortOrder": 5, "pb_Description": "Bookings and expenses"},
]


def ensure_demo_catalog(path: Path) -> bool:
    """Write the demo catalog to `path` unless a catalog is already there."""
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"value": DEMO_CATALOG}, indent=2), encoding="utf-8")
    log.info("Wrote demo catalog to %s", path)
    return True


def tag(w: QWidget, automation_id: str = "", css_class: str = "") -> QWidget:
    if automation_id:
        w.setProperty(C.AUTOMATION_ID_PROPERTY, automation_id)
    if css_class:
        w.setProperty(C.CLASS_PROPERTY, css_class)
    return w


class DemoHostWindow(QMainWindow):
    """A host that knows nothing about the pinboard; it only announces navigations."""

    def __init__(self, header_delay_ms: int = 400, shy_delay_ms: int = 900, parent=None):
        super().__init__(parent)
        self.setWindowTitle(C.APP_TITLE)
        self.events = HostEvents()
        self.header_delay_ms = header_delay_ms
        self.shy_delay_ms = shy_delay_ms
        self.site_header = None
        self.shy_header = None

        self.setStyleSheet(f"""
        QMainWindow {{ background: {C.METRO_BG}; }}
        QLabel {{ color: white; font-family: "{C.FONT_FAMILY}"; }}
        QPushButton {{
            font-family: "{C.FONT_FAMILY}";
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 6px 10px;
        }}
        """)

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)

        self.header_row = tag(QWidget(), css_class="headerRow_3f2a1c")
        self.header_layout = QVBoxLayout(self.header_row)
        self.header_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.header_row)

        nav = QPushButton("Navigate")
        nav.clicked.connect(self.navigate)
        layout.addWidget(nav)
        layout.addStretch(1)

    def navigate(self) -> None:
        """Tear the header down, rebuild it later, and announce the new page."""
        for w in (self.site_header, self.shy_header):
            if w is not None:
                w.setParent(None)
                w.deleteLater()
        self.site_header = None
        self.shy_header = None

        QTimer.singleShot(self.header_delay_ms, self._render_site_header)
        QTimer.singleShot(self.shy_delay_ms, self._render_shy_header)
        self.events.notify_ready()

    def _render_site_header(self) -> None:
        header = tag(QWidget(), automation_id=C.COARSE_ANCHOR_ID)
        QVBoxLayout(header).setContentsMargins(0, 0, 0, 0)
        self.header_layout.addWidget(header)
        self.site_header = header
        # children show up a turn later, like a lazily rendered component
        QTimer.singleShot(0, lambda: self._render_title_row(header))

    def _render_title_row(self, header: QWidget) -> None:
        title_row = QWidget(header)
        row_layout = QHBoxLayout(title_row)
        row_layout.setContentsMargins(0, 0, 0, 0)
        row_layout.addWidget(QLabel("<b>Contoso Intranet</b>"))
        row_layout.addStretch(1)
        actions = QWidget(title_row)
        QHBoxLayout(actions).setContentsMargins(0, 0, 0, 0)
        follow = tag(QPushButton("Follow", actions), automation_id=C.FINE_ANCHOR_ID)
        actions.layout().addWidget(follow)
        row_layout.addWidget(actions)
        header.layout().addWidget(title_row)

    def _render_shy_header(self) -> None:
        shy = tag(QWidget(), css_class="shyHeader_9b1e77")
        shy_layout = QHBoxLayout(shy)
        shy_layout.setContentsMargins(0, 0, 0, 0)
        shy_layout.addWidget(QLabel("Contoso Intranet"))
        self.header_layout.addWidget(shy)
        self.shy_header = shy
