#===============================================================================
#  UserApps_Pinboard | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for host markers, mount names, UI timings, list field names
#  and theme values.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QSize

APP_TITLE = "UserApps Pinboard"
STATE_DIR_NAME = ".userapps"
USER_APPS_FILE_NAME = "user_apps.json"
LOG_FILE_NAME = "userapps.log"

# --- Catalog / user record wire format ---
DEFAULT_LOCALE = "Default"
ID_SEPARATOR = ";"

FIELD_TITLE = "Title"
FIELD_APP_ID = "pb_AppId"
FIELD_LINK_URL = "pb_LinkUrl"
FIELD_LANGUAGE = "pb_MUILanguage"
FIELD_SORT_ORDER = "pb_SortOrder"
FIELD_DESCRIPTION = "pb_Description"
FIELD_USER = "pb_User"
FIELD_USER_ID = "pb_UserId"
FIELD_USER_APPS = "pb_UserApps"

# --- Host markers (consumed, owned by the host window) ---
FINE_ANCHOR_ID = "SiteHeaderFollowButton"
COARSE_ANCHOR_ID = "SiteHeader"
COLLAPSIBLE_CLASS_PREFIX = "shyHeader"
HEADER_ROW_CLASS_PREFIX = "headerRow"

# Dynamic property names used to tag host widgets
AUTOMATION_ID_PROPERTY = "automationId"
CLASS_PROPERTY = "class"

# --- Mount points (produced) ---
MOUNT_ID = "PBUserApps"
SECONDARY_MOUNT_ID = "UserAppsShy"

# --- UI timings (ms) ---
PIN_SETTLE_MS = 1500
UNPIN_SETTLE_MS = 900
SEARCH_DEBOUNCE_MS = 500

REQUEST_TIMEOUT = 20

# --- Theme ---
COLOR_PRIMARY = "#0078D7"
COLOR_WIDGET_TEXT = "#FFFFFF"
COLOR_CALLOUT_FONT = "#323130"
FONT_FAMILY = "Segoe UI"
METRO_BG = "#101010"

TILE_COLORS = [
    "#0078D7",  # blue
    "#00B294",  # teal
    "#E81123",  # red
    "#FFB900",  # yellow
    "#8764B8",  # purple
    "#2D7D9A",  # steel
    "#107C10",  # green
    "#5C2D91",  # deep purple
]

PINNED_FLASH = "#FFB900"
UNPINNED_FLASH = "#2D7D9A"

TILE_SIZE = QSize(300, 56)
