#===============================================================================
#  UserApps_Pinboard | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Exception types raised by stores, clients and the string table.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class UserAppsError(RuntimeError):
    """Base class for errors raised by this package."""


class StoreError(UserAppsError):
    """Reading or writing the catalog / user record failed."""


class MissingTranslationError(UserAppsError):
    """Neither the requested locale nor the default table has the key."""

    def __init__(self, key: str, locale: str):
        super().__init__(f"No translation for '{key}' in '{locale}' or default table")
        self.key = key
        self.locale = locale
