#===============================================================================
#  UserApps_Pinboard | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models: catalog entries, user records, view items, language info.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from .constants import (
    DEFAULT_LOCALE,
    FIELD_APP_ID,
    FIELD_DESCRIPTION,
    FIELD_LANGUAGE,
    FIELD_LINK_URL,
    FIELD_SORT_ORDER,
    FIELD_TITLE,
    ID_SEPARATOR,
)


@dataclass(frozen=True)
class CatalogEntry:
    """One row of the shared catalog list. Read-only for the session."""
    id: str
    title: str
    url: str = ""
    locale: str = DEFAULT_LOCALE   # active UI locale or "Default"
    sort_order: Optional[int] = None
    description: str = ""

    @staticmethod
    def from_list_item(d: Dict[str, Any]) -> "CatalogEntry":
        order = d.get(FIELD_SORT_ORDER)
        return CatalogEntry(
            id=str(d.get(FIELD_APP_ID) or ""),
            title=d.get(FIELD_TITLE) or "",
            url=d.get(FIELD_LINK_URL) or "",
            locale=d.get(FIELD_LANGUAGE) or DEFAULT_LOCALE,
            sort_order=int(order) if order is not None else None,
            description=d.get(FIELD_DESCRIPTION) or "",
        )


@dataclass(frozen=True)
class UserAppRecord:
    """A user's ordered pinned ids. Stored remotely as a ';'-joined string."""
    user_id: str
    ordered_ids: Tuple[str, ...] = field(default_factory=tuple)

    def serialize(self) -> str:
        return join_ids(self.ordered_ids)

    @staticmethod
    def parse(user_id: str, raw: Optional[str]) -> "UserAppRecord":
        return UserAppRecord(user_id=user_id, ordered_ids=tuple(split_ids(raw)))


@dataclass(frozen=True)
class AppViewItem:
    """UI projection of a catalog entry.

    `pinned` / `unpinned` drive the pin animation only; they are never persisted.
    """
    id: str
    name: str
    description: str = ""
    url: str = ""
    order: Optional[int] = None
    pinned: bool = False
    unpinned: bool = False

    @staticmethod
    def from_entry(entry: CatalogEntry) -> "AppViewItem":
        return AppViewItem(
            id=entry.id,
            name=entry.title,
            description=entry.description,
            url=entry.url,
            order=entry.sort_order,
        )

    def with_flags(self, pinned: bool = False, unpinned: bool = False) -> "AppViewItem":
        return replace(self, pinned=pinned, unpinned=unpinned)


@dataclass(frozen=True)
class LanguageInfo:
    language: str           # e.g. en_US
    language_lc: str        # e.g. en_us
    dashed: str             # e.g. en-US
    dashed_lc: str          # e.g. en-us

    @staticmethod
    def from_code(code: str) -> "LanguageInfo":
        code = (code or "").strip()
        underscored = code.replace("-", "_")
        dashed = code.replace("_", "-")
        return LanguageInfo(
            language=underscored,
            language_lc=underscored.lower(),
            dashed=dashed,
            dashed_lc=dashed.lower(),
        )


def split_ids(raw: Optional[str]) -> list:
    if not raw:
        return []
    return [part for part in raw.split(ID_SEPARATOR) if part]


def join_ids(ids) -> str:
    return ID_SEPARATOR.join(ids)
