#===============================================================================
#  UserApps_Pinboard | store.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Store interfaces (catalog source, per-user pinned record) plus local JSON
#  implementations used when no SharePoint site is configured.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Sequence

from .catalog import matches_locale
from .errors import StoreError
from .models import CatalogEntry, UserAppRecord, join_ids


class CatalogSource(ABC):
    @abstractmethod
    def fetch_catalog(self, locale: str) -> List[CatalogEntry]:
        """Entries whose locale is `locale` or Default, in source order."""


class UserAppStore(ABC):
    @abstractmethod
    def read_record(self, user_id: str) -> UserAppRecord:
        """The user's record; an empty record when none exists yet."""

    @abstractmethod
    def write_ids(self, user_id: str, ordered_ids: Sequence[str]) -> None:
        """Update the user's record, creating it on first write."""

    def read_ids(self, user_id: str) -> List[str]:
        return list(self.read_record(user_id).ordered_ids)


def default_user_state() -> Dict[str, Any]:
    return {
        "users": {},    # user id -> ';'-joined ordered app ids
    }


class JsonUserAppStore(UserAppStore):
    """One JSON file holding every local user's record."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, Any]:
        d = default_user_state()
        if not self.path.exists():
            return d
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Unexpected content in {self.path}")
        for k in d:
            data.setdefault(k, d[k])
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise StoreError(f"Cannot write {self.path}: {e}") from e

    def read_record(self, user_id: str) -> UserAppRecord:
        with self._lock:
            data = self._load()
        return UserAppRecord.parse(user_id, data["users"].get(user_id))

    def write_ids(self, user_id: str, ordered_ids: Sequence[str]) -> None:
        with self._lock:
            data = self._load()
            data["users"][user_id] = join_ids(ordered_ids)
            self._save(data)


class JsonCatalogSource(CatalogSource):
    """Catalog exported as a JSON list of list items (Title, pb_AppId, ...)."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def fetch_catalog(self, locale: str) -> List[CatalogEntry]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreError(f"Cannot read catalog {self.path}: {e}") from e
        items = data.get("value", []) if isinstance(data, dict) else data
        entries = [CatalogEntry.from_list_item(d) for d in items if isinstance(d, dict)]
        return [e for e in entries if e.id and matches_locale(e, locale)]
