#===============================================================================
#  UserApps_Pinboard | catalog.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Merges the shared catalog with a user's saved ids:
#    - locale-first stable ordering + dedup by app id
#    - pinned list in saved order, restricted to ids still in the catalog
#    - remaining catalog = deduped catalog minus pinned
#    - stale saved ids trigger a background repair write
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence

from .constants import DEFAULT_LOCALE
from .models import AppViewItem, CatalogEntry

log = logging.getLogger(__name__)

RepairFn = Callable[[List[str]], None]


@dataclass(frozen=True)
class MergeResult:
    pinned: List[AppViewItem] = field(default_factory=list)
    catalog: List[AppViewItem] = field(default_factory=list)
    dropped_ids: List[str] = field(default_factory=list)
    repair_needed: bool = False

    @property
    def pinned_ids(self) -> List[str]:
        return [i.id for i in self.pinned]


def matches_locale(entry: CatalogEntry, locale: str) -> bool:
    """Catalog query filter: active locale or Default. Empty locale -> Default only."""
    entry_locale = (entry.locale or "").lower()
    if entry_locale == DEFAULT_LOCALE.lower():
        return True
    return bool(locale) and entry_locale == locale.lower()


def prioritize_locale(entries: Iterable[CatalogEntry], locale: str) -> List[CatalogEntry]:
    """Stable partition: entries in the active locale first, everything else after."""
    active = (locale or "").lower()
    return sorted(entries, key=lambda e: 0 if (e.locale or "").lower() == active else 1)


def dedupe_catalog(entries: Iterable[CatalogEntry]) -> List[CatalogEntry]:
    """Keep the first occurrence of each app id."""
    seen = set()
    out: List[CatalogEntry] = []
    for e in entries:
        if e.id in seen:
            continue
        seen.add(e.id)
        out.append(e)
    return out


def localized_catalog(entries: Iterable[CatalogEntry], locale: str) -> List[CatalogEntry]:
    return dedupe_catalog(prioritize_locale(entries, locale))


def merge_catalog(
    entries: Sequence[CatalogEntry],
    locale: str,
    saved_ids: Sequence[str],
) -> MergeResult:
    """Split the catalog into the user's pinned list and the remaining catalog."""
    catalog = [AppViewItem.from_entry(e) for e in localized_catalog(entries, locale)]
    by_id = {item.id: item for item in catalog}

    pinned: List[AppViewItem] = []
    pinned_ids = set()
    dropped: List[str] = []
    for app_id in saved_ids:
        if app_id in pinned_ids:
            continue
        item = by_id.get(app_id)
        if item is None:
            dropped.append(app_id)
            continue
        pinned_ids.add(app_id)
        pinned.append(item)

    remaining = [item for item in catalog if item.id not in pinned_ids]
    return MergeResult(
        pinned=pinned,
        catalog=remaining,
        dropped_ids=dropped,
        repair_needed=len(pinned) != len(saved_ids),
    )


def merge_and_heal(
    entries: Sequence[CatalogEntry],
    locale: str,
    saved_ids: Sequence[str],
    repair: Optional[RepairFn] = None,
) -> MergeResult:
    """merge_catalog + hand the filtered id list to `repair` when saved ids went stale.

    `repair` must not block (e.g. PersistWorker.submit). Its failures are logged
    and never reach the caller.
    """
    result = merge_catalog(entries, locale, saved_ids)
    if result.repair_needed and repair is not None:
        if result.dropped_ids:
            log.info("Dropping stale pinned ids: %s", ", ".join(result.dropped_ids))
        try:
            repair(result.pinned_ids)
        except Exception:
            log.exception("Scheduling pinned-list repair failed")
    return result
