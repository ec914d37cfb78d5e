#===============================================================================
#  UserApps_Pinboard | state.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Apps state (pinned list, catalog list, search text, loaded flag), the closed
#  set of actions, the pure reducer, and the Qt store that owns the state.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from PySide6.QtCore import QObject, Signal

from .models import AppViewItem

Items = Tuple[AppViewItem, ...]


@dataclass(frozen=True)
class AppsState:
    pinned: Items = field(default_factory=tuple)
    catalog: Items = field(default_factory=tuple)
    search_text: str = ""
    loaded: bool = False

    @property
    def pinned_ids(self) -> List[str]:
        return [i.id for i in self.pinned]

    @property
    def catalog_ids(self) -> List[str]:
        return [i.id for i in self.catalog]


def initial_apps_state() -> AppsState:
    return AppsState()


# ----------------------------
# Actions
# ----------------------------
@dataclass(frozen=True)
class Loaded:
    catalog: Items
    pinned: Items


@dataclass(frozen=True)
class AddPinned:
    item: AppViewItem


@dataclass(frozen=True)
class UpdatePinned:
    item: AppViewItem


@dataclass(frozen=True)
class RemovePinned:
    item: AppViewItem


@dataclass(frozen=True)
class SetPinned:
    items: Items


@dataclass(frozen=True)
class AddCatalog:
    item: AppViewItem


@dataclass(frozen=True)
class UpdateCatalog:
    item: AppViewItem


@dataclass(frozen=True)
class RemoveCatalog:
    item: AppViewItem


@dataclass(frozen=True)
class SetSearch:
    text: str


AppsAction = Union[
    Loaded, AddPinned, UpdatePinned, RemovePinned, SetPinned,
    AddCatalog, UpdateCatalog, RemoveCatalog, SetSearch,
]


def loaded(catalog: Iterable[AppViewItem], pinned: Iterable[AppViewItem]) -> Loaded:
    return Loaded(catalog=tuple(catalog), pinned=tuple(pinned))


def set_pinned(items: Iterable[AppViewItem]) -> SetPinned:
    return SetPinned(items=tuple(items))


# ----------------------------
# Reducer
# ----------------------------
def _prepend(items: Items, item: AppViewItem) -> Items:
    return (item,) + items


def _update(items: Items, item: AppViewItem) -> Items:
    return tuple(item if i.id == item.id else i for i in items)


def _remove(items: Items, item: AppViewItem) -> Items:
    return tuple(i for i in items if i.id != item.id)


def apps_reducer(state: AppsState, action: object) -> AppsState:
    """Apply one action. Unknown actions return `state` itself."""
    if isinstance(action, AddPinned):
        return replace(state, pinned=_prepend(state.pinned, action.item))
    if isinstance(action, UpdatePinned):
        return replace(state, pinned=_update(state.pinned, action.item))
    if isinstance(action, RemovePinned):
        return replace(state, pinned=_remove(state.pinned, action.item))
    if isinstance(action, SetPinned):
        return replace(state, pinned=tuple(action.items))
    if isinstance(action, AddCatalog):
        return replace(state, catalog=_prepend(state.catalog, action.item))
    if isinstance(action, UpdateCatalog):
        return replace(state, catalog=_update(state.catalog, action.item))
    if isinstance(action, RemoveCatalog):
        return replace(state, catalog=_remove(state.catalog, action.item))
    if isinstance(action, SetSearch):
        return replace(state, search_text=action.text)
    if isinstance(action, Loaded):
        return replace(state, loaded=True, catalog=tuple(action.catalog), pinned=tuple(action.pinned))
    return state


def filter_items(items: Sequence[AppViewItem], search_text: str) -> List[AppViewItem]:
    """View filter: case-insensitive substring match on the name."""
    needle = (search_text or "").casefold()
    if not needle:
        return list(items)
    return [i for i in items if needle in (i.name or "").casefold()]


def sort_catalog(items: Sequence[AppViewItem]) -> List[AppViewItem]:
    """View order for the catalog: sort order first (unset last), then name."""
    return sorted(items, key=lambda i: (i.order is None, i.order or 0, (i.name or "").casefold()))


# ----------------------------
# Store
# ----------------------------
class AppsStore(QObject):
    """Owns the current AppsState. Every dispatch runs the reducer to completion
    and then emits `changed` with the new state."""

    changed = Signal(object)

    def __init__(self, state: Optional[AppsState] = None, parent=None):
        super().__init__(parent)
        self._state = state if state is not None else initial_apps_state()

    @property
    def state(self) -> AppsState:
        return self._state

    def dispatch(self, action: object) -> AppsState:
        new_state = apps_reducer(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            self.changed.emit(new_state)
        return new_state

    def visible_pinned(self) -> List[AppViewItem]:
        return filter_items(self._state.pinned, self._state.search_text)

    def visible_catalog(self) -> List[AppViewItem]:
        return sort_catalog(filter_items(self._state.catalog, self._state.search_text))
