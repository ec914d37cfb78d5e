#===============================================================================
#  UserApps_Pinboard | reorder.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Drag & drop reordering of the pinned list, including multi-item drags when
#  the dragged tile is part of the current selection. The new order is
#  dispatched locally and written in the background.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence, TypeVar

from .context import AppContext
from .models import AppViewItem
from .state import AppsStore, set_pinned

log = logging.getLogger(__name__)

T = TypeVar("T")


class DropHint(str, Enum):
    ABOVE = "above"
    BELOW = "below"


def move_before(items: Sequence[T], dragged: Iterable[T], target: T) -> List[T]:
    """Move `dragged` as one block to the slot `target` held before the move.

    The block keeps the relative order the dragged items had in `items`.
    Returns a copy of `items` when `target` is not in the list.
    """
    if target not in items:
        return list(items)
    moving = set(dragged)
    insert_index = list(items).index(target)
    block = [x for x in items if x in moving]
    rest = [x for x in items if x not in moving]
    insert_index = min(insert_index, len(rest))
    return rest[:insert_index] + block + rest[insert_index:]


class DragReorderCoordinator:
    """Holds the state of one drag gesture over the pinned list."""

    def __init__(self, ctx: AppContext, store: AppsStore):
        self.ctx = ctx
        self.store = store
        self.dragged_item: Optional[AppViewItem] = None
        self.dragged_index = -1
        self.reference_y = -1

    @property
    def dragging(self) -> bool:
        return self.dragged_item is not None

    def start_drag(self, item: AppViewItem, index: int) -> None:
        self.dragged_item = item
        self.dragged_index = index if index is not None else -1

    def drag_enter(self, y: int) -> Optional[DropHint]:
        """First enter records the reference y; later enters pick the drop affordance."""
        if self.reference_y == -1:
            self.reference_y = y
            return None
        if self.reference_y < y:
            return DropHint.BELOW
        return DropHint.ABOVE

    def end_drag(self) -> None:
        self.dragged_item = None
        self.dragged_index = -1
        self.reference_y = -1

    def dragged_ids(self, selected_ids: Sequence[str] = ()) -> List[str]:
        if self.dragged_item is None:
            return []
        if self.dragged_item.id in selected_ids:
            return list(selected_ids)
        return [self.dragged_item.id]

    def drop(self, target: Optional[AppViewItem], selected_ids: Sequence[str] = ()) -> Optional[List[str]]:
        """Apply the drop onto `target`. Returns the new id order, or None when nothing moved."""
        if self.dragged_item is None or target is None:
            return None

        current = list(self.store.state.pinned)
        ids = [i.id for i in current]
        if target.id not in ids:
            return None

        new_ids = move_before(ids, self.dragged_ids(selected_ids), target.id)
        by_id = {i.id: i for i in current}
        self.store.dispatch(set_pinned(by_id[i] for i in new_ids))

        try:
            self.ctx.persister.submit(new_ids)
        except Exception:
            log.exception("Error in reorder drop onto %s", target.id)
        return new_ids
