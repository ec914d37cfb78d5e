#===============================================================================
#  UserApps_Pinboard | host_locator.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Finds mount points inside a foreign Qt window that builds its widgets
#  asynchronously. No polling: child-added events are batched per event-loop
#  turn and each batch re-queries the host tree.
#
#    HostMountLocator          broad watch -> narrowed watch -> found (one shot)
#    CollapsibleHeaderWatcher  header row child list -> secondary mount
#
#  Host widgets are matched the way style sheets match them:
#    automationId property     fine / coarse anchors
#    class property prefix     collapsible header, header row
#    objectName                reserved mount containers
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from PySide6.QtCore import QEvent, QObject, QTimer
from PySide6.QtWidgets import QBoxLayout, QHBoxLayout, QWidget

from . import constants as C

log = logging.getLogger(__name__)

MountFn = Callable[[QWidget], QWidget]
Predicate = Callable[[QWidget], bool]


@dataclass(frozen=True)
class HostMarkers:
    fine_anchor_id: str = C.FINE_ANCHOR_ID
    coarse_anchor_id: str = C.COARSE_ANCHOR_ID
    collapsible_prefix: str = C.COLLAPSIBLE_CLASS_PREFIX
    header_row_prefix: str = C.HEADER_ROW_CLASS_PREFIX
    mount_id: str = C.MOUNT_ID
    secondary_mount_id: str = C.SECONDARY_MOUNT_ID


# ----------------------------
# Host tree queries
# ----------------------------
def by_automation_id(value: str) -> Predicate:
    return lambda w: w.property(C.AUTOMATION_ID_PROPERTY) == value


def by_class_prefix(prefix: str) -> Predicate:
    return lambda w: str(w.property(C.CLASS_PROPERTY) or "").startswith(prefix)


def find_widget(root: QWidget, predicate: Predicate) -> Optional[QWidget]:
    """First match in document order (root, then descendants depth-first)."""
    if predicate(root):
        return root
    for w in root.findChildren(QWidget):
        if predicate(w):
            return w
    return None


def find_by_name(root: QWidget, object_name: str) -> Optional[QWidget]:
    if root.objectName() == object_name:
        return root
    return root.findChild(QWidget, object_name)


def grandparent(w: Optional[QWidget]) -> Optional[QWidget]:
    if w is None or w.parentWidget() is None:
        return None
    return w.parentWidget().parentWidget()


# ----------------------------
# Mount helpers
# ----------------------------
def _layout_of(w: QWidget):
    layout = w.layout()
    if layout is None:
        layout = QHBoxLayout(w)
        layout.setContentsMargins(0, 0, 0, 0)
    return layout


def ensure_container(host_root: QWidget, anchor: QWidget, object_name: str, prepend: bool = True) -> QWidget:
    """Return the container named `object_name`, creating it under `anchor` if missing."""
    existing = find_by_name(host_root, object_name)
    if existing is not None:
        return existing

    container = QWidget()
    container.setObjectName(object_name)
    layout = _layout_of(anchor)
    if prepend and isinstance(layout, QBoxLayout):
        layout.insertWidget(0, container)
    else:
        layout.addWidget(container)
    return container


def mount_into(container: QWidget, build: MountFn) -> QWidget:
    """Render `build(container)` as the container's only content."""
    layout = _layout_of(container)
    while layout.count():
        old = layout.takeAt(0).widget()
        if old is not None:
            old.deleteLater()
    widget = build(container)
    layout.addWidget(widget)
    return widget


# ----------------------------
# Child-added observation
# ----------------------------
class ChildWatcher(QObject):
    """Child-list observer for a widget (and optionally its whole subtree).

    Added children are collected and delivered as one batch on the next
    event-loop turn, by which time they carry their names and properties.
    """

    def __init__(self, callback: Callable[[List[QObject]], None], parent=None):
        super().__init__(parent)
        self._callback = callback
        self._target: Optional[QObject] = None
        self._watched: List[QObject] = []
        self._watched_ids = set()
        self._pending: List[QObject] = []
        self._subtree = True
        self._active = False
        self._generation = 0
        self._scheduled = False

    @property
    def active(self) -> bool:
        return self._active

    def observe(self, target: QObject, subtree: bool = True) -> None:
        self.stop()
        self._target = target
        self._subtree = subtree
        self._active = True
        if subtree:
            self._watch_tree(target)
        else:
            self._watch(target)

    def stop(self) -> None:
        for obj in self._watched:
            try:
                obj.removeEventFilter(self)
            except RuntimeError:
                pass  # already deleted by the host
        self._target = None
        self._watched = []
        self._watched_ids = set()
        self._pending = []
        self._active = False
        self._scheduled = False
        self._generation += 1

    def _watch(self, obj: QObject) -> None:
        if id(obj) in self._watched_ids:
            return
        obj.installEventFilter(self)
        self._watched.append(obj)
        self._watched_ids.add(id(obj))

    def _watch_tree(self, obj: QObject) -> None:
        self._watch(obj)
        for child in obj.findChildren(QObject):
            self._watch(child)

    def eventFilter(self, obj, event):
        if self._active and event.type() == QEvent.ChildAdded:
            child = event.child() if hasattr(event, "child") else None
            if child is not None:
                if self._subtree:
                    self._watch_tree(child)
                self._pending.append(child)
            if not self._scheduled:
                self._scheduled = True
                generation = self._generation
                QTimer.singleShot(0, lambda: self._deliver(generation))
        return False

    def _deliver(self, generation: int) -> None:
        if generation != self._generation or not self._active:
            return
        self._scheduled = False
        if self._subtree and self._target is not None:
            # pick up grandchildren created before their parent was watched
            self._watch_tree(self._target)
        batch, self._pending = self._pending, []
        self._callback(batch)


# ----------------------------
# Primary mount point
# ----------------------------
class LocatorState(str, Enum):
    IDLE = "idle"
    WATCHING_BROADLY = "watching_broadly"
    WATCHING_NARROWED = "watching_narrowed"
    FOUND = "found"


class HostMountLocator(QObject):
    """Resolves once to the fine anchor's grandparent.

    Never resolving is not an error. Exceptions raised while evaluating a batch
    (including from `on_found`) go to `on_error`.
    """

    def __init__(self, host_root: QWidget, markers: Optional[HostMarkers] = None, parent=None):
        super().__init__(parent)
        self.host_root = host_root
        self.markers = markers or HostMarkers()
        self.state = LocatorState.IDLE
        self.anchor: Optional[QWidget] = None
        self.narrowed_to: Optional[QWidget] = None
        self._on_found: Optional[Callable[[QWidget], None]] = None
        self._on_error: Optional[Callable[[Exception], None]] = None
        self._watcher = ChildWatcher(self._on_batch, self)

    def locate(self, on_found: Callable[[QWidget], None], on_error: Optional[Callable[[Exception], None]] = None) -> None:
        if self.state != LocatorState.IDLE:
            return
        self._on_found = on_found
        self._on_error = on_error
        self.state = LocatorState.WATCHING_BROADLY
        self._watcher.observe(self.host_root, subtree=True)
        # The host may have rendered already; check once on the next turn.
        QTimer.singleShot(0, lambda: self._on_batch([]))

    def stop(self) -> None:
        """Abandon the search. A stopped locator never resolves."""
        if self.state != LocatorState.FOUND:
            self.state = LocatorState.IDLE
        self._watcher.stop()

    def _on_batch(self, _batch: List[QObject]) -> None:
        if self.state in (LocatorState.IDLE, LocatorState.FOUND):
            return
        try:
            self._evaluate()
        except Exception as e:
            if self._on_error is not None:
                self._on_error(e)
            else:
                log.exception("Error while locating mount point")

    def _evaluate(self) -> None:
        fine = find_widget(self.host_root, by_automation_id(self.markers.fine_anchor_id))
        if fine is not None:
            target = grandparent(fine)
            if target is not None:
                self._resolve(target)
            return

        if self.state == LocatorState.WATCHING_BROADLY:
            coarse = find_widget(self.host_root, by_automation_id(self.markers.coarse_anchor_id))
            if coarse is not None:
                self._watcher.stop()
                self._watcher.observe(coarse, subtree=True)
                self.narrowed_to = coarse
                self.state = LocatorState.WATCHING_NARROWED
                log.debug("Narrowed observation to %s", self.markers.coarse_anchor_id)

    def _resolve(self, target: QWidget) -> None:
        self.state = LocatorState.FOUND
        self._watcher.stop()
        self.anchor = target
        log.info("Mount anchor found")
        if self._on_found is not None:
            self._on_found(target)


# ----------------------------
# Secondary mount point
# ----------------------------
class CollapsibleHeaderWatcher(QObject):
    """Watches the header row's children until the collapsible header shows up,
    then appends the secondary container to it and mounts into it once."""

    def __init__(self, host_root: QWidget, mount: MountFn, markers: Optional[HostMarkers] = None, parent=None):
        super().__init__(parent)
        self.host_root = host_root
        self.mount = mount
        self.markers = markers or HostMarkers()
        self.container: Optional[QWidget] = None
        self._watcher = ChildWatcher(self._on_batch, self)

    @property
    def active(self) -> bool:
        return self._watcher.active

    def activate(self) -> bool:
        """Start watching. Returns False when the header row is not there."""
        row = find_widget(self.host_root, by_class_prefix(self.markers.header_row_prefix))
        if row is None:
            return False
        self._watcher.observe(row, subtree=False)
        return True

    def stop(self) -> None:
        self._watcher.stop()

    def _on_batch(self, _batch: List[QObject]) -> None:
        region = find_widget(self.host_root, by_class_prefix(self.markers.collapsible_prefix))
        if region is None:
            return
        try:
            if find_by_name(self.host_root, self.markers.secondary_mount_id) is None:
                container = QWidget()
                container.setObjectName(self.markers.secondary_mount_id)
                _layout_of(region).addWidget(container)
                mount_into(container, self.mount)
                self.container = container
                log.info("Collapsible header hooked")
        except Exception:
            log.exception("Mounting into the collapsible header failed")
        finally:
            self._watcher.stop()


# ----------------------------
# Host lifecycle
# ----------------------------
class HostEvents:
    """'Host ready' registration. The host (or its adapter) calls notify_ready()
    after every navigation; listeners re-attach."""

    def __init__(self):
        self._listeners: List[Callable[[], None]] = []

    def add_ready_listener(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(callback)

        def remove() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return remove

    def notify_ready(self) -> None:
        for cb in list(self._listeners):
            try:
                cb()
            except Exception:
                log.exception("Host ready listener failed")
