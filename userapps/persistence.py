#===============================================================================
#  UserApps_Pinboard | persistence.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Fire-and-forget writer for the user's pinned ids. A single daemon thread
#  drains a FIFO queue, so writes reach the store in dispatch order.
#  Failures are logged; nothing is retried or rolled back.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import queue
import threading
from typing import Optional, Sequence, Tuple

from .store import UserAppStore

log = logging.getLogger(__name__)

_STOP = object()


class PersistWorker:
    def __init__(self, store: UserAppStore, user_id: str):
        self.store = store
        self.user_id = user_id
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            if self._thread and self._thread.is_alive():
                return
            self._thread = threading.Thread(target=self._run, name="userapps-persist", daemon=True)
            self._thread.start()

    def stop(self) -> None:
        if self._thread and self._thread.is_alive():
            self._queue.put(_STOP)

    def submit(self, ordered_ids: Sequence[str]) -> None:
        """Queue a write of the full ordered id list and return immediately."""
        self.start()
        self._queue.put(tuple(ordered_ids))

    def flush(self) -> None:
        """Block until every queued write has been attempted."""
        self._queue.join()

    def _run(self) -> None:
        while True:
            job = self._queue.get()
            try:
                if job is _STOP:
                    return
                self._write(job)  # type: ignore[arg-type]
            finally:
                self._queue.task_done()

    def _write(self, ids: Tuple[str, ...]) -> None:
        try:
            self.store.write_ids(self.user_id, ids)
            log.debug("Persisted %d pinned ids for %s", len(ids), self.user_id)
        except Exception:
            log.exception("Persisting pinned apps failed for %s", self.user_id)
