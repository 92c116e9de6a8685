"""Holder for the current prompt snapshot."""

from __future__ import annotations

import logging
from collections.abc import Callable

from tickbox.models import Snapshot, Status

logger = logging.getLogger("tickbox.store")

Listener = Callable[[Snapshot], None]


class SnapshotStore:
    """Publishes complete snapshots to listeners.

    Snapshots are frozen, so a listener never sees a half-applied transition.
    Once a DONE snapshot is published the store is final.
    """

    def __init__(self, initial: Snapshot):
        self._current = initial
        self._listeners: list[Listener] = []

    def read(self) -> Snapshot:
        return self._current

    def replace(self, snapshot: Snapshot) -> None:
        """Publish ``snapshot`` and notify listeners."""
        if self._current.status is Status.DONE:
            raise RuntimeError("Prompt is already done")
        if snapshot is self._current:
            return
        self._current = snapshot
        logger.debug(
            "published snapshot active=%d status=%s error=%r",
            snapshot.active,
            snapshot.status.value,
            snapshot.error_message,
        )
        for listener in list(self._listeners):
            listener(snapshot)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
