"""Single-slot channel between the acquisition loop and the map handler."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from geotrack.models.position import PositionSample

logger = logging.getLogger(__name__)

Subscriber = Callable[[PositionSample], None]


class PositionCell:
    """Holds the most recent :class:`PositionSample`, last write wins.

    There is one writer (the acquisition loop). Readers either subscribe for a
    callback on every publish or poll ``version`` to detect a newer value.
    Nothing is queued: a slow reader only ever sees the newest sample.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sample: PositionSample | None = None
        self._version = 0
        self._subscribers: list[Subscriber] = []

    @property
    def latest(self) -> PositionSample | None:
        with self._lock:
            return self._sample

    @property
    def version(self) -> int:
        with self._lock:
            return self._version

    def snapshot(self) -> tuple[int, PositionSample | None]:
        """Return ``(version, sample)`` read together under the lock."""
        with self._lock:
            return self._version, self._sample

    def publish(self, sample: PositionSample) -> None:
        """Replace the current sample and notify subscribers in order."""
        with self._lock:
            self._sample = sample
            self._version += 1
            version = self._version
            subscribers = list(self._subscribers)
        logger.debug("published sample v%d success=%s", version, sample.success)
        for callback in subscribers:
            callback(sample)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for future publishes. Returns an unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe
