"""Analysis cache — per-library StyleSummary storage with an explicit owner."""

from __future__ import annotations

import logging
import threading

from styledna.models.style import StyleSummary

logger = logging.getLogger(__name__)


class StyleCache:
    """Holds one StyleSummary per library id.

    Summaries are immutable, so handing out the cached instance is safe. The
    lock only guards the dict itself.
    """

    def __init__(self) -> None:
        self._entries: dict[str, StyleSummary] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> StyleSummary | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: StyleSummary) -> None:
        with self._lock:
            self._entries[key] = value
        logger.debug("Cached style summary for %r", key)

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
