# src/contextsearch/cache.py
from __future__ import annotations
import logging
import threading
from typing import Callable, Dict, Optional, Tuple

from .models import CacheInfo

log = logging.getLogger(__name__)

Positions = Tuple[int, ...]


class QueryCache:
    """
    In-memory map: case-folded query -> ascending word-token positions.

    The corpus never changes after a TextSearcher is built, so entries are
    never invalidated or evicted. Only inserts and counters take the lock;
    the corpus scan itself runs outside it.
    """
    def __init__(self) -> None:
        self._rows: Dict[str, Positions] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Positions]:
        positions = self._rows.get(key)
        with self._lock:
            if positions is None:
                self._misses += 1
            else:
                self._hits += 1
        return positions

    def put(self, key: str, positions: Positions) -> Positions:
        """Insert once; if another caller got there first, keep and return theirs."""
        with self._lock:
            return self._rows.setdefault(key, positions)

    def get_or_compute(self, key: str, compute: Callable[[str], Positions]) -> Positions:
        cached = self.get(key)
        if cached is not None:
            log.debug("cache hit %r (%d positions)", key, len(cached))
            return cached
        positions = compute(key)
        log.debug("cache miss %r -> %d positions", key, len(positions))
        return self.put(key, positions)

    def __contains__(self, key: object) -> bool:
        return key in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(hits=self._hits, misses=self._misses, size=len(self._rows))
