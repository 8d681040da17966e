"""Single-slot TTL cache for the regions/features catalogs."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")

log = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600.0


class CatalogCache(Generic[T]):
    """
    Holds one captured sequence plus its capture time.

    read() treats an entry older than the TTL as absent and evicts it. One slot
    per instance: the cached catalog operations take no parameters.
    """

    def __init__(
        self,
        name: str,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.name = name
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._load_lock = threading.Lock()
        self._items: Optional[tuple[T, ...]] = None
        self._captured_at = 0.0

    def read(self) -> Optional[tuple[T, ...]]:
        with self._lock:
            if self._items is None:
                return None
            age = self._clock() - self._captured_at
            if age > self.ttl_seconds:
                log.debug("%s cache expired (age %.0fs)", self.name, age)
                self._items = None
                return None
            return self._items

    def write(self, items: Iterable[T]) -> None:
        with self._lock:
            self._items = tuple(items)
            self._captured_at = self._clock()

    def clear(self) -> None:
        with self._lock:
            self._items = None

    def get_or_load(self, loader: Callable[[], Iterable[T]]) -> tuple[T, ...]:
        """Return the cached sequence, or run loader and cache what it returns.

        Concurrent callers on an empty cache wait for a single load. Nothing is
        cached when loader raises.
        """
        with self._load_lock:
            cached = self.read()
            if cached is not None:
                log.debug("%s cache hit (%d items)", self.name, len(cached))
                return cached
            log.debug("%s cache miss", self.name)
            items = tuple(loader())
            self.write(items)
            return items
