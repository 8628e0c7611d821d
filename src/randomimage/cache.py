"""In-memory cache with per-entry expiry.

Expiry is lazy: an entry past its deadline is treated as a miss and removed
on the next ``get`` for its key. There is no sweeper task and no size bound;
the key space is the set of category files and their directory.

Two instances live in AppState (directory listings and URL pools). Both are
configured from the same TTL. A TTL that is not a positive finite number
disables caching: ``set`` becomes a no-op and every lookup recomputes.
"""

from __future__ import annotations

import math
import time
from pathlib import Path
from typing import TYPE_CHECKING, Generic, TypeVar

import structlog

from randomimage.models.cache import CacheEntry

if TYPE_CHECKING:
    import os
    from collections.abc import Callable

log = structlog.get_logger()

V = TypeVar("V")


def cache_key(path: str | os.PathLike[str]) -> str:
    """Normalise a path so that ``./a.txt`` and ``a.txt`` share one entry."""
    return str(Path(path).resolve())


class TTLCache(Generic[V]):
    """Key → value store implementing CacheProtocol."""

    def __init__(
        self,
        ttl_ms: float,
        *,
        name: str = "cache",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_ms = ttl_ms
        self._name = name
        self._clock = clock
        self._entries: dict[str, CacheEntry[V]] = {}

    @property
    def enabled(self) -> bool:
        return math.isfinite(self._ttl_ms) and self._ttl_ms > 0

    def get(self, key: str) -> V | None:
        """Return the live value for ``key``, or ``None`` on miss or expiry."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.expires_at <= self._clock():
            del self._entries[key]
            log.debug("cache_expired", cache=self._name, key=key)
            return None

        return entry.value

    def set(self, key: str, value: V) -> None:
        if not self.enabled:
            return
        self._entries[key] = CacheEntry(
            value=value,
            expires_at=self._clock() + self._ttl_ms / 1000,
        )

    def clear(self) -> None:
        self._entries.clear()
        log.debug("cache_cleared", cache=self._name)

    def __len__(self) -> int:
        return len(self._entries)
