"""Protocol interfaces for swappable components.

CategoryResolver and CategoryLoader reference this protocol, not the concrete
TTLCache. This allows:
- Tests to pass a recording or always-miss cache
- Future backends (e.g. a shared cache across workers) without touching the loaders
"""

from __future__ import annotations

from typing import Protocol, TypeVar

V = TypeVar("V")


class CacheProtocol(Protocol[V]):
    """Interface for the time-bounded key → value cache."""

    def get(self, key: str) -> V | None: ...

    def set(self, key: str, value: V) -> None: ...

    def clear(self) -> None: ...
