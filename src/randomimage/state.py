"""Application state container.

AppState is created once per application by ``server.create_app`` and passed
to every request handler. The two caches are the only shared mutable state;
``clear_caches`` is the operational reset used by tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from randomimage.cache import TTLCache
from randomimage.categories import CategoryLoader, CategoryResolver

if TYPE_CHECKING:
    from collections.abc import Callable

    from randomimage.config import Settings


@dataclass
class AppState:
    """Holds all shared runtime state. Passed to every request handler."""

    settings: Settings
    base_dir: Path
    dir_cache: TTLCache[tuple[str, ...]]
    file_cache: TTLCache[tuple[str, ...]]
    resolver: CategoryResolver
    loader: CategoryLoader

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        clock: Callable[[], float] | None = None,
    ) -> AppState:
        ttl_ms = settings.cache.ttl_ms
        clock_kwargs = {"clock": clock} if clock is not None else {}
        dir_cache: TTLCache[tuple[str, ...]] = TTLCache(ttl_ms, name="dir", **clock_kwargs)
        file_cache: TTLCache[tuple[str, ...]] = TTLCache(ttl_ms, name="file", **clock_kwargs)
        return cls(
            settings=settings,
            base_dir=Path(settings.categories.directory),
            dir_cache=dir_cache,
            file_cache=file_cache,
            resolver=CategoryResolver(dir_cache),
            loader=CategoryLoader(file_cache),
        )

    def clear_caches(self) -> None:
        self.dir_cache.clear()
        self.file_cache.clear()
