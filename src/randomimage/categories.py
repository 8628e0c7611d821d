"""Category discovery and URL pool loading.

A category is a ``<name>.txt`` file in the categories directory holding one
candidate image URL per line. Both classes receive their cache via
constructor injection; AppState owns the cache instances.

File system calls are blocking, so they run in a worker thread and only
suspend the calling task.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from randomimage.cache import cache_key
from randomimage.errors import ErrorCode, RandomImageError
from randomimage.urls import is_valid_url

if TYPE_CHECKING:
    from randomimage.protocols import CacheProtocol

log = structlog.get_logger()

CATEGORY_SUFFIX = ".txt"


def category_path(base_dir: str | os.PathLike[str], name: str) -> Path:
    """Return the file backing category ``name``. ``name`` must be pre-validated."""
    return Path(base_dir) / f"{name}{CATEGORY_SUFFIX}"


def _list_dir(path: Path) -> list[str]:
    return os.listdir(path)


def _read_text(path: Path) -> str:
    # utf-8-sig drops a leading BOM; undecodable bytes become U+FFFD and spoil their line only
    return path.read_text(encoding="utf-8-sig", errors="replace")


def parse_urls(content: str) -> tuple[str, ...]:
    """Return the valid http(s) URLs in ``content``, one per line, in file order."""
    lines = (line.strip() for line in content.split("\n"))
    return tuple(line for line in lines if line and is_valid_url(line))


class CategoryResolver:
    """Lists category files in a directory through the listing cache."""

    def __init__(self, cache: CacheProtocol[tuple[str, ...]]) -> None:
        self._cache = cache

    async def list_categories(self, directory: str | os.PathLike[str]) -> tuple[str, ...]:
        """Return the ``*.txt`` filenames in ``directory``.

        Order follows the directory listing and carries no meaning. An empty
        result is cached like any other. ``OSError`` from the listing
        propagates to the caller.
        """
        key = cache_key(directory)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        names = await asyncio.to_thread(_list_dir, Path(directory))
        files = tuple(name for name in names if name.endswith(CATEGORY_SUFFIX))
        self._cache.set(key, files)
        log.debug("categories_listed", dir_path=key, count=len(files))
        return files


class CategoryLoader:
    """Reads and validates category files through the URL pool cache."""

    def __init__(self, cache: CacheProtocol[tuple[str, ...]]) -> None:
        self._cache = cache

    async def load_urls(self, file_path: str | os.PathLike[str]) -> tuple[str, ...]:
        """Return the non-empty URL pool for one category file.

        Raises RandomImageError with:
          CATEGORY_NOT_FOUND      the file does not exist
          FILE_READ_FAILED        any other read error (cause in meta)
          CATEGORY_NO_VALID_URLS  the file has no valid http(s) line

        Failures are not cached; the next call reads the file again.
        """
        key = cache_key(file_path)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            content = await asyncio.to_thread(_read_text, Path(file_path))
        except FileNotFoundError as exc:
            raise RandomImageError(
                code=ErrorCode.CATEGORY_NOT_FOUND,
                message="Category not found",
                meta={"file_path": key},
            ) from exc
        except OSError as exc:
            raise RandomImageError(
                code=ErrorCode.FILE_READ_FAILED,
                message="Failed to read category file",
                meta={"file_path": key, "cause": str(exc)},
            ) from exc

        urls = parse_urls(content)
        if not urls:
            raise RandomImageError(
                code=ErrorCode.CATEGORY_NO_VALID_URLS,
                message="Category has no valid image URLs",
                meta={"file_path": key},
            )

        self._cache.set(key, urls)
        log.debug("category_loaded", file_path=key, url_count=len(urls))
        return urls
