"""Random image selection across categories.

Per-category failures are routine (a file briefly missing or emptied while
being edited) and are absorbed here. Only total failure is reported.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from randomimage.cache import cache_key
from randomimage.errors import ErrorCode, RandomImageError
from randomimage.selection import pick_random

if TYPE_CHECKING:
    import os

    from randomimage.categories import CategoryLoader, CategoryResolver

log = structlog.get_logger()


async def pick_from_category(
    file_path: str | os.PathLike[str],
    loader: CategoryLoader,
) -> str:
    """Load one category's URL pool and return a random URL from it."""
    urls = await loader.load_urls(file_path)
    return pick_random(urls)


async def pick_from_any_category(
    base_dir: str | os.PathLike[str],
    *,
    resolver: CategoryResolver,
    loader: CategoryLoader,
) -> str:
    """Return a random URL drawn from every category's available images.

    Each category contributes at most one candidate, picked from its own
    pool; the result is then picked uniformly among the candidates. All
    categories are loaded concurrently and every attempt is awaited before
    choosing, regardless of how the others end.
    """
    dir_path = cache_key(base_dir)
    files = await resolver.list_categories(base_dir)

    if not files:
        raise RandomImageError(
            code=ErrorCode.NO_CATEGORY_FILES,
            message="No category files found",
            meta={"dir_path": dir_path},
        )

    results = await asyncio.gather(
        *(pick_from_category(Path(base_dir) / name, loader) for name in files),
        return_exceptions=True,
    )

    available: list[str] = []
    for name, result in zip(files, results, strict=True):
        if isinstance(result, BaseException):
            log.debug(
                "category_skipped",
                category_file=name,
                code=getattr(result, "code", type(result).__name__),
            )
            continue
        available.append(result)

    if not available:
        raise RandomImageError(
            code=ErrorCode.NO_IMAGES_AVAILABLE,
            message="No valid image URLs available",
            meta={"dir_path": dir_path, "category_file_count": len(files)},
        )

    return pick_random(available)
