from __future__ import annotations

from randomimage.models.cache import CacheEntry
from randomimage.models.category import CATEGORY_PATTERN, CategoryInput, HealthOutput

__all__ = [
    # cache
    "CacheEntry",
    # category
    "CATEGORY_PATTERN",
    "CategoryInput",
    "HealthOutput",
]
