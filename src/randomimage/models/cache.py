from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

V = TypeVar("V")


class CacheEntry(BaseModel, Generic[V]):
    """Value held by the in-memory cache together with its expiry instant."""

    model_config = ConfigDict(frozen=True)

    value: V
    expires_at: float  # Clock reading after which the entry is gone
