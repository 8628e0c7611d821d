from __future__ import annotations

import re

from pydantic import BaseModel, field_validator

CATEGORY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class CategoryInput(BaseModel):
    """Path segment of a ``GET /{category}`` request."""

    category: str

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        # fullmatch: "$" alone would also accept a trailing newline
        if not CATEGORY_PATTERN.fullmatch(v):
            raise ValueError(f"Invalid category format: {v!r}")
        return v


class HealthOutput(BaseModel):
    status: str = "ok"
