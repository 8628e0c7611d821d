"""Handler for GET /{category}.

Validates the category name before any file access, then loads that
category's pool and picks one URL. No Starlette imports; server.py handles
the HTTP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from randomimage.aggregator import pick_from_category
from randomimage.categories import category_path
from randomimage.errors import ErrorCode, RandomImageError
from randomimage.models.category import CategoryInput

if TYPE_CHECKING:
    from randomimage.state import AppState


async def handle(category: str, state: AppState) -> str:
    """Return a random image URL from ``category``."""
    log = structlog.get_logger().bind(handler="category_image", category=category)
    log.info("handler_called")

    # Validate input
    try:
        validated = CategoryInput(category=category)
    except ValueError as exc:
        raise RandomImageError(
            code=ErrorCode.INVALID_CATEGORY,
            message="Invalid category format",
            meta={"category": category},
        ) from exc

    url = await pick_from_category(
        category_path(state.base_dir, validated.category),
        state.loader,
    )
    log.info("redirect_selected", url=url)
    return url
