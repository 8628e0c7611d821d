"""Handler for GET /random.

Receives AppState, delegates to the aggregator, and returns the redirect
target. No Starlette imports; server.py handles the HTTP wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from randomimage.aggregator import pick_from_any_category

if TYPE_CHECKING:
    from randomimage.state import AppState


async def handle(state: AppState) -> str:
    """Return a random image URL from any category."""
    log = structlog.get_logger().bind(handler="random_image")
    log.info("handler_called")

    url = await pick_from_any_category(
        state.base_dir,
        resolver=state.resolver,
        loader=state.loader,
    )
    log.info("redirect_selected", url=url)
    return url
