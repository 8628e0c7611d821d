"""Integration test fixtures.

Provides the full Starlette application wired to the temporary categories
directory from tests/conftest.py, driven in-process through httpx's ASGI
transport so no real server is started.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from randomimage.server import create_app

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from starlette.applications import Starlette

    from randomimage.state import AppState


@pytest.fixture()
def app(app_state: AppState) -> Starlette:
    return create_app(state=app_state)


@pytest.fixture()
async def client(app: Starlette) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://localhost",
    ) as client:
        yield client
