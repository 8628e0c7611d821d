"""HTTP server entrypoint.

Responsibilities (and nothing more):
- Configure structlog
- Create AppState and the Starlette application
- Map routes to handlers and RandomImageError to the JSON error envelope
- Serve the documentation page and static assets
- Start uvicorn
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import FileResponse, JSONResponse, RedirectResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

import randomimage.handlers.category_image as h_category
import randomimage.handlers.random_image as h_random
from randomimage import __version__
from randomimage.config import Settings
from randomimage.errors import ErrorCode, RandomImageError
from randomimage.models.category import HealthOutput
from randomimage.state import AppState

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.requests import Request

log = structlog.get_logger()


# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------


def _setup_logging(settings: Settings) -> None:
    """Configure structlog. Called once at startup before any log statements."""
    log_level = logging.getLevelNamesMapping()[settings.logging.level]

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.logging.format == "json":
        processors = [*shared_processors, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


def _error_response(error: RandomImageError) -> JSONResponse:
    return JSONResponse(error.to_dict(), status_code=error.status)


def _request_context(request: Request) -> dict[str, str | None]:
    return {
        "route": request.url.path,
        "method": request.method,
        "category": request.path_params.get("category"),
    }


async def _run_handler(request: Request, call: Callable[[], Awaitable[str]]) -> Response:
    """Await a handler and turn its result or failure into a response."""
    try:
        url = await call()
    except RandomImageError as exc:
        log_method = log.error if exc.status >= 500 else log.warning
        log_method(
            "request_error",
            **_request_context(request),
            code=exc.code,
            message=exc.message,
            meta=exc.meta,
        )
        return _error_response(exc)
    except OSError:
        log.error(
            "request_internal_error",
            **_request_context(request),
            code=ErrorCode.INTERNAL_ERROR,
            exc_info=True,
        )
        return _error_response(
            RandomImageError(code=ErrorCode.INTERNAL_ERROR, message="Internal server error")
        )
    except Exception:
        log.error("request_unexpected_error", **_request_context(request), exc_info=True)
        raise
    return RedirectResponse(url, status_code=302)


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def _state(request: Request) -> AppState:
    return request.app.state.randomimage


async def health(request: Request) -> Response:
    return JSONResponse(HealthOutput().model_dump())


async def index(request: Request) -> Response:
    """Serve the documentation page."""
    page = Path(_state(request).settings.categories.public_dir) / "index.html"
    if not page.is_file():
        return JSONResponse({"error": "NOT_FOUND", "message": "Not found"}, status_code=404)
    return FileResponse(page)


async def random_image(request: Request) -> Response:
    state = _state(request)
    return await _run_handler(request, lambda: h_random.handle(state))


async def category_image(request: Request) -> Response:
    state = _state(request)
    category: str = request.path_params["category"]
    return await _run_handler(request, lambda: h_category.handle(category, state))


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: Starlette) -> AsyncGenerator[None, None]:
    state: AppState = app.state.randomimage
    log.info(
        "server_started",
        version=__version__,
        categories_dir=str(state.base_dir.resolve()),
        cache_enabled=state.file_cache.enabled,
    )
    try:
        yield
    finally:
        log.info("server_stopping")


def create_app(settings: Settings | None = None, *, state: AppState | None = None) -> Starlette:
    """Build the Starlette application with its AppState attached.

    AppState is built eagerly (not in the lifespan) so that ASGI test clients
    that skip lifespan events still get a working app.
    """
    if state is None:
        state = AppState.from_settings(settings or Settings())
    settings = state.settings

    # Matched in order: fixed paths first, the catch-all last. The path
    # convertor lets decoded slashes reach the category check as a 400.
    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/", index, methods=["GET"]),
        Mount(
            "/public",
            app=StaticFiles(directory=settings.categories.public_dir, check_dir=False),
            name="public",
        ),
        Route("/random", random_image, methods=["GET"]),
        Route("/{category:path}", category_image, methods=["GET"]),
    ]

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=settings.cors.allow_origins,
            allow_methods=["GET"],
        ),
    ]

    app = Starlette(routes=routes, middleware=middleware, lifespan=lifespan)
    app.state.randomimage = state
    return app


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main() -> None:
    settings = Settings()
    _setup_logging(settings)

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,  # Disable uvicorn's default logging; structlog handles it
    )


if __name__ == "__main__":
    main()
