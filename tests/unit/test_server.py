"""Unit tests for server wiring: logging setup and the application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from randomimage.server import _setup_logging, create_app

if TYPE_CHECKING:
    from collections.abc import Iterator

    from randomimage.config import Settings
    from randomimage.state import AppState


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.mark.parametrize("fmt", ["json", "text"])
def test_setup_logging_emits(
    settings: Settings, fmt: str, capsys: pytest.CaptureFixture[str]
) -> None:
    settings.logging.format = fmt
    _setup_logging(settings)
    structlog.get_logger().info("probe_event", answer=42)
    assert "probe_event" in capsys.readouterr().err


def test_setup_logging_filters_below_level(
    settings: Settings, capsys: pytest.CaptureFixture[str]
) -> None:
    settings.logging.level = "WARNING"
    _setup_logging(settings)
    structlog.get_logger().info("quiet_event")
    assert "quiet_event" not in capsys.readouterr().err


def test_create_app_attaches_given_state(app_state: AppState) -> None:
    app = create_app(state=app_state)
    assert app.state.randomimage is app_state


def test_create_app_builds_state_from_settings(settings: Settings) -> None:
    app = create_app(settings)
    state = app.state.randomimage
    assert state.settings is settings
    assert str(state.base_dir) == settings.categories.directory
    assert state.file_cache.enabled is True


def test_category_route_is_matched_last(app_state: AppState) -> None:
    app = create_app(state=app_state)
    paths = [route.path for route in app.routes]
    assert paths[-1] == "/{category:path}"
    assert paths.index("/random") < paths.index("/{category:path}")
