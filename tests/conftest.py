"""Shared test fixtures for the randomimage test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from randomimage.config import Settings
from randomimage.state import AppState

if TYPE_CHECKING:
    from pathlib import Path

CATS = (
    "https://example.com/cat1.jpg\n"
    "\n"
    "   https://example.com/cat2.jpg   \n"
    "javascript:alert(1)\n"
    "ftp://example.com/cat.gif\n"
    "not a url\n"
    "http://example.com/cat3.png\n"
)
CAT_URLS = (
    "https://example.com/cat1.jpg",
    "https://example.com/cat2.jpg",
    "http://example.com/cat3.png",
)

DOGS = "https://example.org/dog.jpg\r\n"
DOG_URLS = ("https://example.org/dog.jpg",)

INVALID_ONLY = "\n\njavascript:alert(1)\nftp://x/y\n"


class FakeClock:
    """Monotonic clock stand-in advanced by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def write_category(directory: Path, name: str, content: str) -> Path:
    path = directory / f"{name}.txt"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def categories_dir(tmp_path: Path) -> Path:
    """Directory holding two valid categories and one without valid URLs."""
    directory = tmp_path / "categories"
    directory.mkdir()
    write_category(directory, "cats", CATS)
    write_category(directory, "dogs", DOGS)
    write_category(directory, "empty", INVALID_ONLY)
    (directory / "README.md").write_text("not a category", encoding="utf-8")
    return directory


@pytest.fixture()
def public_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>randomimage</h1>", encoding="utf-8")
    (directory / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    return directory


@pytest.fixture()
def settings(categories_dir: Path, public_dir: Path) -> Settings:
    return Settings(
        categories={"directory": str(categories_dir), "public_dir": str(public_dir)},
        cache={"ttl_ms": 30_000},
    )


@pytest.fixture()
def app_state(settings: Settings, clock: FakeClock) -> AppState:
    """AppState wired to the temporary categories directory and a fake clock."""
    return AppState.from_settings(settings, clock=clock)


@pytest.fixture()
def cat_urls() -> tuple[str, ...]:
    return CAT_URLS


@pytest.fixture()
def dog_urls() -> tuple[str, ...]:
    return DOG_URLS


@pytest.fixture()
def invalid_only() -> str:
    """Category file content with no usable line."""
    return INVALID_ONLY
