# topmark:header:start
#
#   project      : DailyTip
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DailyTip test suite.

Sets up global fixtures and TRACE-level logging for test runs, plus small
factories for tips and collection files shared across the suite.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from dailytip.config import logging
from dailytip.constants import COLLECTIONS_DIR_ENV
from dailytip.model import Tip

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_dailytip_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment out of the tests.

    Removes ``DAILYTIP_LOG_LEVEL``, ``DAILYTIP_COLLECTIONS_DIR`` and the color
    overrides so every test starts from the built-in defaults.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to manipulate environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(COLLECTIONS_DIR_ENV, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during the test run so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_tips(count: int, *, prefix: str = "Tip") -> tuple[Tip, ...]:
    """Return ``count`` distinct tips titled ``"<prefix> 1"``, ``"<prefix> 2"``, ..."""
    return tuple(Tip(title=f"{prefix} {i}", tip=f"Body {i}") for i in range(1, count + 1))


def write_collection(
    directory: Path,
    name: str,
    title: str,
    tips: list[dict[str, str]] | None = None,
) -> Path:
    """Write ``<name>.json`` with the given title and tips into ``directory``.

    Args:
        directory (Path): Target directory (must exist).
        name (str): Collection name (file stem).
        title (str): Collection title.
        tips (list[dict[str, str]] | None): Tip objects; defaults to one tip.

    Returns:
        Path: The written file.
    """
    if tips is None:
        tips = [{"title": f"{title} tip", "tip": "Do the **thing**."}]
    path: Path = directory / f"{name}.json"
    path.write_text(json.dumps({"title": title, "tips": tips}), encoding="utf-8")
    return path


@pytest.fixture
def collections_dir(tmp_path: Path) -> Path:
    """A directory with two small collections: ``alpha`` and ``beta-gamma``."""
    directory: Path = tmp_path / "collections"
    directory.mkdir()
    write_collection(
        directory,
        "alpha",
        "Alpha",
        [
            {"title": "First", "tip": "One"},
            {"title": "Second", "tip": "Two"},
        ],
    )
    write_collection(directory, "beta-gamma", "Beta Gamma", [{"title": "Third", "tip": "Three"}])
    return directory
