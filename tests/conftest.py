"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from format_time.config.loader import DEFAULT_ENV_PREFIX
from format_time.types import Time


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove ISO 8601 option overrides inherited from the outer environment."""
    for name in list(os.environ):
        if name.startswith(DEFAULT_ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture
def sample_time() -> Time:
    """A time with a fractional seconds component."""
    return Time(hours=11, minutes=58, seconds=27.63981)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML text to a temporary config file and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "iso8601.yaml"
        _ = path.write_text(content, encoding="utf-8")
        return path

    return _write
