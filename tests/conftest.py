"""Shared pytest fixtures and configuration for the filemanipulator test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* File access only under ``tmp_path``.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from filemanipulator.utils.logging import configure_logging


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[bytes], Path]:
    """Return a helper that writes raw bytes to a fresh input file."""

    def _write(content: bytes, name: str = "input.tsv") -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def _quiet_logging() -> Iterator[None]:
    """Start every test with WARNING-level logging and drop handlers after."""
    configure_logging(verbose=False)
    yield
    logging.getLogger().handlers.clear()
