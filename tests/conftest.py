"""Shared pytest configuration, suite markers and environment isolation."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

_SUITE_MARKERS = {
    "e2e_tests": "e2e",
    "integration_tests": "integration",
    "unit_tests": "unit",
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        for directory, marker in _SUITE_MARKERS.items():
            if directory in parts:
                item.add_marker(getattr(pytest.mark, marker))
                break


@pytest.fixture(autouse=True)
def _isolate_service_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's NEPALI_FONT_* variables out of every test."""
    for name in list(os.environ):
        if name.startswith("NEPALI_FONT_"):
            monkeypatch.delenv(name)
