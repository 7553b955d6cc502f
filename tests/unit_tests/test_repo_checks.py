"""Unit tests for the repository check scripts."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

SCRIPTS = Path(__file__).resolve().parents[2] / "scripts"


def _load(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, SCRIPTS / f"{name}.py")
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_package_respects_layering() -> None:
    assert _load("check_architecture").collect_problems() == []


def test_requirements_file_is_in_sync(capsys: pytest.CaptureFixture[str]) -> None:
    assert _load("sync_requirements").main(["--check"]) == 0
    assert "up to date" in capsys.readouterr().out


def test_requirements_cover_runtime_imports() -> None:
    declared = _load("sync_requirements").declared()
    names = {req.split(">=")[0] for req in declared}
    assert names == {"httpx", "pydantic", "typer"}
