"""Tests for packaging metadata."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_console_script_entrypoint() -> None:
    pyproject = _load_pyproject()
    scripts = pyproject.get("project", {}).get("scripts", {})
    assert scripts.get("contractgen") == "contractgen.cli:app"


def test_test_extra_declares_pytest() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]
    assert any(dep.startswith("pytest") for dep in extras["test"])


def test_defaults_shipped_as_package_data() -> None:
    package_data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in package_data["contractgen.config"]


def test_import_smoke() -> None:
    importlib.import_module("contractgen")
    importlib.import_module("contractgen.cli")
