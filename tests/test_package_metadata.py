"""Tests for ensuring project packaging metadata stays consistent."""

from __future__ import annotations

import tomllib
from pathlib import Path

import hexlattice


def _load_pyproject() -> dict:
    path = Path(__file__).resolve().parent.parent / "pyproject.toml"
    with path.open("rb") as handle:
        return tomllib.load(handle)


def test_pyproject_declares_expected_metadata() -> None:
    project = _load_pyproject()["project"]

    assert project["name"] == "hexlattice"
    assert project["version"] == hexlattice.__version__

    dependencies = " ".join(project["dependencies"])
    for dependency in ("numpy", "polars", "pydantic"):
        assert dependency in dependencies, f"missing dependency declaration for {dependency}"
