"""Checks on what pip installs from pyproject.toml."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_only_the_logic_package_is_installed():
    setuptools = tomllib.loads(PYPROJECT.read_text())["tool"]["setuptools"]

    assert setuptools["packages"] == ["logic"]
    assert "py-modules" not in setuptools
