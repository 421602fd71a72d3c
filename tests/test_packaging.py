"""pyproject.toml — setuptools package discovery for the src/ namespace packages."""

import pathlib

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = pathlib.Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_package_discovery_uses_valid_setuptools_keys():
    config = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
    find = config["tool"]["setuptools"]["packages"]["find"]

    assert set(find) <= {"where", "include", "exclude", "namespaces"}
    assert find["namespaces"] is True
    assert find["where"] == ["src"]
