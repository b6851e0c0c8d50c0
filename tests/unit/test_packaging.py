from __future__ import annotations

import tomllib
from pathlib import Path

import pytest

import papersize
from papersize.constants import DEFAULT_PAPERSPECS
from papersize.web.app import create_app

pytestmark = pytest.mark.unit

ROOT = Path(__file__).resolve().parents[2]


def _pyproject() -> dict:
    return tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))


def test_setuptools_discovery_is_scoped_to_papersize_package() -> None:
    find_config = _pyproject()["tool"]["setuptools"]["packages"]["find"]
    assert find_config["where"] == ["."]
    assert find_config["include"] == ["papersize*"]


def test_bundled_data_is_declared_as_package_data() -> None:
    package_data = _pyproject()["tool"]["setuptools"]["package-data"]
    assert "data/paperspecs" in package_data["papersize"]
    assert "templates/*.html" in package_data["papersize.web"]
    assert DEFAULT_PAPERSPECS.is_file()
    assert (ROOT / "papersize" / "web" / "templates" / "index.html").is_file()


def test_imported_package_resolves_to_active_checkout() -> None:
    package_path = Path(papersize.__file__).resolve()
    assert ROOT in package_path.parents


def test_create_app_import_resolves_to_active_checkout() -> None:
    source_path = Path(create_app.__code__.co_filename).resolve()
    assert ROOT in source_path.parents


def test_public_api_is_exported() -> None:
    for name in papersize.__all__:
        assert hasattr(papersize, name), name
