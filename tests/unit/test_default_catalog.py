from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from papersize.catalog import default as default_catalog
from papersize.catalog.core import CatalogClosedError, SpecFileUnavailable
from papersize.catalog.default import get_default_catalog, init_default_catalog, teardown_default_catalog
from papersize.constants import PaperSettings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _reset_default_catalog(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(default_catalog, "_default_catalog", None)
    yield


def test_get_before_init_is_a_contract_violation() -> None:
    with pytest.raises(CatalogClosedError):
        get_default_catalog()


def test_init_uses_bundled_specs_by_default() -> None:
    catalog = init_default_catalog()
    assert get_default_catalog() is catalog
    assert "A4" in catalog


def test_init_from_custom_settings(write_specs) -> None:
    path = write_specs("Card 3 5 in\n")
    catalog = init_default_catalog(PaperSettings(spec_path=path))
    assert catalog.names() == ["Card"]


def test_double_init_is_rejected() -> None:
    init_default_catalog()
    with pytest.raises(RuntimeError, match="already initialized"):
        init_default_catalog()


def test_failed_init_leaves_no_catalog(tmp_path: Path) -> None:
    with pytest.raises(SpecFileUnavailable):
        init_default_catalog(PaperSettings(spec_path=tmp_path / "missing"))
    with pytest.raises(CatalogClosedError):
        get_default_catalog()


def test_teardown_invalidates_catalog() -> None:
    catalog = init_default_catalog()
    teardown_default_catalog()

    assert catalog.closed
    with pytest.raises(CatalogClosedError):
        catalog.lookup_by_name("A4")
    with pytest.raises(CatalogClosedError):
        get_default_catalog()
    with pytest.raises(CatalogClosedError):
        teardown_default_catalog()


def test_reinit_after_teardown() -> None:
    init_default_catalog()
    teardown_default_catalog()
    assert "Letter" in init_default_catalog()
