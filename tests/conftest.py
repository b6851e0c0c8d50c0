from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Resolve the package from this checkout rather than an installed copy.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from papersize.catalog.core import PaperCatalog, build_catalog  # noqa: E402

SAMPLE_SPECS = """\
# name width height [unit]
A4      210     297     mm
A5      148     210     mm
Letter  8.5     11      in
Legal   612     1008
Tabloid 11      17      IN
"""


class FakeLocale:
    def __init__(self, size_mm: tuple[int, int] | None) -> None:
        self.size_mm = size_mm
        self.calls = 0

    def paper_size_mm(self) -> tuple[int, int] | None:
        self.calls += 1
        return self.size_mm


@pytest.fixture
def write_specs(tmp_path: Path) -> Callable[[str], Path]:
    def _write(content: str, name: str = "paperspecs") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def catalog(write_specs: Callable[[str], Path]) -> PaperCatalog:
    return build_catalog(write_specs(SAMPLE_SPECS))


@pytest.fixture
def fake_locale() -> Callable[[tuple[int, int] | None], FakeLocale]:
    return FakeLocale
