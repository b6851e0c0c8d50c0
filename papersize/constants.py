from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

DEFAULT_PAPERSPECS: Final[Path] = Path(__file__).resolve().parent / "data" / "paperspecs"
DEFAULT_PAPERCONF: Final[Path] = Path("/etc/papersize")
DEFAULT_PAPERSIZE: Final[str] = "A4"

PAPERSIZE_VAR: Final[str] = "PAPERSIZE"
PAPERCONF_VAR: Final[str] = "PAPERCONF"

POINTS_PER_INCH: Final[float] = 72.0


@dataclass(frozen=True)
class PaperSettings:
    spec_path: Path = DEFAULT_PAPERSPECS
    config_path: Path = DEFAULT_PAPERCONF
    fallback_name: str = DEFAULT_PAPERSIZE
    size_var: str = PAPERSIZE_VAR
    config_var: str = PAPERCONF_VAR
