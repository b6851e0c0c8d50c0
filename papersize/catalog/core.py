from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from papersize.catalog.tokenizer import content_lines, tokens
from papersize.catalog.units import UNIT_NAMES, factor_for, from_points, points_to_mm, to_points
from papersize.events import log_event

_LOGGER = logging.getLogger("papersize.catalog")
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class PaperCatalogError(Exception):
    def __init__(self, message: str, *, path: Path | None = None, line_number: int | None = None) -> None:
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f"{path}:{line_number}: " if line_number is not None else f"{path}: "
        super().__init__(f"{location}{message}")


class SpecFileUnavailable(PaperCatalogError):
    pass


class MalformedSpec(PaperCatalogError, ValueError):
    pass


class InvalidNumber(PaperCatalogError, ValueError):
    pass


class UnknownUnit(PaperCatalogError, ValueError):
    pass


class CatalogClosedError(RuntimeError):
    pass


@dataclass(frozen=True)
class PaperRecord:
    name: str
    width_pt: float
    height_pt: float

    def size_in(self, unit: str) -> tuple[float, float]:
        return from_points(self.width_pt, unit), from_points(self.height_pt, unit)

    def size_mm(self) -> tuple[int, int]:
        return points_to_mm(self.width_pt), points_to_mm(self.height_pt)


def _parse_dimension(token: str, *, path: Path | None, line_number: int) -> float:
    if _DECIMAL_PATTERN.fullmatch(token) is None:
        raise InvalidNumber(f"'{token}' is not a number", path=path, line_number=line_number)

    value = float(token)

    if not math.isfinite(value):
        raise InvalidNumber(f"'{token}' is out of range", path=path, line_number=line_number)
    if value < 0:
        raise InvalidNumber(f"'{token}' is negative", path=path, line_number=line_number)
    return value


def parse_spec_line(line: str, *, path: Path | None = None, line_number: int = 0) -> PaperRecord:
    fields = tokens(line)
    name = next(fields, None)
    width_token = next(fields, None)
    height_token = next(fields, None)
    unit = next(fields, None)

    if name is None or width_token is None or height_token is None:
        raise MalformedSpec(
            "expected '<name> <width> <height> [<unit>]'",
            path=path,
            line_number=line_number,
        )

    width = _parse_dimension(width_token, path=path, line_number=line_number)
    height = _parse_dimension(height_token, path=path, line_number=line_number)

    if unit is None:
        return PaperRecord(name=name, width_pt=width, height_pt=height)

    factor = factor_for(unit)
    if factor is None:
        valid = ", ".join(UNIT_NAMES)
        raise UnknownUnit(
            f"unsupported unit '{unit}', expected one of: {valid}",
            path=path,
            line_number=line_number,
        )

    return PaperRecord(name=name, width_pt=to_points(width, unit), height_pt=to_points(height, unit))


class PaperCatalog:
    # Keyed by lower-cased name. lookup_by_dimensions and lookup_by_mm return
    # the first match in iteration order, which is stable but arbitrary.
    def __init__(self, records: Iterable[PaperRecord] = ()) -> None:
        self._papers: dict[str, PaperRecord] | None = {}
        for record in records:
            self._papers[record.name.lower()] = record

    @classmethod
    def from_lines(cls, source: Iterable[str], *, path: Path | None = None) -> PaperCatalog:
        records = [
            parse_spec_line(line, path=path, line_number=line_number)
            for line_number, line in content_lines(source)
        ]
        return cls(records)

    @property
    def closed(self) -> bool:
        return self._papers is None

    def _require_open(self) -> dict[str, PaperRecord]:
        if self._papers is None:
            raise CatalogClosedError("paper catalog used after teardown")
        return self._papers

    def close(self) -> None:
        papers = self._require_open()
        papers.clear()
        self._papers = None

    def __enter__(self) -> PaperCatalog:
        self._require_open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.closed:
            self.close()

    def __len__(self) -> int:
        return len(self._require_open())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._require_open()

    def __iter__(self) -> Iterator[PaperRecord]:
        return iter(list(self._require_open().values()))

    def names(self) -> list[str]:
        return [record.name for record in self]

    def lookup_by_name(self, name: str) -> PaperRecord | None:
        return self._require_open().get(name.lower())

    def lookup_by_dimensions(self, width_pt: float, height_pt: float) -> PaperRecord | None:
        for record in self:
            if record.width_pt == width_pt and record.height_pt == height_pt:
                return record
        return None

    def lookup_by_mm(self, width_mm: int, height_mm: int) -> PaperRecord | None:
        for record in self:
            if record.size_mm() == (width_mm, height_mm):
                return record
        return None


def build_catalog(path: Path | str) -> PaperCatalog:
    spec_path = Path(path)
    try:
        with spec_path.open(encoding="utf-8-sig") as handle:
            catalog = PaperCatalog.from_lines(handle, path=spec_path)
    except OSError as exc:
        log_event(_LOGGER, logging.ERROR, "catalog.build.unavailable", path=str(spec_path), error=str(exc))
        raise SpecFileUnavailable(f"cannot read paper specifications: {exc.strerror or exc}", path=spec_path) from exc
    except UnicodeDecodeError as exc:
        log_event(_LOGGER, logging.ERROR, "catalog.build.unavailable", path=str(spec_path), error=str(exc))
        raise SpecFileUnavailable("paper specifications are not valid UTF-8", path=spec_path) from exc
    except PaperCatalogError as exc:
        log_event(
            _LOGGER,
            logging.ERROR,
            "catalog.build.failed",
            path=str(spec_path),
            line_number=exc.line_number,
            error=str(exc),
        )
        raise

    log_event(_LOGGER, logging.DEBUG, "catalog.build.completed", path=str(spec_path), papers=len(catalog))
    return catalog
