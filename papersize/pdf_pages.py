from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pypdf import PdfReader

from papersize.catalog.core import PaperCatalog, PaperRecord
from papersize.catalog.units import points_to_mm

Orientation = Literal["portrait", "landscape"]
MatchKind = Literal["exact", "millimetres"]


@dataclass(frozen=True)
class PageMatch:
    page_index: int
    width_pt: float
    height_pt: float
    paper: PaperRecord | None
    orientation: Orientation | None
    match: MatchKind | None

    @property
    def paper_name(self) -> str | None:
        return None if self.paper is None else self.paper.name


def identify_size(
    catalog: PaperCatalog,
    width_pt: float,
    height_pt: float,
) -> tuple[PaperRecord, Orientation, MatchKind] | None:
    # Exact points first, then rounded millimetres, each upright then swapped.
    candidates: tuple[tuple[float, float, Orientation], ...] = (
        (width_pt, height_pt, "portrait"),
        (height_pt, width_pt, "landscape"),
    )
    for width, height, orientation in candidates:
        record = catalog.lookup_by_dimensions(width, height)
        if record is not None:
            return record, orientation, "exact"

    for width, height, orientation in candidates:
        record = catalog.lookup_by_mm(points_to_mm(width), points_to_mm(height))
        if record is not None:
            return record, orientation, "millimetres"

    return None


def identify_pages(reader: PdfReader, catalog: PaperCatalog) -> list[PageMatch]:
    matches: list[PageMatch] = []
    for page_index, page in enumerate(reader.pages):
        width = float(page.mediabox.width)
        height = float(page.mediabox.height)
        if page.rotation % 180 == 90:
            width, height = height, width

        identified = identify_size(catalog, width, height)
        if identified is None:
            matches.append(
                PageMatch(
                    page_index=page_index,
                    width_pt=width,
                    height_pt=height,
                    paper=None,
                    orientation=None,
                    match=None,
                )
            )
            continue

        record, orientation, kind = identified
        matches.append(
            PageMatch(
                page_index=page_index,
                width_pt=width,
                height_pt=height,
                paper=record,
                orientation=orientation,
                match=kind,
            )
        )
    return matches
