from papersize.catalog.core import (
    CatalogClosedError,
    InvalidNumber,
    MalformedSpec,
    PaperCatalog,
    PaperCatalogError,
    PaperRecord,
    SpecFileUnavailable,
    UnknownUnit,
    build_catalog,
    parse_spec_line,
)
from papersize.catalog.default import get_default_catalog, init_default_catalog, teardown_default_catalog
from papersize.catalog.tokenizer import content_lines, first_token, tokens
from papersize.catalog.units import UNIT_NAMES, factor_for, from_points, points_to_mm, to_points

__all__ = [
    "CatalogClosedError",
    "InvalidNumber",
    "MalformedSpec",
    "PaperCatalog",
    "PaperCatalogError",
    "PaperRecord",
    "SpecFileUnavailable",
    "UNIT_NAMES",
    "UnknownUnit",
    "build_catalog",
    "content_lines",
    "factor_for",
    "first_token",
    "from_points",
    "get_default_catalog",
    "init_default_catalog",
    "parse_spec_line",
    "points_to_mm",
    "teardown_default_catalog",
    "to_points",
    "tokens",
]
