from papersize.catalog import (
    CatalogClosedError,
    InvalidNumber,
    MalformedSpec,
    PaperCatalog,
    PaperCatalogError,
    PaperRecord,
    SpecFileUnavailable,
    UnknownUnit,
    build_catalog,
    factor_for,
    get_default_catalog,
    init_default_catalog,
    teardown_default_catalog,
)
from papersize.constants import PaperSettings
from papersize.resolver import PaperResolver, resolve_default_name, resolve_system_name

__version__ = "0.1.0"

__all__ = [
    "CatalogClosedError",
    "InvalidNumber",
    "MalformedSpec",
    "PaperCatalog",
    "PaperCatalogError",
    "PaperRecord",
    "PaperResolver",
    "PaperSettings",
    "SpecFileUnavailable",
    "UnknownUnit",
    "build_catalog",
    "factor_for",
    "get_default_catalog",
    "init_default_catalog",
    "resolve_default_name",
    "resolve_system_name",
    "teardown_default_catalog",
]
