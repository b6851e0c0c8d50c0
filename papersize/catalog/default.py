from __future__ import annotations

import logging

from papersize.catalog.core import CatalogClosedError, PaperCatalog, build_catalog
from papersize.constants import PaperSettings
from papersize.events import log_event

_LOGGER = logging.getLogger("papersize.catalog")

_default_catalog: PaperCatalog | None = None


def init_default_catalog(settings: PaperSettings | None = None) -> PaperCatalog:
    global _default_catalog
    if _default_catalog is not None:
        raise RuntimeError("default paper catalog is already initialized")

    resolved_settings = settings or PaperSettings()
    _default_catalog = build_catalog(resolved_settings.spec_path)
    log_event(_LOGGER, logging.DEBUG, "catalog.default.initialized", path=str(resolved_settings.spec_path))
    return _default_catalog


def get_default_catalog() -> PaperCatalog:
    if _default_catalog is None:
        raise CatalogClosedError("default paper catalog is not initialized")
    return _default_catalog


def teardown_default_catalog() -> None:
    global _default_catalog
    catalog = get_default_catalog()
    _default_catalog = None
    catalog.close()
    log_event(_LOGGER, logging.DEBUG, "catalog.default.torn_down")
