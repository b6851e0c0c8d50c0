from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from papersize.catalog.core import PaperCatalog
from papersize.catalog.tokenizer import first_token
from papersize.constants import PaperSettings
from papersize.events import log_event
from papersize.locale_paper import LocalePaperFacility

_LOGGER = logging.getLogger("papersize.resolver")


class PaperResolver:
    def __init__(
        self,
        catalog: PaperCatalog,
        *,
        settings: PaperSettings | None = None,
        environ: Mapping[str, str] | None = None,
        locale_facility: LocalePaperFacility | None = None,
    ) -> None:
        self.catalog = catalog
        self.settings = settings or PaperSettings()
        self.environ = os.environ if environ is None else environ
        self.locale_facility = locale_facility

    def config_path(self) -> Path:
        configured = self.environ.get(self.settings.config_var)
        return self.settings.config_path if configured is None else Path(configured)

    def _from_environment(self) -> str | None:
        value = self.environ.get(self.settings.size_var)
        if value:
            log_event(_LOGGER, logging.DEBUG, "resolver.layer.environment", variable=self.settings.size_var, name=value)
            return value
        return None

    def _from_config_file(self) -> str | None:
        path = self.config_path()
        try:
            if not path.is_file():
                return None
            with path.open(encoding="utf-8-sig") as handle:
                name = first_token(handle)
        except (OSError, UnicodeDecodeError) as exc:
            log_event(_LOGGER, logging.DEBUG, "resolver.layer.config_file_unreadable", path=str(path), error=str(exc))
            return None

        if name is not None:
            log_event(_LOGGER, logging.DEBUG, "resolver.layer.config_file", path=str(path), name=name)
        return name

    def _from_locale(self) -> str | None:
        if self.locale_facility is None:
            return None

        size_mm = self.locale_facility.paper_size_mm()
        if size_mm is None:
            return None

        record = self.catalog.lookup_by_mm(*size_mm)
        if record is None:
            log_event(_LOGGER, logging.DEBUG, "resolver.layer.locale_unmatched", width_mm=size_mm[0], height_mm=size_mm[1])
            return None

        log_event(_LOGGER, logging.DEBUG, "resolver.layer.locale", name=record.name)
        return record.name

    def _configured_name(self) -> str | None:
        return self._from_environment() or self._from_config_file()

    # Environment, config file, locale, fallback. Failing layers fall through.
    def default_name(self) -> str:
        name = self._configured_name() or self._from_locale()
        if name is None:
            log_event(_LOGGER, logging.DEBUG, "resolver.layer.fallback", name=self.settings.fallback_name)
            return self.settings.fallback_name
        return name

    def system_name(self) -> str:
        name = self._configured_name() or self.settings.fallback_name
        record = self.catalog.lookup_by_name(name)
        return record.name if record is not None else name


def resolve_default_name(
    catalog: PaperCatalog,
    *,
    settings: PaperSettings | None = None,
    environ: Mapping[str, str] | None = None,
    locale_facility: LocalePaperFacility | None = None,
) -> str:
    resolver = PaperResolver(catalog, settings=settings, environ=environ, locale_facility=locale_facility)
    return resolver.default_name()


def resolve_system_name(
    catalog: PaperCatalog,
    *,
    settings: PaperSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    return PaperResolver(catalog, settings=settings, environ=environ).system_name()
