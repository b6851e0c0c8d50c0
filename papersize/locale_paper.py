from __future__ import annotations

import ctypes
import ctypes.util
import logging
import sys
from typing import Final, Protocol

from papersize.events import log_event

_LOGGER = logging.getLogger("papersize.locale")

# glibc category and item numbers from <locale.h> / <langinfo.h>.
_LC_PAPER: Final[int] = 7
_LC_PAPER_MASK: Final[int] = 1 << _LC_PAPER
_NL_PAPER_HEIGHT: Final[int] = _LC_PAPER << 16
_NL_PAPER_WIDTH: Final[int] = (_LC_PAPER << 16) | 1


class LocalePaperFacility(Protocol):
    def paper_size_mm(self) -> tuple[int, int] | None:
        ...


class GlibcLocalePaper:
    def __init__(self, libc: ctypes.CDLL) -> None:
        self._libc = libc
        self._libc.newlocale.restype = ctypes.c_void_p
        self._libc.newlocale.argtypes = [ctypes.c_int, ctypes.c_char_p, ctypes.c_void_p]
        self._libc.nl_langinfo_l.restype = ctypes.c_void_p
        self._libc.nl_langinfo_l.argtypes = [ctypes.c_int, ctypes.c_void_p]
        self._libc.freelocale.restype = None
        self._libc.freelocale.argtypes = [ctypes.c_void_p]

    def paper_size_mm(self) -> tuple[int, int] | None:
        handle = self._libc.newlocale(_LC_PAPER_MASK, b"", None)
        if not handle:
            log_event(_LOGGER, logging.DEBUG, "locale.paper.unavailable")
            return None

        try:
            # LC_PAPER items are integers returned in place of a string pointer.
            height = (self._libc.nl_langinfo_l(_NL_PAPER_HEIGHT, handle) or 0) & 0xFFFFFFFF
            width = (self._libc.nl_langinfo_l(_NL_PAPER_WIDTH, handle) or 0) & 0xFFFFFFFF
        finally:
            self._libc.freelocale(handle)

        if not width or not height:
            return None
        return width, height


def detect_locale_facility() -> LocalePaperFacility | None:
    if not sys.platform.startswith("linux"):
        return None

    library = ctypes.util.find_library("c")
    if library is None:
        return None

    try:
        libc = ctypes.CDLL(library)
    except OSError:
        return None

    if not hasattr(libc, "gnu_get_libc_version") or not hasattr(libc, "nl_langinfo_l"):
        log_event(_LOGGER, logging.DEBUG, "locale.paper.no_glibc", library=library)
        return None

    return GlibcLocalePaper(libc)
