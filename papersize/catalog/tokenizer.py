from __future__ import annotations

from typing import Iterable, Iterator


def is_content_line(line: str) -> bool:
    stripped = line.lstrip()
    return bool(stripped) and not stripped.startswith("#")


def content_lines(source: Iterable[str]) -> Iterator[tuple[int, str]]:
    for line_number, line in enumerate(source, start=1):
        if is_content_line(line):
            yield line_number, line


def tokens(line: str) -> Iterator[str]:
    yield from line.split()


def first_token(source: Iterable[str]) -> str | None:
    for _, line in content_lines(source):
        return next(tokens(line), None)
    return None
