"""Immutable line store loaded once at startup.

Loading is tolerant: unreadable paths produce an empty document and
undecodable bytes fall back through a fixed encoding order. Control bytes
are neutralized up front so search and display agree on line contents.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .search import matching

logger = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8 (dropping a leading BOM), then latin-1; as a final
    fallback decodes raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


class Document:
    """Ordered, 0-indexed, read-only sequence of text lines."""

    __slots__ = ("_lines", "path")

    def __init__(self, lines: Iterable[str] = (), path: Path | None = None) -> None:
        self._lines: tuple[str, ...] = tuple(lines)
        self.path = path

    @classmethod
    def from_text(cls, source: str, path: Path | None = None) -> Document:
        """Split ``source`` into lines, dropping terminators."""
        return cls(sanitize_terminal_text(source).splitlines(), path=path)

    @classmethod
    def load(cls, path: Path) -> Document:
        """Load ``path``; any filesystem error yields an empty document."""
        try:
            source = read_text(path)
        except OSError as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return cls(path=path)
        document = cls.from_text(source, path=path)
        logger.debug("Loaded %d lines from %s", document.size(), path)
        return document

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    def size(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._lines):
            raise IndexError(f"line index out of range: {index}")
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def find_next_matching_line(self, current: int, pattern: str) -> int | None:
        return matching.find_next_matching_line(self._lines, current, pattern)

    def find_previous_matching_line(self, current: int, pattern: str) -> int | None:
        return matching.find_previous_matching_line(self._lines, current, pattern)

    def locate_next_match(self, current: int, pattern: str) -> int:
        return matching.locate_next_match(self._lines, current, pattern)

    def locate_previous_match(self, current: int, pattern: str) -> int:
        return matching.locate_previous_match(self._lines, current, pattern)
