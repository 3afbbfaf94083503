"""Source location tracking for diagnostics and debugging.

Provides SourceLocation dataclass for tracking positions in markup text,
and LineIndex for turning absolute character offsets into line/column
pairs without rescanning the source.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.
LineIndex is built once per source and only read afterwards.

"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for diagnostics and debugging.

    All positions are 1-indexed (lineno and col_offset start at 1).
    ``offset`` is the absolute 0-based character index into the
    normalized markup the parser worked on.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute character offset in the normalized source
        source_file: Source file path (optional, for multi-file runs)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12)
            >>> str(loc)
            '2:5'

            >>> loc = SourceLocation(1, 1, 0, "page.html")
            >>> str(loc)
            'page.html:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for diagnostics.

        Returns:
            Formatted string like "page.html:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def describe(self) -> str:
        """Human-readable position, e.g. ``"line 3, col 7"``."""
        return f"line {self.lineno}, col {self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for nodes created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)


class LineIndex:
    """Offset to line/column lookup for one source string.

    Line starts are collected once; each lookup is a binary search.

    Usage:
            >>> index = LineIndex("<a>\\n  <b>")
            >>> index.locate(6)
            SourceLocation(lineno=2, col_offset=3, offset=6, source_file=None)

    """

    __slots__ = ("_line_starts", "_length", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(source) if ch == "\n")
        self._length = len(source)
        self._source_file = source_file

    def locate(self, offset: int) -> SourceLocation:
        """Return the 1-based line/column of ``offset``.

        Offsets past the end are clamped to the end of the source.
        """
        offset = max(0, min(offset, self._length))
        line = bisect_right(self._line_starts, offset) - 1
        return SourceLocation(
            lineno=line + 1,
            col_offset=offset - self._line_starts[line] + 1,
            offset=offset,
            source_file=self._source_file,
        )

    def __len__(self) -> int:
        """Number of lines in the source."""
        return len(self._line_starts)
