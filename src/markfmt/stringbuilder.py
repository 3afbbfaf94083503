"""LineBuilder for layout-aware string accumulation.

Rendered fragments are kept as a list of logical lines and joined once at
the end with the configured separator. Indentation is applied per logical
line when a fragment is placed inside a stacked parent, so nested fragments
never have to be flattened and re-split.

A logical line may itself contain newline characters (verbatim text from a
whitespace-preserving element). Such text is never split, so indenting a
fragment cannot change preserved content.

Thread Safety:
LineBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class LineBuilder:
    """Accumulates logical lines of output.

    Usage:
            >>> lb = LineBuilder("<ul>")
            >>> lb.extend_indented(LineBuilder("<li>a</li>"), "  ")
            >>> lb.new_line("</ul>")
            >>> lb.build("\\n")
            '<ul>\\n  <li>a</li>\\n</ul>'

    """

    __slots__ = ("_lines",)

    def __init__(self, first: str = "") -> None:
        """Initialize builder, optionally with a first line."""
        self._lines: list[str] = [first] if first else []

    def append(self, s: str) -> LineBuilder:
        """Continue the current line with ``s``.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            if self._lines:
                self._lines[-1] += s
            else:
                self._lines.append(s)
        return self

    def new_line(self, s: str) -> LineBuilder:
        """Start a new logical line holding ``s``.

        Returns:
            self for method chaining
        """
        self._lines.append(s)
        return self

    def splice(self, other: LineBuilder) -> LineBuilder:
        """Join ``other`` inline.

        Its first line continues the current line; any further lines keep
        their own line structure and the next append continues its last line.

        Returns:
            self for method chaining
        """
        if not other._lines:
            return self
        first, *rest = other._lines
        self.append(first)
        self._lines.extend(rest)
        return self

    def extend_indented(self, other: LineBuilder, indent: str) -> LineBuilder:
        """Add every line of ``other`` as a new line prefixed with ``indent``.

        Returns:
            self for method chaining
        """
        self._lines.extend(indent + line if line else line for line in other._lines)
        return self

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def build(self, separator: str = "\n") -> str:
        """Join all lines into the final string.

        Returns:
            Lines joined with ``separator`` (no trailing separator)
        """
        return separator.join(self._lines)

    def __len__(self) -> int:
        """Return number of logical lines (not total length)."""
        return len(self._lines)

    def __bool__(self) -> bool:
        """Return True if any line has been added."""
        return bool(self._lines)
