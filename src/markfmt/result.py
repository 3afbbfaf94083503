"""Parse result container.

Bundles what one parse produces: the top-level nodes, any text left over
after the last top-level node, and the diagnostics collected on the way.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from markfmt.diagnostics import Diagnostic, Severity
from markfmt.nodes import Node


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Best-effort tree plus diagnostics.

    Unpacks like the ``(nodes, trailing_text, diagnostics)`` triple:

            >>> nodes, trailing, diagnostics = parse("<p>hi</p>")

    Attributes:
        nodes: Top-level nodes in source order
        trailing_text: Unparsed text after the last top-level node
        diagnostics: Warnings and errors in the order they were found
        source: The normalized markup all offsets refer to

    """

    nodes: tuple[Node, ...]
    trailing_text: str = ""
    diagnostics: tuple[Diagnostic, ...] = ()
    source: str = ""

    def __iter__(self) -> Iterator[Any]:
        yield self.nodes
        yield self.trailing_text
        yield self.diagnostics

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity is Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.severity is Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return any(d.is_error for d in self.diagnostics)

    def raise_for_errors(self) -> None:
        """Raise ParseError for the first error diagnostic, if any.

        Warnings never raise.

        Raises:
            ParseError: When at least one error-severity diagnostic exists.
        """
        for diagnostic in self.diagnostics:
            if diagnostic.is_error:
                raise diagnostic.to_exception()
