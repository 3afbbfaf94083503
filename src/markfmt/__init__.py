"""
markfmt: lenient markup parser and pretty-printer/minifier

Parses HTML/XML-like markup into a typed tree without ever giving up on
malformed input, then writes it back out re-indented (or minified) so the
document still looks the same in a browser.

Quick Start:
    >>> from markfmt import format
    >>> print(format("<ul><li>one</li><li>two</li></ul>"))
    <ul>
       <li>one</li>
       <li>two</li>
    </ul>

    >>> # Parse and inspect diagnostics
    >>> from markfmt import parse
    >>> result = parse("<div><p>unclosed</div>")
    >>> [str(d) for d in result.errors]
    ['1:17: error: Tag "p" at line 1, col 6 is closed with "div" at line 1, col 17']

    >>> # Or use the high-level formatter object
    >>> from markfmt import FormatConfig, MarkupFormatter
    >>> minify = MarkupFormatter(FormatConfig(minify=True))
    >>> minify("<p>\\n   hi\\n</p>")
    '<p>\\n   hi\\n</p>'
"""

from collections.abc import Iterable

from markfmt.config import DEFAULT_CONFIG, FormatConfig
from markfmt.diagnostics import Diagnostic, Severity
from markfmt.errors import ConfigError, MarkfmtError, ParseError, RenderError
from markfmt.location import SourceLocation
from markfmt.nodes import Attribute, Comment, Element, MarkupNode, Node, Text
from markfmt.parser import Parser
from markfmt.renderers.markup import MarkupRenderer
from markfmt.result import ParseResult
from markfmt.serialization import from_dict, from_json, to_dict, to_json
from markfmt.visitor import BaseVisitor, transform, walk

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> ParseResult:
    """Parse markup into a typed tree.

    Args:
        source: Markup text
        source_file: Optional source file path for diagnostics

    Returns:
        ParseResult with nodes, trailing text and diagnostics. Never raises
        for malformed markup.

    Example:
        >>> result = parse("<br>text")
        >>> result.nodes[0].children
        ()
    """
    return Parser(source, source_file=source_file).parse()


def render(nodes: ParseResult | Iterable[Node], config: FormatConfig | None = None) -> str:
    """Render a parsed tree to text.

    Args:
        nodes: ParseResult or top-level nodes
        config: Formatting options (defaults to FormatConfig())

    Returns:
        Formatted markup
    """
    return MarkupRenderer(config).render(nodes)


def format(
    source: str,
    config: FormatConfig | None = None,
    *,
    strict: bool = False,
    source_file: str | None = None,
) -> str:
    """Parse and render markup in one call.

    Args:
        source: Markup text
        config: Formatting options (defaults to FormatConfig())
        strict: Raise ParseError instead of formatting when the parse
            reported an error
        source_file: Optional source file path for diagnostics

    Returns:
        Formatted markup

    Raises:
        ParseError: Only when ``strict`` is set and an error was reported.
    """
    result = parse(source, source_file=source_file)
    if strict:
        result.raise_for_errors()
    return render(result, config)


class MarkupFormatter:
    """High-level formatter combining parser and renderer.

    Usage:
        >>> fmt = MarkupFormatter(FormatConfig(indent="  "))
        >>> fmt("<ul><li>a</li></ul>")
        '<ul>\\n  <li>a</li>\\n</ul>'

        >>> # Access the tree
        >>> result = fmt.parse("<p>x</p>")
        >>> result.nodes[0].tag_name
        'p'

    Thread Safety:
        Holds only an immutable config and a stateless renderer. Safe to
        use one instance from several threads.

    """

    __slots__ = ("_config", "_renderer", "_strict")

    def __init__(self, config: FormatConfig | None = None, *, strict: bool = False) -> None:
        """Initialize formatter.

        Args:
            config: Formatting options (defaults to FormatConfig())
            strict: Raise ParseError when a parse reports an error
        """
        self._config = config or DEFAULT_CONFIG
        self._renderer = MarkupRenderer(self._config)
        self._strict = strict

    @property
    def config(self) -> FormatConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render markup in one call."""
        result = self.parse(source, source_file=source_file)
        if self._strict:
            result.raise_for_errors()
        return self._renderer.render(result)

    def parse(self, source: str, *, source_file: str | None = None) -> ParseResult:
        return parse(source, source_file=source_file)

    def render(self, nodes: ParseResult | Iterable[Node]) -> str:
        return self._renderer.render(nodes)

    def format_many(self, sources: Iterable[str]) -> list[str]:
        """Format several independent documents.

        Example:
            >>> fmt = MarkupFormatter(FormatConfig(minify=True))
            >>> fmt.format_many(["<a> x </a>", "<b>\\n y </b>"])
            ['<a> x </a>', '<b>y</b>']
        """
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022 grouped by category
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "format",
    "MarkupFormatter",
    # Nodes
    "Node",
    "MarkupNode",
    "Text",
    "Comment",
    "Element",
    "Attribute",
    # Parser and renderer
    "Parser",
    "ParseResult",
    "MarkupRenderer",
    # Diagnostics
    "Diagnostic",
    "Severity",
    "SourceLocation",
    # Configuration
    "FormatConfig",
    "DEFAULT_CONFIG",
    # Errors
    "MarkfmtError",
    "ParseError",
    "ConfigError",
    "RenderError",
    # Visitor + Transform
    "BaseVisitor",
    "walk",
    "transform",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
