"""Lenient recursive descent parser producing a typed markup tree.

Scans markup with compiled patterns anchored at an integer cursor into the
normalized source (``pattern.match(source, pos)``), so the remaining text is
never re-sliced. Each parse step takes a cursor and returns the node it
built together with the advanced cursor.

Malformed markup never aborts the parse. Every problem becomes a
Diagnostic and parsing resumes locally:
- unterminated comment or script: the construct runs to end of input
- missing end-of-open-tag marker: the text up to the next ``<`` becomes
  the end of the open tag
- unclosed tag: recovery continues at the next ``<``
- mismatched closing tag: the element is accepted as closed and the
  closing tag is left for its ancestors

Thread Safety:
- Parser instances are single-use and not thread-safe
- The resulting tree is immutable and thread-safe

"""

from __future__ import annotations

import re

from markfmt.diagnostics import Diagnostic, Severity
from markfmt.location import LineIndex, SourceLocation
from markfmt.nodes import SELF_CLOSING_MARKERS, Attribute, Comment, Element, Node, Text
from markfmt.result import ParseResult
from markfmt.tags import is_childless, is_raw_text
from markfmt.utils.logger import get_logger

logger = get_logger(__name__)

_LINE_ENDINGS = re.compile(r"\r\n?")

# <!- and any further dashes open a comment, anything else after < up to
# whitespace, / or > is a tag name
_NODE_START = re.compile(r"<(?:(!-+)|([^/>\s]+))")
_COMMENT_OPEN = "<!--"
_COMMENT_END = "-->"
_ATTRIBUTE = re.compile(r"""\s+([^=\s/>]+)(?:=(["'])(.*?)\2)?""", re.DOTALL)
_END_OF_OPEN_TAG = re.compile(r"\s*(/?>)")
_XML_END_OF_OPEN_TAG = re.compile(r"\s*(\?>)")
_CLOSE_TAG = re.compile(r"</([^>]+)>")
_UNTIL_NEXT_NODE = re.compile(r"[^<]*")

_XML_DECLARATION = "?xml"


def normalize(markup: str) -> str:
    """Convert every line ending to ``\\n`` and strip surrounding whitespace."""
    return _LINE_ENDINGS.sub("\n", markup).strip()


class Parser:
    """Recursive descent parser for HTML/XML-like markup.

    Usage:
            >>> result = Parser("<ul><li>one</li></ul>").parse()
            >>> result.nodes[0].tag_name
            'ul'

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting tree is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lines",
        "_diagnostics",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with markup text.

        Args:
            source: Markup text, line endings in any convention
            source_file: Optional source file path for diagnostics

        """
        self._source = normalize(source)
        self._source_file = source_file
        self._lines = LineIndex(self._source, source_file)
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """The normalized markup all offsets refer to."""
        return self._source

    def parse(self) -> ParseResult:
        """Parse the whole source.

        Returns:
            ParseResult with the top-level nodes, trailing text and
            diagnostics. Never raises for malformed markup.

        """
        self._diagnostics = []
        nodes, pos = self._parse_children(0)

        trailing_text = self._source[pos:]
        if trailing_text:
            self._report(
                Severity.WARNING,
                f"Non-element text found starting at {self._locate(pos).describe()}",
                pos,
            )

        return ParseResult(
            nodes=tuple(nodes),
            trailing_text=trailing_text,
            diagnostics=tuple(self._diagnostics),
            source=self._source,
        )

    # =========================================================================
    # Node sequences
    # =========================================================================

    def _parse_children(self, pos: int) -> tuple[list[Node], int]:
        """Parse text runs and nodes until no node starts at the cursor."""
        source = self._source
        nodes: list[Node] = []
        while True:
            end = source.find("<", pos)
            if end == -1:
                end = len(source)
            if end > pos:
                # whitespace-only runs are kept; trimming is the formatter's call
                nodes.append(Text(source[pos:end], location=self._locate(pos)))
                pos = end

            parsed = self._parse_node(pos)
            if parsed is None:
                break
            node, pos = parsed
            nodes.append(node)
        return nodes, pos

    def _parse_node(self, pos: int) -> tuple[Node, int] | None:
        """Parse one comment or element starting at ``pos``."""
        match = _NODE_START.match(self._source, pos)
        if match is None:
            logger.debug("no node at offset %d", pos)
            return None
        if match.group(1):
            # dashes after <!-- may belong to the terminator, as in <!---->
            return self._parse_comment(pos, min(match.end(), pos + len(_COMMENT_OPEN)))
        return self._parse_element(pos, match.group(2), match.end())

    # =========================================================================
    # Comments
    # =========================================================================

    def _parse_comment(self, start: int, pos: int) -> tuple[Comment, int]:
        end = self._source.find(_COMMENT_END, pos)
        if end == -1:
            self._report(
                Severity.ERROR,
                f"Unterminated comment starting at {self._locate(start).describe()}",
                start,
            )
            end = len(self._source)
        else:
            end += len(_COMMENT_END)
        # whitespace inside comments is left as is
        return Comment(self._source[start:end], location=self._locate(start)), end

    # =========================================================================
    # Elements
    # =========================================================================

    def _parse_element(self, start: int, tag_name: str, pos: int) -> tuple[Element, int]:
        source = self._source
        location = self._locate(start)
        logger.debug("found node %s at %s", tag_name, location)

        attributes: list[Attribute] = []
        while (match := _ATTRIBUTE.match(source, pos)) is not None:
            name, _quote, value = match.groups()
            attributes.append(Attribute(name, value))
            pos = match.end()

        end_of_open_tag, pos = self._parse_end_of_open_tag(tag_name, pos)

        def element(children: tuple[Node, ...] = (), end_of_node: str = "") -> Element:
            return Element(
                tag_name,
                attributes=tuple(attributes),
                children=children,
                end_of_open_tag=end_of_open_tag,
                end_of_node=end_of_node,
                source_offset=start,
                location=location,
            )

        if end_of_open_tag in SELF_CLOSING_MARKERS:
            return element(), pos

        if is_childless(tag_name, attributes):
            logger.info("%s node found: assuming no content or children", tag_name)
            return element(), pos

        if is_raw_text(tag_name):
            logger.info("%s node found: assuming unrestricted content", tag_name)
            text, pos = self._parse_raw_text(tag_name, pos)
            children: tuple[Node, ...] = (text,)
        else:
            nodes, pos = self._parse_children(pos)
            children = tuple(nodes)

        end_of_node, pos = self._parse_close_tag(tag_name, location, pos)
        return element(children, end_of_node), pos

    def _parse_end_of_open_tag(self, tag_name: str, pos: int) -> tuple[str, int]:
        """Match ``>``, ``/>`` or (for ``?xml``) ``?>``.

        On failure the stray text up to the next ``<`` is taken as the end
        of the open tag, so it stays attached to the tag when rendered.
        Trailing whitespace of that text is left for the next text run.
        """
        match = _END_OF_OPEN_TAG.match(self._source, pos)
        if match is None and tag_name == _XML_DECLARATION:
            match = _XML_END_OF_OPEN_TAG.match(self._source, pos)
        if match is None:
            self._report(
                Severity.ERROR,
                f"Expected end-of-open-node marker for \"{tag_name}\" at {self._locate(pos).describe()}",
                pos,
            )
            stray = _UNTIL_NEXT_NODE.match(self._source, pos).group().rstrip()
            return stray, pos + len(stray)
        return match.group(1), match.end()

    def _parse_raw_text(self, tag_name: str, pos: int) -> tuple[Text, int]:
        """Take everything up to the literal closing tag as a single text node."""
        closing = re.compile(rf"</{re.escape(tag_name)}>", re.IGNORECASE)
        match = closing.search(self._source, pos)
        if match is None:
            self._report(
                Severity.ERROR,
                f"Unterminated {tag_name} tag starting at {self._locate(pos).describe()}",
                pos,
            )
            end = len(self._source)
        else:
            end = match.start()
        return Text(self._source[pos:end], location=self._locate(pos)), end

    def _parse_close_tag(self, tag_name: str, opened: SourceLocation, pos: int) -> tuple[str, int]:
        """Match the closing tag of ``tag_name``.

        Returns the literal closing tag text (or the recovered text) and
        the advanced cursor.
        """
        source = self._source
        here = self._locate(pos)
        match = _CLOSE_TAG.match(source, pos)

        if match is None:
            self._report(
                Severity.ERROR,
                f"Tag \"{tag_name}\" at {opened.describe()} is not closed at {here.describe()}",
                pos,
                related=opened,
            )
            end = source.find("<", pos)
            if end == -1:
                end = len(source)
            return source[pos:end], end

        closed_with = match.group(1)
        if closed_with != tag_name:
            # accepted as closed; the closing tag stays for the ancestors
            self._report(
                Severity.ERROR,
                f"Tag \"{tag_name}\" at {opened.describe()} is closed with \"{closed_with}\" at {here.describe()}",
                pos,
                related=opened,
            )
            return "", pos

        logger.debug("closed node %s", tag_name)
        return match.group(0), match.end()

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def _locate(self, offset: int) -> SourceLocation:
        return self._lines.locate(offset)

    def _report(
        self,
        severity: Severity,
        message: str,
        offset: int,
        related: SourceLocation | None = None,
    ) -> None:
        diagnostic = Diagnostic(severity, message, self._locate(offset), related)
        self._diagnostics.append(diagnostic)
        logger.log(severity.log_level, "%s", diagnostic)
