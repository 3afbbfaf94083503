"""Markup renderer: pretty-printing and minifying a parsed tree.

Walks the tree once, deciding per element whether its children are
stacked (one per indented line) or kept inline, and whether text is kept
verbatim or trimmed. The goal is output that looks the same in a browser
as the input did.

Layout rules:
- Text inside a whitespace-sensitive element (span, pre, a, label, p), or
  anywhere below one, is kept verbatim. Elsewhere it is trimmed and
  dropped when empty.
- An element is stacked when it has at least one element child, no
  non-whitespace text, and its content is not being preserved.
- Everything else is inline: open tag, children and closing tag joined
  without separators.

Thread Safety:
The renderer keeps no per-render state on the instance. Each render() call
builds its own LineBuilder fragments, and the FormatConfig is frozen and
passed down explicitly. One MarkupRenderer can be shared across threads.
"""

from collections.abc import Iterable

from markfmt.config import DEFAULT_CONFIG, FormatConfig
from markfmt.errors import RenderError
from markfmt.nodes import Attribute, Comment, Element, Node, Text
from markfmt.result import ParseResult
from markfmt.stringbuilder import LineBuilder
from markfmt.tags import is_whitespace_sensitive
from markfmt.utils.logger import get_logger

logger = get_logger(__name__)


class MarkupRenderer:
    """Render a markup tree back to text.

    Usage:
        >>> from markfmt import parse
        >>> renderer = MarkupRenderer()
        >>> renderer.render(parse("<ul><li>a</li></ul>"))
        '<ul>\\n   <li>a</li>\\n</ul>'

    Thread Safety:
        Multiple threads can safely share a single MarkupRenderer instance.

    """

    __slots__ = ("_config",)

    def __init__(self, config: FormatConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Formatting options (defaults to FormatConfig())
        """
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> FormatConfig:
        return self._config

    def render(self, nodes: ParseResult | Iterable[Node]) -> str:
        """Render top-level nodes to a string.

        Args:
            nodes: A ParseResult or a sequence of top-level nodes. The
                trailing text of a ParseResult is not rendered.

        Returns:
            Formatted markup. Top-level nodes are separated by a newline,
            or by nothing when minifying.

        Raises:
            RenderError: If something other than a node is found in the tree.
        """
        if isinstance(nodes, ParseResult):
            nodes = nodes.nodes
        config = self._config

        out = LineBuilder()
        for node in nodes:
            fragment = self._render_node(node, self._preserves(node, False), config)
            if fragment:
                out.extend_indented(fragment, "")
        return out.build(config.separator)

    # =========================================================================
    # Nodes
    # =========================================================================

    @staticmethod
    def _preserves(node: Node, inherited: bool) -> bool:
        """Whether whitespace inside ``node`` must be kept as is."""
        if inherited:
            return True
        match node:
            case Element(tag_name=tag_name):
                return is_whitespace_sensitive(tag_name)
            case _:
                return False

    def _render_node(self, node: Node, preserve: bool, config: FormatConfig) -> LineBuilder | None:
        """Render one node; None when it contributes nothing."""
        match node:
            case Text(content=content):
                text = content if preserve else content.strip()
                return LineBuilder(text) if text else None
            case Comment(content=content):
                return LineBuilder(content) if config.include_comments else None
            case Element():
                return self._render_element(node, preserve, config)
            case _:
                msg = f"Cannot render {type(node).__name__!r}: not a markup node"
                raise RenderError(msg)

    def _render_element(self, node: Element, preserve: bool, config: FormatConfig) -> LineBuilder:
        indent = config.indent_unit
        out = self._render_open_tag(node, config)
        if node.is_self_closing:
            return out

        fragments: list[LineBuilder] = []
        has_text = False
        has_elements = False
        for child in node.children:
            match child:
                case Text(content=content):
                    has_text = has_text or bool(content.strip())
                case Element():
                    has_elements = True
            fragment = self._render_node(child, self._preserves(child, preserve), config)
            if fragment:
                fragments.append(fragment)

        if has_elements and not has_text and not preserve:
            logger.debug("stacking %s", node.tag_name)
            for fragment in fragments:
                out.extend_indented(fragment, indent)
            if node.end_of_node:
                out.new_line(node.end_of_node)
            return out

        # empty, has real text, or whitespace is preserved: keep it inline
        for fragment in fragments:
            out.splice(fragment)
        out.append(node.end_of_node)
        return out

    def _render_open_tag(self, node: Element, config: FormatConfig) -> LineBuilder:
        out = LineBuilder(f"<{node.tag_name}")
        attributes = [self._render_attribute(attr, config.attribute_quote) for attr in node.attributes]
        if config.stacks_attributes:
            for attribute in attributes:
                out.new_line(config.indent_unit + attribute)
        elif attributes:
            out.append(" " + " ".join(attributes))
        # the end-of-open-tag marker goes on the last attribute's line
        out.append(node.end_of_open_tag)
        return out

    @staticmethod
    def _render_attribute(attr: Attribute, quote: str) -> str:
        if attr.value is None:
            return attr.name
        return f"{attr.name}={quote}{attr.value}{quote}"
