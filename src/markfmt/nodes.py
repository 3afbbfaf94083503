"""Typed markup tree nodes for markfmt.

All nodes are frozen dataclasses with slots for:
- Immutability: the tree is built once by the parser and only read afterwards
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements dispatch on the node variant

Node Hierarchy:
Node (base)
├── Text
├── Comment
└── Element

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass, field

from markfmt.location import SourceLocation

# Markers that complete an element on its open tag
SELF_CLOSING_MARKERS: frozenset[str] = frozenset({"/>", "?>"})


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes.

    Nodes track their source location for diagnostics and debugging.

    """

    location: SourceLocation = field(default_factory=SourceLocation.unknown, kw_only=True)


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A run of character data between tags.

    Whitespace-only runs are kept; the formatter decides whether they
    matter.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Comment(Node):
    """Markup comment, stored with its ``<!-`` / ``<!--`` and ``-->`` delimiters.

    An unterminated comment holds everything up to the end of input.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Attribute:
    """One attribute of an open tag.

    ``value`` is None for valueless attributes such as ``disabled``.
    """

    name: str
    value: str | None = None


@dataclass(frozen=True, slots=True)
class Element(Node):
    """A tag, its attributes and content.

    Attributes:
        tag_name: Name as written in the source (case preserved)
        attributes: Attributes in source order, duplicates kept
        children: Child nodes in source order
        end_of_open_tag: ``">"``, ``"/>"``, ``"?>"``, or the stray text up to
            the next ``<`` when the marker is missing
        end_of_node: Literal closing tag, or ``""`` when there is none
        source_offset: Offset of the opening ``<`` in the normalized source

    """

    tag_name: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple["Node", ...] = ()
    end_of_open_tag: str = ">"
    end_of_node: str = ""
    source_offset: int = 0

    @property
    def is_self_closing(self) -> bool:
        """True for ``<x/>`` and ``<?xml ...?>`` style elements."""
        return self.end_of_open_tag in SELF_CLOSING_MARKERS

    def get(self, name: str, default: str | None = None) -> str | None:
        """Value of the first attribute called ``name``.

        Valueless attributes return None; missing ones return ``default``.
        """
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return default


# PEP 695 type alias for any node that can appear in a tree
type MarkupNode = Text | Comment | Element
