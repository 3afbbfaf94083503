"""Tag-name classification.

All sets are frozensets of lowercase names for O(1), case-insensitive
membership tests after a single ``lower()``.

Usage:
    from markfmt.tags import is_childless

    if is_childless(element.tag_name, element.attributes):
        ...
"""

from collections.abc import Iterable

from markfmt.nodes import Attribute

# Elements which cannot contain content
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Elements whose content is whitespace-sensitive when rendered in a browser
WHITESPACE_SENSITIVE: frozenset[str] = frozenset({"span", "pre", "a", "label", "p"})

# Elements whose content is taken verbatim up to the closing tag
RAW_TEXT_ELEMENTS: frozenset[str] = frozenset({"script"})


def is_void(tag_name: str) -> bool:
    return tag_name.lower() in VOID_ELEMENTS


def is_directive(tag_name: str) -> bool:
    """``<!DOCTYPE ...>`` and friends."""
    return tag_name.startswith("!")


def is_childless(tag_name: str, attributes: Iterable[Attribute] = ()) -> bool:
    """Whether an element is complete as soon as its open tag ends.

    True for void elements, directives, and ``colgroup`` carrying an
    attribute whose name contains ``span``.
    """
    name = tag_name.lower()
    if is_directive(name) or name in VOID_ELEMENTS:
        return True
    if name == "colgroup":
        return any("span" in attr.name.lower() for attr in attributes)
    return False


def is_whitespace_sensitive(tag_name: str | None) -> bool:
    """Whether the element's content must be kept verbatim.

    Accepts None so callers can pass the tag of a non-element node.
    """
    return bool(tag_name) and tag_name.lower() in WHITESPACE_SENSITIVE


def is_raw_text(tag_name: str) -> bool:
    return tag_name.lower() in RAW_TEXT_ELEMENTS
