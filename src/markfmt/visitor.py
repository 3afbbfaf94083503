"""Tree visitor, walker and transformer for markfmt.

Provides a base visitor class with match-based dispatch, a depth-first
node iterator, and an immutable transform function for rewriting frozen
trees.

Example, collect all tag names:

    class TagCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.tags: list[str] = []

        def visit_element(self, node: Element) -> None:
            self.tags.append(node.tag_name)

    collector = TagCollector()
    for node in result.nodes:
        collector.visit(node)

Example, drop comments:

    nodes = transform(result.nodes, lambda n: None if isinstance(n, Comment) else n)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. ``walk`` and
    ``transform`` are pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable, Iterable, Iterator

from markfmt.nodes import Comment, Element, Node, Text


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        if isinstance(node, Element):
            for child in node.children:
                self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_comment(self, node: Comment) -> T:
        return self.visit_default(node)

    def visit_element(self, node: Element) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Text():
                return self.visit_text(node)
            case Comment():
                return self.visit_comment(node)
            case Element():
                return self.visit_element(node)
            case _:
                return self.visit_default(node)


def walk(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node depth-first, parents before their children."""
    for node in nodes:
        yield node
        if isinstance(node, Element):
            yield from walk(node.children)


def transform(nodes: Iterable[Node], fn: Callable[[Node], Node | None]) -> tuple[Node, ...]:
    """Apply a function to every node, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node from the tree.

    Args:
        nodes: Top-level nodes to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node.

    Returns:
        The transformed top-level nodes. The input tree is untouched.

    """
    return tuple(result for node in nodes if (result := _transform_node(node, fn)) is not None)


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    if isinstance(node, Element) and node.children:
        children = transform(node.children, fn)
        if children != node.children:
            node = dataclasses.replace(node, children=children)
    return fn(node)
