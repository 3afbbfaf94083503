"""Tests for the tree visitor, walker and transform utilities."""

import dataclasses

from markfmt import format, parse, render
from markfmt.nodes import Comment, Element, Node, Text
from markfmt.visitor import BaseVisitor, transform, walk

SOURCE = "<!-- top --><div><p>a <b>b</b></p><!-- inner --><br></div>"


class TagCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.tags: list[str] = []

    def visit_element(self, node: Element) -> None:
        self.tags.append(node.tag_name)


class KindCounter(BaseVisitor[str]):
    def __init__(self) -> None:
        self.kinds: list[str] = []

    def visit_default(self, node: Node) -> str:
        kind = type(node).__name__
        self.kinds.append(kind)
        return kind


class TestBaseVisitor:
    def test_elements_visited_in_document_order(self) -> None:
        collector = TagCollector()
        for node in parse(SOURCE).nodes:
            collector.visit(node)
        assert collector.tags == ["div", "p", "b", "br"]

    def test_unhandled_types_fall_through_to_default(self) -> None:
        counter = KindCounter()
        result = counter.visit(parse("<p>x<!-- c --></p>").nodes[0])
        assert result == "Element"
        assert counter.kinds == ["Element", "Text", "Comment"]


class TestWalk:
    def test_depth_first(self) -> None:
        kinds = [type(n).__name__ for n in walk(parse(SOURCE).nodes)]
        assert kinds == ["Comment", "Element", "Element", "Text", "Element", "Text", "Comment", "Element"]

    def test_empty(self) -> None:
        assert list(walk(())) == []


class TestTransform:
    def test_remove_comments(self) -> None:
        nodes = transform(parse(SOURCE).nodes, lambda n: None if isinstance(n, Comment) else n)
        assert not any(isinstance(n, Comment) for n in walk(nodes))
        assert render(nodes) == "<div>\n   <p>a <b>b</b></p>\n   <br>\n</div>"

    def test_rename_tags(self) -> None:
        def rename(node: Node) -> Node:
            if isinstance(node, Element) and node.tag_name == "b":
                return dataclasses.replace(node, tag_name="strong", end_of_node="</strong>")
            return node

        nodes = transform(parse("<p><b>x</b></p>").nodes, rename)
        assert render(nodes) == "<p><strong>x</strong></p>"

    def test_bottom_up_order(self) -> None:
        seen: list[str] = []

        def record(node: Node) -> Node:
            seen.append(node.tag_name if isinstance(node, Element) else node.content)
            return node

        transform(parse("<a><b>x</b></a>").nodes, record)
        assert seen == ["x", "b", "a"]

    def test_original_untouched(self) -> None:
        result = parse(SOURCE)
        transform(result.nodes, lambda n: Text("!") if isinstance(n, Text) else n)
        assert render(result) == format(SOURCE)

    def test_identity_returns_equal_tree(self) -> None:
        nodes = parse(SOURCE).nodes
        assert transform(nodes, lambda n: n) == nodes
