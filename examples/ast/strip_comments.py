"""Drop comments and count tags with the visitor API."""

from markfmt import parse, render
from markfmt.nodes import Comment, Element
from markfmt.visitor import BaseVisitor, transform


class TagCounter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_element(self, node: Element) -> None:
        self.counts[node.tag_name] = self.counts.get(node.tag_name, 0) + 1


result = parse("<!-- header --><nav><a href='/'>Home</a><!-- menu --><a href='/x'>X</a></nav>")

counter = TagCounter()
for node in result.nodes:
    counter.visit(node)
print("Tags:", counter.counts)

without_comments = transform(result.nodes, lambda n: None if isinstance(n, Comment) else n)
print(render(without_comments))
