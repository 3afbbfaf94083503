"""markfmt renderers.

Renderers convert a parsed markup tree back into text.

Available Renderers:
- MarkupRenderer: pretty-prints or minifies markup using LineBuilder

Thread Safety:
Renderers build their output locally in each render() call.
Safe for concurrent use from multiple threads.

"""

from markfmt.renderers.markup import MarkupRenderer

__all__ = ["MarkupRenderer"]
