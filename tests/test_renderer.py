"""Tests for MarkupRenderer."""

from __future__ import annotations

import pytest

from markfmt import FormatConfig, format, parse, render
from markfmt.errors import RenderError
from markfmt.nodes import Attribute, Comment, Element, Text
from markfmt.renderers.markup import MarkupRenderer

PAGE = (
    "<html><head><title>T</title></head>"
    "<body><div><p>Hello <b>world</b></p></div></body></html>"
)


class TestStackedLayout:
    """Elements holding only elements are stacked and indented."""

    def test_page(self) -> None:
        assert format(PAGE) == (
            "<html>\n"
            "   <head>\n"
            "      <title>T</title>\n"
            "   </head>\n"
            "   <body>\n"
            "      <div>\n"
            "         <p>Hello <b>world</b></p>\n"
            "      </div>\n"
            "   </body>\n"
            "</html>"
        )

    def test_whitespace_only_text_is_dropped(self) -> None:
        assert format("<div>   <p>x</p>   </div>") == "<div>\n   <p>x</p>\n</div>"

    def test_custom_indent(self) -> None:
        config = FormatConfig(indent="\t")
        assert format("<ul><li>a</li><li>b</li></ul>", config) == "<ul>\n\t<li>a</li>\n\t<li>b</li>\n</ul>"

    def test_void_children_are_stacked(self) -> None:
        assert format("<div><br><hr/></div>") == "<div>\n   <br>\n   <hr/>\n</div>"

    def test_comments_are_stacked_with_elements(self) -> None:
        assert format("<div><!-- c --><p>x</p></div>") == "<div>\n   <!-- c -->\n   <p>x</p>\n</div>"

    def test_top_level_nodes_one_per_line(self) -> None:
        source = "<!DOCTYPE html>\n\n<html><body></body></html>"
        assert format(source) == "<!DOCTYPE html>\n<html>\n   <body></body>\n</html>"

    def test_self_closing_child(self) -> None:
        assert format('<svg><path d="M0"/></svg>') == '<svg>\n   <path d="M0"/>\n</svg>'


class TestInlineLayout:
    """Elements with text, or whose whitespace matters, stay inline."""

    def test_text_is_trimmed(self) -> None:
        assert format("<div>\n   hello\n</div>") == "<div>hello</div>"

    def test_inner_line_breaks_of_text_are_kept(self) -> None:
        assert format("<div>one\n   two</div>") == "<div>one\n   two</div>"

    def test_empty_element(self) -> None:
        assert format("<div>\n\n</div>") == "<div></div>"

    def test_mixed_text_and_elements(self) -> None:
        assert format("<div> a <b>x</b> c </div>") == "<div>a<b>x</b>c</div>"

    def test_stacked_child_keeps_its_lines(self) -> None:
        assert format("<div>hi<ul><li>a</li></ul></div>") == "<div>hi<ul>\n   <li>a</li>\n</ul></div>"

    def test_stacked_child_of_inline_inside_stacked_parent(self) -> None:
        source = "<body><div>hi<ul><li>a</li></ul>there</div></body>"
        assert format(source) == (
            "<body>\n"
            "   <div>hi<ul>\n"
            "      <li>a</li>\n"
            "   </ul>there</div>\n"
            "</body>"
        )

    def test_script_content_is_trimmed(self) -> None:
        assert format("<script>\n  var a = 1;\n</script>") == "<script>var a = 1;</script>"


class TestWhitespaceSensitivity:
    """span, pre, a, label and p keep their content verbatim."""

    def test_pre_inside_div(self) -> None:
        assert format("<div><pre>  a   b  </pre></div>") == "<div>\n   <pre>  a   b  </pre>\n</div>"

    @pytest.mark.parametrize("tag", ["span", "pre", "a", "label", "p", "PRE", "Span"])
    def test_sensitive_tags(self, tag: str) -> None:
        assert format(f"<{tag}> x  y </{tag}>") == f"<{tag}> x  y </{tag}>"

    def test_top_level_pre(self) -> None:
        assert format("<pre>\n  code\n</pre>") == "<pre>\n  code\n</pre>"

    def test_preservation_reaches_all_descendants(self) -> None:
        source = "<pre><div>  <b> x </b>  </div></pre>"
        assert format(source) == source

    def test_no_stacking_below_sensitive_ancestor(self) -> None:
        assert format("<pre><div><b>x</b></div></pre>") == "<pre><div><b>x</b></div></pre>"

    def test_sensitive_element_with_only_elements_is_inline(self) -> None:
        assert format("<p><b>a</b> <i>b</i></p>") == "<p><b>a</b> <i>b</i></p>"

    def test_siblings_are_not_affected(self) -> None:
        source = "<div><pre> a </pre><div> b </div></div>"
        assert format(source) == "<div>\n   <pre> a </pre>\n   <div>b</div>\n</div>"

    def test_preserved_multiline_text_is_not_reindented(self) -> None:
        source = "<div><pre>a\n  b</pre></div>"
        assert format(source) == "<div>\n   <pre>a\n  b</pre>\n</div>"


class TestAttributes:
    """Attribute rendering."""

    def test_quotes_are_normalized(self) -> None:
        assert format("<input disabled value='x'>") == '<input disabled value="x">'

    def test_values_are_not_escaped(self) -> None:
        assert format('<a href="?a=1&b=2">x</a>') == '<a href="?a=1&b=2">x</a>'

    def test_whitespace_inside_tag_is_normalized(self) -> None:
        assert format('<div   id="a"\n  class="b"  >x</div>') == '<div id="a" class="b">x</div>'

    def test_indent_attributes(self) -> None:
        config = FormatConfig(indent_attributes=True)
        source = '<div id="a" class="b"><span>x</span></div>'
        assert format(source, config) == (
            "<div\n"
            '   id="a"\n'
            '   class="b">\n'
            "   <span>x</span>\n"
            "</div>"
        )

    def test_indent_attributes_without_attributes(self) -> None:
        config = FormatConfig(indent_attributes=True)
        assert format("<div><br></div>", config) == "<div>\n   <br>\n</div>"

    def test_indent_attributes_self_closing(self) -> None:
        config = FormatConfig(indent_attributes=True)
        assert format('<img src="a.png" alt=""/>', config) == '<img\n   src="a.png"\n   alt=""/>'

    def test_single_quote_config(self) -> None:
        config = FormatConfig(attribute_quote="'")
        assert format('<p class="x">y</p>', config) == "<p class='x'>y</p>"


class TestComments:
    """include_comments switch."""

    def test_comments_included_by_default(self) -> None:
        assert format("<!-- a -->\n<p>x</p>") == "<!-- a -->\n<p>x</p>"

    def test_comments_dropped(self) -> None:
        config = FormatConfig(include_comments=False)
        assert format("<div><!-- c --><p>x</p></div>", config) == "<div>\n   <p>x</p>\n</div>"

    def test_dropped_top_level_comment_leaves_no_blank_line(self) -> None:
        config = FormatConfig(include_comments=False)
        assert format("<a>x</a><!-- c --><b>y</b>", config) == "<a>x</a>\n<b>y</b>"


class TestMinify:
    """minify=True removes every separator and indent the formatter adds."""

    def test_collapses_structure(self) -> None:
        config = FormatConfig(minify=True)
        source = "<ul>\n  <li> a </li>\n  <li>b</li>\n</ul>"
        assert format(source, config) == "<ul><li>a</li><li>b</li></ul>"

    def test_keeps_preserved_text(self) -> None:
        config = FormatConfig(minify=True)
        assert format("<div>\n <p> a  b </p>\n</div>", config) == "<div><p> a  b </p></div>"

    def test_top_level_nodes_are_joined(self) -> None:
        config = FormatConfig(minify=True)
        assert format("<a>x</a>\n<b>y</b>", config) == "<a>x</a><b>y</b>"

    def test_ignores_indent_attributes_line_breaks(self) -> None:
        config = FormatConfig(minify=True, indent_attributes=True)
        assert format('<div id="a" hidden><br></div>', config) == '<div id="a" hidden><br></div>'

    def test_single_line(self) -> None:
        config = FormatConfig(minify=True)
        assert "\n" not in format(PAGE, config)


class TestMalformedInput:
    """Degraded trees still render."""

    def test_mismatched_close_keeps_original_name(self) -> None:
        assert format("<a><b></a>") == "<a><b></a>"

    def test_unclosed_element(self) -> None:
        assert format("<div><p>x") == "<div>\n   <p>x"

    def test_missing_end_of_open_tag_keeps_text(self) -> None:
        assert format("<div a=b>text</div>") == "<div a=b>text</div>"

    def test_missing_end_of_open_tag_stays_on_tag_line(self) -> None:
        source = "<img src=x>\n<p>a</p>"
        assert format(source) == "<img src=x>\n<p>a</p>"
        assert format(format(source)) == format(source)

    def test_missing_end_of_open_tag_with_stacked_attributes(self) -> None:
        config = FormatConfig(indent_attributes=True)
        assert format("<img src=x>\n<p>a</p>", config) == "<img\n   src=x>\n<p>a</p>"

    def test_unterminated_comment(self) -> None:
        assert format("<p>x</p><!-- never closed") == "<p>x</p>\n<!-- never closed"


class TestRendererApi:
    """MarkupRenderer entry points."""

    def test_accepts_parse_result_and_node_sequence(self) -> None:
        result = parse("<p>x</p>")
        assert render(result) == render(result.nodes) == "<p>x</p>"

    def test_renders_hand_built_tree(self) -> None:
        tree = (
            Element(
                "ul",
                attributes=(Attribute("class", "menu"),),
                children=(
                    Element("li", children=(Text("a"),), end_of_node="</li>"),
                    Comment("<!-- b -->"),
                ),
                end_of_node="</ul>",
            ),
        )
        assert MarkupRenderer().render(tree) == '<ul class="menu">\n   <li>a</li>\n   <!-- b -->\n</ul>'

    def test_config_property(self) -> None:
        config = FormatConfig(minify=True)
        assert MarkupRenderer(config).config is config

    def test_non_node_raises(self) -> None:
        with pytest.raises(RenderError, match="not a markup node"):
            MarkupRenderer().render(["<p>"])  # type: ignore[list-item]
