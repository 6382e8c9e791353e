"""Tests for ChildrenBuilder — text normalization, holes and collapsing."""

from __future__ import annotations

from vnode_lowering.children import ChildrenBuilder, is_empty_children, normalize_text
from vnode_lowering.expressions import (
    NO_VALUE,
    ArrayExpression,
    Identifier,
    RawExpression,
    StringLiteral,
)
from vnode_lowering.markup import (
    Element,
    ExpressionHole,
    HostExpression,
    TagName,
    Text,
    UnsupportedNode,
)


def _builder():
    return ChildrenBuilder(
        lambda element: Identifier(name=element.tag.name),
        lambda expr: RawExpression(code=expr.code),
    )


class TestNormalizeText:
    def test_strips_line_break_runs(self):
        assert normalize_text("\n    Hello\n  ") == "Hello"

    def test_keeps_inline_spaces(self):
        assert normalize_text(" a  b ") == " a  b "

    def test_strips_tabs(self):
        assert normalize_text("\ta\tb") == "ab"

    def test_whitespace_with_line_break_is_empty(self):
        assert normalize_text("  \r\n\t ") == ""

    def test_idempotent(self):
        once = normalize_text("\n  one\n\ttwo  \n")
        assert normalize_text(once) == once


class TestBuild:
    def test_single_child_collapses(self):
        assert _builder().build([Text(raw="Hello")]) == StringLiteral(value="Hello")

    def test_no_children_is_empty_array(self):
        assert _builder().build([]) == ArrayExpression()

    def test_drops_non_contributing_children(self):
        result = _builder().build(
            [
                Text(raw="\n  "),
                ExpressionHole(),
                Element(tag=TagName(name="b")),
                UnsupportedNode(node_type="jsx_fragment"),
                Text(raw="\n"),
            ]
        )
        assert result == Identifier(name="b")

    def test_multiple_children_keep_order(self):
        result = _builder().build(
            [
                Text(raw="Hi "),
                ExpressionHole(expr=HostExpression(code="name")),
                Element(tag=TagName(name="br")),
            ]
        )
        assert result == ArrayExpression(
            elements=[
                StringLiteral(value="Hi "),
                RawExpression(code="name"),
                Identifier(name="br"),
            ]
        )

    def test_building_normalized_text_again_is_stable(self):
        children = [Text(raw="\n  a\n"), Text(raw=" b ")]
        first = _builder().build(children)
        again = _builder().build([Text(raw=e.value) for e in first.elements])
        assert again == first


class TestIsEmptyChildren:
    def test_empty_forms(self):
        assert is_empty_children(None)
        assert is_empty_children(NO_VALUE)
        assert is_empty_children(ArrayExpression())

    def test_non_empty(self):
        assert not is_empty_children(StringLiteral(value=""))
        assert not is_empty_children(ArrayExpression(elements=[NO_VALUE]))
