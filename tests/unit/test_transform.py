"""Tests for ElementTransformer — element assembly and component children folding."""

from __future__ import annotations

from vnode_lowering.config import LoweringConfig
from vnode_lowering.expressions import (
    NO_VALUE,
    BooleanLiteral,
    CallExpression,
    Identifier,
    MemberExpression,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    RawExpression,
    SpreadProperty,
    StringLiteral,
    Substitution,
)
from vnode_lowering.markup import (
    Element,
    EmbeddedElement,
    ExpressionHole,
    HostExpression,
    NamedAttribute,
    NamespacedTagName,
    SpreadAttribute,
    TagName,
    Text,
)
from vnode_lowering.transform import ElementTransformer, transform

FACTORY = MemberExpression(
    object=Identifier(name="Inferno"), property=Identifier(name="createVNode")
)


def _el(tag, attributes=(), children=()):
    return Element(tag=TagName(name=tag), attributes=list(attributes), children=list(children))


def _args(node):
    call = transform(node)
    assert isinstance(call, CallExpression)
    assert call.callee == FACTORY
    return call.arguments


class TestScenarios:
    def test_element_with_text_child(self):
        assert _args(_el("div", children=[Text(raw="Hello")])) == [
            NumericLiteral(value=2),
            StringLiteral(value="div"),
            NO_VALUE,
            StringLiteral(value="Hello"),
        ]

    def test_bare_svg(self):
        assert _args(_el("svg")) == [NumericLiteral(value=128), StringLiteral(value="svg")]

    def test_component_with_key(self):
        node = _el("Foo", attributes=[NamedAttribute(name="key", value="x")])
        assert _args(node) == [
            NumericLiteral(value=16),
            Identifier(name="Foo"),
            NO_VALUE,
            NO_VALUE,
            StringLiteral(value="x"),
        ]

    def test_component_children_fold_into_props(self):
        bar_call = CallExpression(
            callee=FACTORY, arguments=[NumericLiteral(value=16), Identifier(name="Bar")]
        )
        assert _args(_el("Foo", children=[_el("Bar")])) == [
            NumericLiteral(value=16),
            Identifier(name="Foo"),
            ObjectExpression(
                properties=[ObjectProperty(key=Identifier(name="children"), value=bar_call)]
            ),
        ]

    def test_spread_then_named_order(self):
        node = _el(
            "div",
            attributes=[
                SpreadAttribute(expr=HostExpression(code="rest")),
                NamedAttribute(name="id", value="a"),
            ],
        )
        assert _args(node)[2] == ObjectExpression(
            properties=[
                SpreadProperty(argument=RawExpression(code="rest")),
                ObjectProperty(key=StringLiteral(value="id"), value=StringLiteral(value="a")),
            ]
        )

    def test_component_hook_becomes_ref(self):
        node = _el(
            "Foo",
            attributes=[
                NamedAttribute(name="onComponentWillMount", value=HostExpression(code="fn"))
            ],
        )
        assert _args(node) == [
            NumericLiteral(value=16),
            Identifier(name="Foo"),
            NO_VALUE,
            NO_VALUE,
            NO_VALUE,
            ObjectExpression(
                properties=[
                    ObjectProperty(
                        key=StringLiteral(value="onComponentWillMount"),
                        value=RawExpression(code="fn"),
                    )
                ]
            ),
        ]


class TestAssembly:
    def test_no_attributes_no_children_has_two_arguments(self):
        assert len(_args(_el("span"))) == 2
        assert len(_args(_el("Foo"))) == 2

    def test_children_hints_add_flags(self):
        node = _el(
            "ul",
            attributes=[
                NamedAttribute(name="hasKeyedChildren"),
                NamedAttribute(name="hasNonKeyedChildren"),
            ],
        )
        assert _args(node) == [NumericLiteral(value=2 | 32 | 64), StringLiteral(value="ul")]

    def test_no_normalize_is_last_argument(self):
        args = _args(_el("div", attributes=[NamedAttribute(name="noNormalize")]))
        assert len(args) == 7
        assert args[-1] == BooleanLiteral(value=True)

    def test_component_existing_props_get_children_appended(self):
        node = _el(
            "Foo",
            attributes=[NamedAttribute(name="title", value="t")],
            children=[Text(raw="hi")],
        )
        assert _args(node)[2] == ObjectExpression(
            properties=[
                ObjectProperty(key=StringLiteral(value="title"), value=StringLiteral(value="t")),
                ObjectProperty(key=Identifier(name="children"), value=StringLiteral(value="hi")),
            ]
        )

    def test_component_whitespace_children_are_not_folded(self):
        args = _args(_el("Foo", children=[Text(raw="\n   \n")]))
        assert args == [NumericLiteral(value=16), Identifier(name="Foo")]

    def test_component_children_not_passed_positionally(self):
        node = _el("Foo", attributes=[NamedAttribute(name="key", value="k")], children=[Text(raw="x")])
        args = _args(node)
        assert args[3] == NO_VALUE
        assert args[4] == StringLiteral(value="k")

    def test_multiple_element_children(self):
        args = _args(_el("p", children=[Text(raw="a"), _el("b"), ExpressionHole()]))
        assert args[3].kind == "ArrayExpression"
        assert len(args[3].elements) == 2

    def test_embedded_markup_in_expression_is_lowered(self):
        hole = ExpressionHole(
            expr=HostExpression(
                code="ok && <b/>",
                embedded=[EmbeddedElement(start=6, end=10, element=_el("b"))],
            )
        )
        children = _args(_el("div", children=[hole]))[3]
        assert children == RawExpression(
            code="ok && <b/>",
            substitutions=[
                Substitution(
                    start=6,
                    end=10,
                    replacement=CallExpression(
                        callee=FACTORY,
                        arguments=[NumericLiteral(value=2), StringLiteral(value="b")],
                    ),
                )
            ],
        )

    def test_input_tree_is_not_mutated(self):
        node = _el("Foo", attributes=[NamedAttribute(name="a", value="1")], children=[_el("Bar")])
        before = node.model_copy(deep=True)
        transform(node)
        assert node == before

    def test_custom_factory_name(self):
        transformer = ElementTransformer(LoweringConfig(factory_namespace="h", factory_method="v"))
        call = transformer.transform(_el("div"))
        assert call.callee == MemberExpression(
            object=Identifier(name="h"), property=Identifier(name="v")
        )

    def test_namespaced_tag_lowers_without_flags(self):
        node = Element(tag=NamespacedTagName(namespace="svg", name="rect"))
        assert _args(node) == [NumericLiteral(value=0), StringLiteral(value="svg:rect")]

    def test_non_element_nodes(self):
        assert transform(Text(raw="\n\t")) is None
        assert transform(Text(raw="x")) == StringLiteral(value="x")
        assert transform(ExpressionHole()) is None
