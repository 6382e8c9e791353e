"""Host expression tree — the output vocabulary of the lowering.

Mirrors the subset of an ECMAScript expression AST the factory calls need.
``NoValue`` is the runtime's canonical "no value" (``null``) and is what
backfilled positional slots hold; it is never produced from user code.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Identifier(BaseModel):
    kind: Literal["Identifier"] = "Identifier"
    name: str


class StringLiteral(BaseModel):
    kind: Literal["StringLiteral"] = "StringLiteral"
    value: str


class BooleanLiteral(BaseModel):
    kind: Literal["BooleanLiteral"] = "BooleanLiteral"
    value: bool


class NumericLiteral(BaseModel):
    kind: Literal["NumericLiteral"] = "NumericLiteral"
    value: int


class NoValue(BaseModel):
    kind: Literal["NoValue"] = "NoValue"


class ObjectProperty(BaseModel):
    kind: Literal["ObjectProperty"] = "ObjectProperty"
    key: PropertyKey
    value: Expression


class SpreadProperty(BaseModel):
    kind: Literal["SpreadProperty"] = "SpreadProperty"
    argument: Expression


class ObjectExpression(BaseModel):
    kind: Literal["ObjectExpression"] = "ObjectExpression"
    properties: list[ObjectMember] = []


class ArrayExpression(BaseModel):
    kind: Literal["ArrayExpression"] = "ArrayExpression"
    elements: list[Expression] = []


class MemberExpression(BaseModel):
    kind: Literal["MemberExpression"] = "MemberExpression"
    object: Expression
    property: Identifier


class CallExpression(BaseModel):
    kind: Literal["CallExpression"] = "CallExpression"
    callee: Expression
    arguments: list[Expression] = []


class Substitution(BaseModel):
    """Replace ``code[start:end]`` of a RawExpression with *replacement*."""

    start: int
    end: int
    replacement: CallExpression


class RawExpression(BaseModel):
    """Host code carried through verbatim, with lowered markup substitutions."""

    kind: Literal["RawExpression"] = "RawExpression"
    code: str
    substitutions: list[Substitution] = []


Expression = Annotated[
    Union[
        Identifier,
        StringLiteral,
        BooleanLiteral,
        NumericLiteral,
        NoValue,
        ObjectExpression,
        ArrayExpression,
        MemberExpression,
        CallExpression,
        RawExpression,
    ],
    Field(discriminator="kind"),
]

PropertyKey = Annotated[
    Union[StringLiteral, Identifier],
    Field(discriminator="kind"),
]

ObjectMember = Annotated[
    Union[ObjectProperty, SpreadProperty],
    Field(discriminator="kind"),
]

for _model in (
    ObjectProperty,
    SpreadProperty,
    ObjectExpression,
    ArrayExpression,
    MemberExpression,
    CallExpression,
    Substitution,
    RawExpression,
):
    _model.model_rebuild()


NO_VALUE = NoValue()


def is_no_value(expr) -> bool:
    return expr is None or isinstance(expr, NoValue)


def member_chain(names: list[str]) -> Identifier | MemberExpression:
    """Build ``a.b.c`` as nested MemberExpressions from ``["a", "b", "c"]``."""
    expr: Identifier | MemberExpression = Identifier(name=names[0])
    for name in names[1:]:
        expr = MemberExpression(object=expr, property=Identifier(name=name))
    return expr
