"""Markup tree — the input vocabulary produced from parsed JSX."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from . import constants


class SourceLocation(BaseModel):
    """Structured source span from tree-sitter AST nodes."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int

    def is_unknown(self) -> bool:
        return (
            self.start_line == 0
            and self.start_col == 0
            and self.end_line == 0
            and self.end_col == 0
        )

    def __str__(self) -> str:
        if self.is_unknown():
            return "<unknown>"
        return f"{self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"


NO_SOURCE_LOCATION = SourceLocation(start_line=0, start_col=0, end_line=0, end_col=0)


# ── tag shapes ───────────────────────────────────────────────────


class TagName(BaseModel):
    """Plain tag: ``div`` or ``Foo``."""

    kind: Literal["TagName"] = "TagName"
    name: str


class QualifiedTagName(BaseModel):
    """Dotted tag: ``Foo.Bar.Baz``."""

    kind: Literal["QualifiedTagName"] = "QualifiedTagName"
    parts: list[str]


class NamespacedTagName(BaseModel):
    """Namespaced tag: ``svg:rect``. Not lowered to a known element kind."""

    kind: Literal["NamespacedTagName"] = "NamespacedTagName"
    namespace: str
    name: str


Tag = Annotated[
    Union[TagName, QualifiedTagName, NamespacedTagName],
    Field(discriminator="kind"),
]


# ── host expressions ─────────────────────────────────────────────


class EmbeddedElement(BaseModel):
    """Markup found inside a host expression; offsets are relative to its code."""

    start: int
    end: int
    element: Element


class HostExpression(BaseModel):
    """An opaque expression of the host language, kept verbatim."""

    kind: Literal["HostExpression"] = "HostExpression"
    code: str
    embedded: list[EmbeddedElement] = []


# ── attributes ───────────────────────────────────────────────────


class SpreadAttribute(BaseModel):
    kind: Literal["SpreadAttribute"] = "SpreadAttribute"
    expr: HostExpression


class NamedAttribute(BaseModel):
    """``name``, ``name="str"``, ``name={expr}`` or ``ns:name=...``.

    A ``None`` value is the shorthand boolean form (``<input disabled/>``).
    """

    kind: Literal["NamedAttribute"] = "NamedAttribute"
    name: str
    namespace: str | None = None
    value: str | HostExpression | None = None

    def resolved_name(self) -> str:
        if self.namespace is None:
            return self.name
        return f"{self.namespace}{constants.NAMESPACE_SEPARATOR}{self.name}"


Attribute = Annotated[
    Union[SpreadAttribute, NamedAttribute],
    Field(discriminator="kind"),
]


# ── nodes ────────────────────────────────────────────────────────


class Element(BaseModel):
    kind: Literal["Element"] = "Element"
    tag: Tag
    attributes: list[Attribute] = []
    children: list[MarkupNode] = []
    location: SourceLocation = NO_SOURCE_LOCATION


class Text(BaseModel):
    kind: Literal["Text"] = "Text"
    raw: str


class ExpressionHole(BaseModel):
    """``{expr}`` in child position; ``expr`` is ``None`` for ``{}`` or ``{/* c */}``."""

    kind: Literal["ExpressionHole"] = "ExpressionHole"
    expr: HostExpression | None = None


class UnsupportedNode(BaseModel):
    """A child the lowering does not handle (fragment, spread child)."""

    kind: Literal["UnsupportedNode"] = "UnsupportedNode"
    node_type: str


MarkupNode = Annotated[
    Union[Element, Text, ExpressionHole, UnsupportedNode],
    Field(discriminator="kind"),
]


EmbeddedElement.model_rebuild()
HostExpression.model_rebuild()
SpreadAttribute.model_rebuild()
NamedAttribute.model_rebuild()
Element.model_rebuild()
