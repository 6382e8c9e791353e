"""MarkupReader — tree-sitter jsx_* nodes → markup tree.

Text children are read as the raw source between non-text siblings rather
than from ``jsx_text`` nodes, so the whitespace the author wrote (including
line breaks the grammar leaves out of ``jsx_text``) reaches text
normalization unchanged.
"""

from __future__ import annotations

import html
import logging
from typing import Iterator

from .markup import (
    Element,
    EmbeddedElement,
    ExpressionHole,
    HostExpression,
    NamedAttribute,
    NamespacedTagName,
    QualifiedTagName,
    SourceLocation,
    SpreadAttribute,
    TagName,
    Text,
    UnsupportedNode,
)

logger = logging.getLogger(__name__)

ELEMENT_NODE_TYPES: frozenset[str] = frozenset({"jsx_element", "jsx_self_closing_element"})
FRAGMENT_NODE_TYPE = "jsx_fragment"
EXPRESSION_NODE_TYPE = "jsx_expression"
ATTRIBUTE_NODE_TYPE = "jsx_attribute"
SPREAD_NODE_TYPE = "spread_element"
OPENING_NODE_TYPE = "jsx_opening_element"
CLOSING_NODE_TYPE = "jsx_closing_element"

# Children that split the surrounding text into separate runs
CHILD_DELIMITER_TYPES: frozenset[str] = ELEMENT_NODE_TYPES | {
    FRAGMENT_NODE_TYPE,
    EXPRESSION_NODE_TYPE,
}

IDENTIFIER_TYPES: frozenset[str] = frozenset(
    {"identifier", "jsx_identifier", "property_identifier"}
)
QUALIFIED_NAME_TYPES: frozenset[str] = frozenset({"member_expression", "nested_identifier"})
NAMESPACED_NAME_TYPE = "jsx_namespace_name"

COMMENT_TYPES: frozenset[str] = frozenset({"comment"})

NAME_FIELD = "name"


def _opening_element(node):
    if node.type == "jsx_self_closing_element":
        return node
    return next((c for c in node.children if c.type == OPENING_NODE_TYPE), None)


def is_fragment(node) -> bool:
    """``<>...</>``: its own node type in older grammars, a nameless element in newer ones."""
    if node.type == FRAGMENT_NODE_TYPE:
        return True
    if node.type != "jsx_element":
        return False
    opening = _opening_element(node)
    return opening is None or opening.child_by_field_name(NAME_FIELD) is None


def is_markup_element(node) -> bool:
    return node.type in ELEMENT_NODE_TYPES and not is_fragment(node)


def find_outermost_elements(node) -> Iterator:
    """Yield markup elements under *node* that are not inside another element."""
    if is_markup_element(node):
        yield node
        return
    for child in node.children:
        yield from find_outermost_elements(child)


def node_location(node) -> SourceLocation:
    s, e = node.start_point, node.end_point
    return SourceLocation(
        start_line=s[0] + 1,
        start_col=s[1],
        end_line=e[0] + 1,
        end_col=e[1],
    )


def first_syntax_error(node):
    """First ERROR or MISSING node under *node* in source order, else ``None``."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = first_syntax_error(child)
            if found is not None:
                return found
    return None


class MarkupReader:
    def __init__(self, source: bytes):
        self._source = source

    # ── helpers ──────────────────────────────────────────────────

    def _node_text(self, node) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8")

    def _source_loc(self, node) -> SourceLocation:
        return node_location(node)

    def _char_offset(self, base_byte: int, byte: int) -> int:
        return len(self._source[base_byte:byte].decode("utf-8"))

    @staticmethod
    def _significant_children(node) -> list:
        return [c for c in node.named_children if c.type not in COMMENT_TYPES]

    # ── elements ─────────────────────────────────────────────────

    def read_element(self, node) -> Element:
        opening = _opening_element(node)
        children = []
        if node.type == "jsx_element":
            closing = next(c for c in node.children if c.type == CLOSING_NODE_TYPE)
            children = self._read_children(node, opening, closing)
        return Element(
            tag=self._read_tag(opening.child_by_field_name(NAME_FIELD)),
            attributes=[
                self._read_attribute(c)
                for c in opening.named_children
                if c.type in (ATTRIBUTE_NODE_TYPE, EXPRESSION_NODE_TYPE)
            ],
            children=children,
            location=self._source_loc(node),
        )

    def _read_tag(self, name_node):
        ntype = name_node.type
        if ntype in IDENTIFIER_TYPES:
            return TagName(name=self._node_text(name_node))
        if ntype in QUALIFIED_NAME_TYPES:
            return QualifiedTagName(
                parts=[part.strip() for part in self._node_text(name_node).split(".")]
            )
        if ntype == NAMESPACED_NAME_TYPE:
            namespace, name = self._namespaced_parts(name_node)
            return NamespacedTagName(namespace=namespace, name=name)
        raise ValueError(f"Unsupported tag name node: {ntype}")

    def _namespaced_parts(self, node) -> tuple[str, str]:
        parts = self._significant_children(node)
        return self._node_text(parts[0]), self._node_text(parts[-1])

    # ── attributes ───────────────────────────────────────────────

    def _read_attribute(self, node):
        if node.type == EXPRESSION_NODE_TYPE:
            content = self._expression_content(node)
            if content is None or content.type != SPREAD_NODE_TYPE:
                raise ValueError(
                    f"Expected a spread attribute, got: {self._node_text(node)}"
                )
            argument = self._significant_children(content)[0]
            return SpreadAttribute(expr=self.read_expression(argument))

        parts = self._significant_children(node)
        name_node = parts[0]
        namespace = None
        if name_node.type == NAMESPACED_NAME_TYPE:
            namespace, name = self._namespaced_parts(name_node)
        else:
            name = self._node_text(name_node)
        value_node = parts[1] if len(parts) > 1 else None
        return NamedAttribute(
            name=name,
            namespace=namespace,
            value=None if value_node is None else self._read_attribute_value(value_node),
        )

    def _read_attribute_value(self, node) -> str | HostExpression:
        if node.type == "string":
            return html.unescape(self._node_text(node)[1:-1])
        if node.type == EXPRESSION_NODE_TYPE:
            content = self._expression_content(node)
            if content is None:
                raise ValueError(
                    f"Attribute expression must not be empty at {self._source_loc(node)}"
                )
            return self.read_expression(content)
        if node.type in ELEMENT_NODE_TYPES or node.type == FRAGMENT_NODE_TYPE:
            return self.read_expression(node)
        raise ValueError(f"Unsupported attribute value node: {node.type}")

    # ── children ─────────────────────────────────────────────────

    def _read_children(self, node, opening, closing) -> list:
        children = []
        cursor = opening.end_byte
        for child in node.children:
            if child.type not in CHILD_DELIMITER_TYPES:
                continue
            children.extend(self._text_between(cursor, child.start_byte))
            children.append(self._read_child(child))
            cursor = child.end_byte
        children.extend(self._text_between(cursor, closing.start_byte))
        return children

    def _text_between(self, start: int, end: int) -> list[Text]:
        raw = self._source[start:end].decode("utf-8")
        if not raw:
            return []
        return [Text(raw=html.unescape(raw))]

    def _read_child(self, node):
        if is_fragment(node):
            return UnsupportedNode(node_type=FRAGMENT_NODE_TYPE)
        if node.type in ELEMENT_NODE_TYPES:
            return self.read_element(node)
        content = self._expression_content(node)
        if content is None:
            return ExpressionHole()
        if content.type == SPREAD_NODE_TYPE:
            return UnsupportedNode(node_type="spread_child")
        return ExpressionHole(expr=self.read_expression(content))

    def _expression_content(self, node):
        parts = self._significant_children(node)
        return parts[0] if parts else None

    # ── host expressions ─────────────────────────────────────────

    def read_expression(self, node) -> HostExpression:
        return HostExpression(
            code=self._node_text(node),
            embedded=[
                EmbeddedElement(
                    start=self._char_offset(node.start_byte, element.start_byte),
                    end=self._char_offset(node.start_byte, element.end_byte),
                    element=self.read_element(element),
                )
                for element in find_outermost_elements(node)
            ],
        )
