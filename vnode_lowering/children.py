"""ChildrenBuilder — lowers child nodes and collapses them to one value or an array."""

from __future__ import annotations

import logging
import re
from typing import Callable

from .expressions import ArrayExpression, Expression, StringLiteral, is_no_value
from .markup import Element, ExpressionHole, HostExpression, Text, UnsupportedNode

logger = logging.getLogger(__name__)

# Tabs, and any whitespace run containing a line break
_INSIGNIFICANT_WHITESPACE = re.compile(r"\t|(\s*[\r\n]\s*)")


def normalize_text(raw: str) -> str:
    return _INSIGNIFICANT_WHITESPACE.sub("", raw)


def is_empty_children(expr: Expression | None) -> bool:
    if is_no_value(expr):
        return True
    return isinstance(expr, ArrayExpression) and not expr.elements


class ChildrenBuilder:
    def __init__(
        self,
        lower_element: Callable[[Element], Expression],
        lower_expression: Callable[[HostExpression], Expression],
    ):
        self._lower_element = lower_element
        self._lower_expression = lower_expression
        self._DISPATCH: dict[type, Callable] = {
            Element: self._lower_element,
            Text: self._lower_text,
            ExpressionHole: self._lower_hole,
            UnsupportedNode: self._skip,
        }

    def build(self, children: list) -> Expression:
        lowered = [
            result
            for result in (self.lower_child(child) for child in children)
            if result is not None
        ]
        if len(lowered) == 1:
            return lowered[0]
        return ArrayExpression(elements=lowered)

    def lower_child(self, node) -> Expression | None:
        """Lower one child; ``None`` means it contributes nothing."""
        handler = self._DISPATCH.get(type(node))
        if handler is None:
            return self._skip(node)
        return handler(node)

    def _lower_text(self, node: Text) -> StringLiteral | None:
        text = normalize_text(node.raw)
        if not text:
            return None
        return StringLiteral(value=text)

    def _lower_hole(self, node: ExpressionHole) -> Expression | None:
        if node.expr is None:
            return None
        return self._lower_expression(node.expr)

    def _skip(self, node) -> None:
        logger.debug("Skipping unsupported child: %s", getattr(node, "node_type", type(node).__name__))
        return None
