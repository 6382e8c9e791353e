"""ArgumentCompactor — shortest positional argument list for a factory call.

Slot order is ``flags, type, props, children, key, ref, noNormalize``. Trailing
absent slots are dropped; an absent slot left of a present one is backfilled
with NO_VALUE because positional calls cannot skip arguments.
"""

from __future__ import annotations

from dataclasses import dataclass

from .children import is_empty_children
from .expressions import (
    NO_VALUE,
    BooleanLiteral,
    Expression,
    NumericLiteral,
    ObjectExpression,
    is_no_value,
)
from .flags import VNodeFlags


@dataclass(frozen=True)
class VNodeArguments:
    """Everything a factory call encodes, before compaction."""

    flags: VNodeFlags
    type_expr: Expression
    props: ObjectExpression | None = None
    children: Expression | None = None
    key: Expression | None = None
    ref: Expression | None = None
    skip_normalization: bool = False


class ArgumentCompactor:
    def compact(self, args: VNodeArguments) -> list[Expression]:
        optional: list[Expression | None] = [
            args.props if args.props is not None and args.props.properties else None,
            None if is_empty_children(args.children) else args.children,
            None if is_no_value(args.key) else args.key,
            None if is_no_value(args.ref) else args.ref,
            BooleanLiteral(value=True) if args.skip_normalization else None,
        ]
        included = self.included_slots(optional)
        compacted: list[Expression] = [
            NumericLiteral(value=int(args.flags)),
            args.type_expr,
        ]
        compacted.extend(
            NO_VALUE if value is None else value
            for value, keep in zip(optional, included)
            if keep
        )
        return compacted

    @staticmethod
    def included_slots(optional: list[Expression | None]) -> list[bool]:
        """Right to left: a slot is kept if it is present or anything right of it is."""
        included = [False] * len(optional)
        present_to_right = False
        for index in reversed(range(len(optional))):
            present_to_right = present_to_right or optional[index] is not None
            included[index] = present_to_right
        return included
