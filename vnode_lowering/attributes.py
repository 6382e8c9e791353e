"""AttributeExtractor — splits an element's attributes into props and reserved fields."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from . import constants
from .expressions import (
    BooleanLiteral,
    Expression,
    Identifier,
    ObjectExpression,
    ObjectMember,
    ObjectProperty,
    SpreadProperty,
    StringLiteral,
)
from .markup import HostExpression, NamedAttribute, SpreadAttribute

logger = logging.getLogger(__name__)


@dataclass
class PropSet:
    """Ordinary properties plus the reserved fields pulled out of them.

    ``key`` and ``ref`` stay ``None`` until an attribute sets them.
    """

    properties: list[ObjectMember] = field(default_factory=list)
    key: Expression | None = None
    ref: Expression | None = None
    has_keyed_children: bool = False
    has_non_keyed_children: bool = False
    skip_normalization: bool = False

    def as_object(self) -> ObjectExpression:
        return ObjectExpression(properties=list(self.properties))


def property_key(name: str) -> StringLiteral | Identifier:
    """Quote *name* unless it is an internal ``-prefixed`` property."""
    if name.startswith(constants.UNQUOTED_PROP_PREFIX):
        return Identifier(name=name)
    return StringLiteral(value=name)


class AttributeExtractor:
    """Single left-to-right pass over an element's attribute list.

    *lower_expression* turns a HostExpression into an output expression; it is
    supplied by the transformer so markup nested in attribute values is lowered
    too.
    """

    def __init__(
        self,
        lower_expression: Callable[[HostExpression], Expression],
        hook_prefix: str = constants.HOOK_PREFIX,
    ):
        self._lower_expression = lower_expression
        self._hook_prefix = hook_prefix
        self._FLAG_ATTRIBUTES: dict[str, str] = {
            constants.ATTR_NO_NORMALIZE: "skip_normalization",
            constants.ATTR_HAS_KEYED_CHILDREN: "has_keyed_children",
            constants.ATTR_HAS_NON_KEYED_CHILDREN: "has_non_keyed_children",
        }

    def extract(self, attributes: list, is_component: bool) -> PropSet:
        prop_set = PropSet()
        hooks: list[ObjectMember] = []
        explicit_ref: Expression | None = None

        for attribute in attributes:
            if isinstance(attribute, SpreadAttribute):
                prop_set.properties.append(
                    SpreadProperty(argument=self._lower_expression(attribute.expr))
                )
                continue
            if not isinstance(attribute, NamedAttribute):
                raise TypeError(f"Unknown attribute: {type(attribute).__name__}")

            name = attribute.resolved_name()
            if is_component and name.startswith(self._hook_prefix):
                hooks.append(
                    ObjectProperty(key=property_key(name), value=self._value(attribute))
                )
                continue

            flag_field = self._FLAG_ATTRIBUTES.get(name)
            if flag_field is not None:
                setattr(prop_set, flag_field, True)
            elif name == constants.ATTR_REF:
                explicit_ref = self._value(attribute)
            elif name == constants.ATTR_KEY:
                prop_set.key = self._value(attribute)
            else:
                prop_set.properties.append(
                    ObjectProperty(key=property_key(name), value=self._value(attribute))
                )

        if explicit_ref is not None:
            if hooks:
                logger.warning(
                    "Explicit ref overrides %d component hook(s): %s",
                    len(hooks),
                    ", ".join(h.key.value for h in hooks if isinstance(h.key, StringLiteral)),
                )
            prop_set.ref = explicit_ref
        elif hooks:
            prop_set.ref = ObjectExpression(properties=hooks)
        return prop_set

    def _value(self, attribute: NamedAttribute) -> Expression:
        value = attribute.value
        if value is None:
            return BooleanLiteral(value=True)
        if isinstance(value, str):
            return StringLiteral(value=value)
        return self._lower_expression(value)
