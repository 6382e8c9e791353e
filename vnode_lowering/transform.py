"""ElementTransformer — lowers a markup element to a virtual node factory call.

Runs ElementClassifier → AttributeExtractor → ChildrenBuilder, folds component
children into props, then ArgumentCompactor. Pure: the input tree is never
mutated and nothing survives between calls.
"""

from __future__ import annotations

import logging

from . import constants
from .attributes import AttributeExtractor, PropSet
from .children import ChildrenBuilder, is_empty_children
from .classifier import ElementClassifier
from .compactor import ArgumentCompactor, VNodeArguments
from .config import DEFAULT_CONFIG, LoweringConfig
from .expressions import (
    NO_VALUE,
    CallExpression,
    Expression,
    Identifier,
    ObjectExpression,
    ObjectProperty,
    RawExpression,
    Substitution,
    member_chain,
)
from .flags import VNodeFlags
from .markup import Element, HostExpression

logger = logging.getLogger(__name__)


class ElementTransformer:
    def __init__(self, config: LoweringConfig = DEFAULT_CONFIG):
        self._config = config
        self._classifier = ElementClassifier()
        self._attributes = AttributeExtractor(
            self.transform_expression, hook_prefix=config.hook_prefix
        )
        self._children = ChildrenBuilder(self.transform_element, self.transform_expression)
        self._compactor = ArgumentCompactor()

    def transform(self, node) -> Expression | None:
        """Replacement for any markup node, or ``None`` if it contributes nothing."""
        return self._children.lower_child(node)

    def transform_element(self, element: Element) -> CallExpression:
        descriptor = self._classifier.classify(element.tag)
        prop_set = self._attributes.extract(element.attributes, descriptor.is_component)
        children = self._children.build(element.children)

        flags = descriptor.flags
        if prop_set.has_keyed_children:
            flags |= VNodeFlags.HasKeyedChildren
        if prop_set.has_non_keyed_children:
            flags |= VNodeFlags.HasNonKeyedChildren

        props = prop_set.as_object()
        if descriptor.is_component:
            if not is_empty_children(children):
                props = self._fold_children(prop_set, children)
            children = NO_VALUE

        arguments = self._compactor.compact(
            VNodeArguments(
                flags=flags,
                type_expr=descriptor.type_expr,
                props=props,
                children=children,
                key=prop_set.key,
                ref=prop_set.ref,
                skip_normalization=prop_set.skip_normalization,
            )
        )
        logger.debug(
            "Lowered element at %s: flags=%d, %d argument(s)",
            element.location,
            int(flags),
            len(arguments),
        )
        return CallExpression(
            callee=member_chain(
                [self._config.factory_namespace, self._config.factory_method]
            ),
            arguments=arguments,
        )

    def transform_expression(self, expr: HostExpression) -> RawExpression:
        """Carry host code through, lowering any markup embedded in it."""
        return RawExpression(
            code=expr.code,
            substitutions=[
                Substitution(
                    start=embedded.start,
                    end=embedded.end,
                    replacement=self.transform_element(embedded.element),
                )
                for embedded in expr.embedded
            ],
        )

    @staticmethod
    def _fold_children(prop_set: PropSet, children: Expression) -> ObjectExpression:
        return ObjectExpression(
            properties=[
                *prop_set.properties,
                ObjectProperty(
                    key=Identifier(name=constants.CHILDREN_PROP), value=children
                ),
            ]
        )


def transform(node, config: LoweringConfig = DEFAULT_CONFIG) -> Expression | None:
    return ElementTransformer(config).transform(node)
