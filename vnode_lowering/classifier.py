"""ElementClassifier — decides component vs. built-in element and its flags."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .expressions import Expression, Identifier, StringLiteral, member_chain
from .flags import ELEMENT_FLAGS_BY_TAG, NO_FLAGS, VNodeFlags
from .markup import QualifiedTagName, TagName

logger = logging.getLogger(__name__)


def is_component_name(name: str) -> bool:
    """A tag names a component when its first character is unchanged by upper-casing.

    ``Foo``, ``_foo`` and ``$foo`` are components; ``div`` is not.
    """
    first = name[:1]
    return first.upper() == first


@dataclass(frozen=True)
class ElementDescriptor:
    type_expr: Expression
    is_component: bool
    flags: VNodeFlags


class ElementClassifier:
    """Maps a tag shape to an ElementDescriptor."""

    def classify(self, tag) -> ElementDescriptor:
        if isinstance(tag, TagName):
            return self._classify_name(tag.name)
        if isinstance(tag, QualifiedTagName):
            return ElementDescriptor(
                type_expr=member_chain(tag.parts),
                is_component=True,
                flags=VNodeFlags.ComponentUnknown,
            )
        # Namespaced tags have no element kind: no flag bits, lowered as-is
        logger.debug("Namespaced tag %s:%s has no element kind", tag.namespace, tag.name)
        return ElementDescriptor(
            type_expr=StringLiteral(value=f"{tag.namespace}:{tag.name}"),
            is_component=False,
            flags=NO_FLAGS,
        )

    def _classify_name(self, name: str) -> ElementDescriptor:
        if is_component_name(name):
            return ElementDescriptor(
                type_expr=Identifier(name=name),
                is_component=True,
                flags=VNodeFlags.ComponentUnknown,
            )
        return ElementDescriptor(
            type_expr=StringLiteral(value=name),
            is_component=False,
            flags=ELEMENT_FLAGS_BY_TAG.get(name, VNodeFlags.HtmlElement),
        )
