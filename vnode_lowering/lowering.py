"""VNodeLowering — lowers every markup element in a parse tree."""

from __future__ import annotations

import logging

from pydantic import BaseModel

from .config import DEFAULT_CONFIG, LoweringConfig
from .expressions import CallExpression
from .markup import SourceLocation
from .reader import (
    MarkupReader,
    find_outermost_elements,
    first_syntax_error,
    node_location,
)
from .transform import ElementTransformer

logger = logging.getLogger(__name__)


class LoweredElement(BaseModel):
    """Replacement for ``source[start_byte:end_byte]``."""

    start_byte: int
    end_byte: int
    location: SourceLocation
    replacement: CallExpression


class VNodeLowering:
    """Finds outermost markup elements and returns their factory-call replacements.

    Elements nested in another element (as children, attribute values or
    inside expression holes) are lowered as part of their outermost ancestor.
    Splicing the replacements into the host program is left to the caller.
    """

    def __init__(self, config: LoweringConfig = DEFAULT_CONFIG):
        self._config = config

    def lower(self, tree, source: bytes) -> list[LoweredElement]:
        """Lower *tree*.

        Raises ``ValueError`` if the parser recovered from a syntax error,
        naming the first ERROR or MISSING node.
        """
        root = tree.root_node
        if root.has_error:
            bad = first_syntax_error(root) or root
            kind = "missing " + bad.type if bad.is_missing else "unexpected input"
            raise ValueError(f"Syntax error at {node_location(bad)}: {kind}")
        reader = MarkupReader(source)
        transformer = ElementTransformer(self._config)
        lowered: list[LoweredElement] = []
        for node in find_outermost_elements(root):
            element = reader.read_element(node)
            lowered.append(
                LoweredElement(
                    start_byte=node.start_byte,
                    end_byte=node.end_byte,
                    location=element.location,
                    replacement=transformer.transform_element(element),
                )
            )
        logger.info("Lowered %d outermost markup element(s)", len(lowered))
        return lowered
