"""Composable API functions for the markup lowering pipeline.

Each function corresponds to a CLI workflow but is callable programmatically
without argparse.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from .config import DEFAULT_CONFIG, LoweringConfig
from .expressions import Expression
from .lowering import LoweredElement, VNodeLowering
from .parser import Parser, TreeSitterParserFactory
from .transform import ElementTransformer
from . import constants

logger = logging.getLogger(__name__)

_LOWERED_LIST = TypeAdapter(list[LoweredElement])


def lower_source(
    source: str,
    language: str = constants.DEFAULT_LANGUAGE,
    config: LoweringConfig = DEFAULT_CONFIG,
) -> list[LoweredElement]:
    """Parse source code and lower every outermost markup element.

    Args:
        source: The source code text.
        language: Grammar to parse with ("javascript" or "tsx").
        config: Factory names and hook prefix to emit.

    Returns:
        One LoweredElement per outermost element, in source order.

    Raises:
        ValueError: If the language has no markup syntax or the source does
            not parse cleanly.
    """
    logger.info(
        "Lowering source (%s, factory=%s.%s)",
        language,
        config.factory_namespace,
        config.factory_method,
    )
    tree = Parser(TreeSitterParserFactory()).parse(source, language)
    return VNodeLowering(config).lower(tree, source.encode("utf-8"))


def lower_markup(node, config: LoweringConfig = DEFAULT_CONFIG) -> Expression | None:
    """Lower an already-built markup node; ``None`` if it contributes nothing."""
    return ElementTransformer(config).transform(node)


def dump_json(
    source: str,
    language: str = constants.DEFAULT_LANGUAGE,
    config: LoweringConfig = DEFAULT_CONFIG,
) -> str:
    """Lower source and return the replacements as indented JSON."""
    lowered = lower_source(source, language, config)
    return _LOWERED_LIST.dump_json(lowered, indent=2).decode("utf-8")
