"""Lowers JSX markup to positional virtual node factory calls."""

from .api import (  # noqa: F401
    lower_source,
    lower_markup,
    dump_json,
)
from .config import DEFAULT_CONFIG, LoweringConfig  # noqa: F401
from .flags import VNodeFlags  # noqa: F401
