"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

FACTORY_NAMESPACE = "Inferno"
FACTORY_METHOD = "createVNode"

HOOK_PREFIX = "onComponent"

ATTR_KEY = "key"
ATTR_REF = "ref"
ATTR_NO_NORMALIZE = "noNormalize"
ATTR_HAS_KEYED_CHILDREN = "hasKeyedChildren"
ATTR_HAS_NON_KEYED_CHILDREN = "hasNonKeyedChildren"

CHILDREN_PROP = "children"

# Property names starting with this are emitted as bare identifiers
UNQUOTED_PROP_PREFIX = "-"

NAMESPACE_SEPARATOR = ":"

DEFAULT_LANGUAGE = "javascript"
