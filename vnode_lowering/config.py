"""Lowering configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class LoweringConfig:
    """Groups the names the emitted factory calls depend on."""

    factory_namespace: str = constants.FACTORY_NAMESPACE
    factory_method: str = constants.FACTORY_METHOD
    hook_prefix: str = constants.HOOK_PREFIX

    @classmethod
    def from_factory(cls, qualified_name: str, **overrides) -> LoweringConfig:
        """Build a config from a ``Namespace.method`` string.

        Raises ``ValueError`` if *qualified_name* is not exactly two dotted parts.
        """
        parts = qualified_name.split(".")
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Factory must be of the form Namespace.method: {qualified_name!r}"
            )
        return cls(factory_namespace=parts[0], factory_method=parts[1], **overrides)


DEFAULT_CONFIG = LoweringConfig()
