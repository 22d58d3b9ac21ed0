"""
Registry configuration.
"""

from dataclasses import dataclass

from bridge_registry.core.constants import DEFAULT_REGISTRY


@dataclass
class RegistryConfig:
    """Container registry defaults."""

    default_registry: str = DEFAULT_REGISTRY
    validate_on_import: bool = False
