"""
Configuration package - unified access point.

This package provides all configuration classes and the global config instance.
"""

from bridge_registry.core.config.logging_config import LoggingConfig
from bridge_registry.core.config.registry_config import RegistryConfig
from bridge_registry.core.config.settings import Config, config

__all__ = [
    "Config",
    "LoggingConfig",
    "RegistryConfig",
    "config",
]
