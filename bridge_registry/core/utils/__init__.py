"""
Shared utilities.
"""

from bridge_registry.core.utils.logging import configure_logging, log_structured

__all__ = [
    "configure_logging",
    "log_structured",
]
