"""
Error classes for bridge table defects.

These indicate a broken entry in the compiled-in tables, never a runtime
condition. They are raised and left to propagate: a release job that hits one
must stop until the table is fixed.
"""

from bridge_registry.core.models import BridgeType


class BridgeConfigurationError(Exception):
    """Raised when the bridge tables are inconsistent or incomplete."""

    def __init__(self, message: str, bridge_type: BridgeType | None = None) -> None:
        self.bridge_type = bridge_type
        super().__init__(message)


class MissingNotificationConfigError(BridgeConfigurationError):
    """Raised when a bridge type has no notification targets defined."""

    def __init__(self, bridge_type: BridgeType) -> None:
        super().__init__(f"No notifications defined for {str(bridge_type)!r}", bridge_type)


class MalformedTemplateError(BridgeConfigurationError):
    """Raised when an image template cannot be parsed or substituted."""

    def __init__(self, bridge_type: BridgeType, template: str, reason: str) -> None:
        self.template = template
        super().__init__(
            f"Failed to format image for {str(bridge_type)!r} with template {template!r}: {reason}",
            bridge_type,
        )
