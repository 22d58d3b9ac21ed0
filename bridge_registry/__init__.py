"""
Static catalog of deployable bridges.

Answers three questions for the release pipeline: who to notify when a bridge
image is published, how to tag the image, and which repository to push it to.
"""

from bridge_registry.core.config import config
from bridge_registry.core.errors import (
    BridgeConfigurationError,
    MalformedTemplateError,
    MissingNotificationConfigError,
)
from bridge_registry.core.models import BridgeType, BridgeUpdateNotification, Channel, Environment
from bridge_registry.registry import (
    format_image,
    image_template,
    notification_targets,
    primary_bridge_types,
    target_repo,
    validate_tables,
)

if config.registry.validate_on_import:
    validate_tables()

__all__ = [
    "BridgeConfigurationError",
    "BridgeType",
    "BridgeUpdateNotification",
    "Channel",
    "Environment",
    "MalformedTemplateError",
    "MissingNotificationConfigError",
    "format_image",
    "image_template",
    "notification_targets",
    "primary_bridge_types",
    "target_repo",
    "validate_tables",
]
