"""
Consistency checks over the bridge tables.

Run once at release-pipeline startup so a broken entry blocks the job before
any image is built.
"""

import structlog

from bridge_registry.core.constants import COMMIT_FIELD, DEFAULT_IMAGE_TEMPLATE
from bridge_registry.core.errors import BridgeConfigurationError
from bridge_registry.core.models import BridgeType, Channel, Environment
from bridge_registry.core.utils.logging import log_structured
from bridge_registry.registry.images import IMAGE_TEMPLATE_OVERRIDES, TEMPLATE_FIELDS, template_fields
from bridge_registry.registry.notifications import BRIDGE_NOTIFICATIONS
from bridge_registry.registry.repos import TARGET_REPO_OVERRIDES

logger = structlog.get_logger(__name__)


def primary_bridge_types() -> list[BridgeType]:
    """Bridge types with their own notification targets, in declaration order."""
    return [bridge_type for bridge_type in BridgeType if BRIDGE_NOTIFICATIONS.get(bridge_type)]


def _notification_errors() -> list[str]:
    errors = []
    referenced = {
        notification.bridge
        for notifications in BRIDGE_NOTIFICATIONS.values()
        for notification in notifications
        if notification.bridge is not None
    }

    for bridge_type, notifications in BRIDGE_NOTIFICATIONS.items():
        if not notifications and bridge_type not in referenced:
            errors.append(f"{bridge_type} has no notifications and is not referenced by any other bridge")
        seen: set[tuple[Environment, Channel, BridgeType]] = set()
        for notification in notifications:
            target = (notification.environment, notification.channel, notification.bridge or bridge_type)
            if target in seen:
                errors.append(
                    f"{bridge_type} notifies {notification.environment}/{notification.channel} "
                    f"for {target[2]} more than once"
                )
            seen.add(target)

    return errors


def _template_errors() -> list[str]:
    errors = []
    templates = [(None, DEFAULT_IMAGE_TEMPLATE), *IMAGE_TEMPLATE_OVERRIDES.items()]

    for bridge_type, template in templates:
        name = str(bridge_type) if bridge_type else "default"
        try:
            fields = template_fields(template)
        except ValueError as e:
            errors.append(f"image template for {name} does not parse: {e}")
            continue
        unknown = sorted(set(fields) - TEMPLATE_FIELDS)
        if unknown:
            errors.append(f"image template for {name} uses unknown fields: {', '.join(unknown)}")
        if COMMIT_FIELD not in fields:
            errors.append(f"image template for {name} does not include the commit")

    return errors


def _repo_errors() -> list[str]:
    return [
        f"target repo override for {bridge_type} must start with '/': {suffix!r}"
        for bridge_type, suffix in TARGET_REPO_OVERRIDES.items()
        if not suffix.startswith("/")
    ]


def validate_tables() -> bool:
    """
    Validate the notification, image template and target repo tables.

    Raises:
        BridgeConfigurationError: listing every problem found.
    """
    errors = [*_notification_errors(), *_template_errors(), *_repo_errors()]

    if errors:
        for error in errors:
            log_structured(logger, "bridge_table_invalid", level="error", problem=error)
        raise BridgeConfigurationError(f"Bridge table errors: {'; '.join(errors)}")

    logger.info("bridge_tables_valid", primary_bridges=len(primary_bridge_types()))
    return True
