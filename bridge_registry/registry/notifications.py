"""
Notification targets per bridge type.

Each bridge type maps to the ordered environment/channel pairs that are
notified when a new image for it is published. Order is rollout order.
"""

from types import MappingProxyType

import structlog

from bridge_registry.core.errors import MissingNotificationConfigError
from bridge_registry.core.models import BridgeType, BridgeUpdateNotification, Channel, Environment
from bridge_registry.core.utils.logging import log_structured

logger = structlog.get_logger(__name__)


def _default_notifications(bridge: BridgeType | None = None) -> tuple[BridgeUpdateNotification, ...]:
    return (
        BridgeUpdateNotification(environment=Environment.DEVELOPMENT, channel=Channel.STABLE, bridge=bridge),
        BridgeUpdateNotification(environment=Environment.STAGING, channel=Channel.STABLE, bridge=bridge),
        BridgeUpdateNotification(
            environment=Environment.PRODUCTION, channel=Channel.INTERNAL, bridge=bridge, deploy_next=True
        ),
    )


DEFAULT_NOTIFICATIONS = _default_notifications()

# Empty entries are pass-throughs: they are only reached via another entry's `bridge` override.
BRIDGE_NOTIFICATIONS: MappingProxyType[BridgeType, tuple[BridgeUpdateNotification, ...]] = MappingProxyType(
    {
        BridgeType.TELEGRAM: DEFAULT_NOTIFICATIONS,
        BridgeType.TELEGRAM_V2: DEFAULT_NOTIFICATIONS,
        BridgeType.WHATSAPP: DEFAULT_NOTIFICATIONS,
        BridgeType.FACEBOOK: DEFAULT_NOTIFICATIONS,
        BridgeType.GOOGLE_CHAT: DEFAULT_NOTIFICATIONS,
        BridgeType.GROUPME: DEFAULT_NOTIFICATIONS,
        BridgeType.TWITTER: DEFAULT_NOTIFICATIONS,
        BridgeType.SIGNAL: (),
        BridgeType.SIGNAL_V2: _default_notifications(BridgeType.SIGNAL),
        BridgeType.INSTAGRAM: DEFAULT_NOTIFICATIONS,
        BridgeType.IMESSAGE_GO: DEFAULT_NOTIFICATIONS,
        BridgeType.DISCORD: DEFAULT_NOTIFICATIONS,
        BridgeType.SLACK: (),
        BridgeType.SLACK_V2: _default_notifications(BridgeType.SLACK),
        BridgeType.GOOGLE_MESSAGES: DEFAULT_NOTIFICATIONS,
        BridgeType.LINKEDIN: DEFAULT_NOTIFICATIONS,
        BridgeType.HUNGRYSERV: DEFAULT_NOTIFICATIONS,
        BridgeType.DUMMY: (
            BridgeUpdateNotification(environment=Environment.DEVELOPMENT, channel=Channel.STABLE),
            BridgeUpdateNotification(
                environment=Environment.DEVELOPMENT, channel=Channel.STABLE, bridge=BridgeType.DUMMY_WEBSOCKET
            ),
            BridgeUpdateNotification(environment=Environment.STAGING, channel=Channel.STABLE),
            BridgeUpdateNotification(
                environment=Environment.STAGING, channel=Channel.STABLE, bridge=BridgeType.DUMMY_WEBSOCKET
            ),
        ),
        BridgeType.DUMMY_WEBSOCKET: (),
        BridgeType.IMESSAGE_CLOUD: (
            BridgeUpdateNotification(environment=Environment.DEVELOPMENT, channel=Channel.STABLE, deploy_next=True),
            BridgeUpdateNotification(environment=Environment.STAGING, channel=Channel.STABLE, deploy_next=True),
            BridgeUpdateNotification(environment=Environment.PRODUCTION, channel=Channel.INTERNAL, deploy_next=True),
        ),
        # Meta publishes one image that is deployed as both the Facebook and Instagram bridges
        BridgeType.META: (
            *_default_notifications(BridgeType.FACEBOOK_GO),
            *_default_notifications(BridgeType.INSTAGRAM_GO),
        ),
    }
)


def notification_targets(bridge_type: BridgeType) -> tuple[BridgeUpdateNotification, ...]:
    """
    Get the notifications to send when an image for `bridge_type` is published.

    Entries come back in declared order with `bridge` set to the effective
    bridge type.

    Raises:
        MissingNotificationConfigError: if the bridge type has no entry or an
            empty one. Callers must not treat this as "nothing to notify".
    """
    notifications = BRIDGE_NOTIFICATIONS.get(bridge_type)
    if not notifications:
        log_structured(logger, "notification_config_missing", level="critical", bridge_type=str(bridge_type))
        raise MissingNotificationConfigError(bridge_type)

    return tuple(notification.for_bridge(bridge_type) for notification in notifications)
