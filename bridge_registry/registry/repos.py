"""
Target repository paths per bridge type.
"""

from types import MappingProxyType

from bridge_registry.core.config import config
from bridge_registry.core.constants import DEFAULT_TARGET_REPO_TEMPLATE
from bridge_registry.core.models import BridgeType

# Suffixes are appended to the registry as-is, so each starts with "/"
TARGET_REPO_OVERRIDES: MappingProxyType[BridgeType, str] = MappingProxyType(
    {
        BridgeType.HUNGRYSERV: "/hungryserv",
        BridgeType.SIGNAL_V2: "/bridge/signal",
        BridgeType.SLACK_V2: "/bridge/slackgo",
        BridgeType.TELEGRAM_V2: "/bridge/telegramgo",
    }
)


def target_repo(bridge_type: BridgeType, registry: str | None = None) -> str:
    """
    Repository path an image of `bridge_type` is pushed to.

    Uses the override suffix when one exists, otherwise
    `<registry>/bridge/<bridge_type>`. `registry` defaults to the configured
    default registry when omitted.
    """
    if registry is None:
        registry = config.registry.default_registry
    suffix = TARGET_REPO_OVERRIDES.get(bridge_type)
    if suffix is None:
        return DEFAULT_TARGET_REPO_TEMPLATE.format(registry=registry, bridge_type=str(bridge_type))
    return registry + suffix
