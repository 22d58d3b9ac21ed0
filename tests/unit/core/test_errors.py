from bridge_registry.core.errors import (
    BridgeConfigurationError,
    MalformedTemplateError,
    MissingNotificationConfigError,
)
from bridge_registry.core.models import BridgeType


def test_missing_notification_config_names_bridge():
    error = MissingNotificationConfigError(BridgeType.SIGNAL)
    assert isinstance(error, BridgeConfigurationError)
    assert error.bridge_type is BridgeType.SIGNAL
    assert "'signal'" in str(error)


def test_malformed_template_carries_template():
    error = MalformedTemplateError(BridgeType.TELEGRAM, "{image", "unbalanced")
    assert isinstance(error, BridgeConfigurationError)
    assert error.bridge_type is BridgeType.TELEGRAM
    assert error.template == "{image"
    assert "'telegram'" in str(error)
    assert "unbalanced" in str(error)


def test_configuration_errors_are_not_value_errors():
    """Table defects must not be swallowed by handlers for ordinary bad input."""
    assert not issubclass(BridgeConfigurationError, (ValueError, KeyError, LookupError))
