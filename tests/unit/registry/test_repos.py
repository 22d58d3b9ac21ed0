import pytest

from bridge_registry.core.config import config
from bridge_registry.core.models import BridgeType
from bridge_registry.registry.repos import TARGET_REPO_OVERRIDES, target_repo

DEFAULT_REPO_BRIDGES = [bridge_type for bridge_type in BridgeType if bridge_type not in TARGET_REPO_OVERRIDES]


@pytest.mark.parametrize("bridge_type", DEFAULT_REPO_BRIDGES)
def test_default_pattern(bridge_type: BridgeType):
    assert target_repo(bridge_type, "registry.example.com") == f"registry.example.com/bridge/{bridge_type.value}"


@pytest.mark.parametrize(
    ("bridge_type", "expected"),
    [
        (BridgeType.HUNGRYSERV, "registry.example.com/hungryserv"),
        (BridgeType.SIGNAL_V2, "registry.example.com/bridge/signal"),
        (BridgeType.SLACK_V2, "registry.example.com/bridge/slackgo"),
        (BridgeType.TELEGRAM_V2, "registry.example.com/bridge/telegramgo"),
    ],
)
def test_override_suffix_appended(bridge_type: BridgeType, expected: str):
    assert target_repo(bridge_type, "registry.example.com") == expected


def test_registry_with_path_prefix():
    assert target_repo(BridgeType.TELEGRAM, "ghcr.io/beeper") == "ghcr.io/beeper/bridge/telegram"
    assert target_repo(BridgeType.HUNGRYSERV, "ghcr.io/beeper") == "ghcr.io/beeper/hungryserv"


def test_configured_default_registry(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(config.registry, "default_registry", "registry.internal:5000")
    assert target_repo(BridgeType.WHATSAPP) == "registry.internal:5000/bridge/whatsapp"
    assert target_repo(BridgeType.TELEGRAM_V2) == "registry.internal:5000/bridge/telegramgo"


def test_explicit_empty_registry_is_not_replaced(monkeypatch: pytest.MonkeyPatch):
    """Only an omitted registry falls back to the configured one."""
    monkeypatch.setattr(config.registry, "default_registry", "registry.internal:5000")
    assert target_repo(BridgeType.TELEGRAM, "") == "/bridge/telegram"
    assert target_repo(BridgeType.HUNGRYSERV, "") == "/hungryserv"
