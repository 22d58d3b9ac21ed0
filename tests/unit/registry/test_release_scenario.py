"""
End-to-end lookups the release pipeline performs for one published build.
"""

from bridge_registry import BridgeType, Environment, format_image, notification_targets, target_repo


def test_telegram_release():
    registry = "ghcr.io/beeper"

    assert target_repo(BridgeType.TELEGRAM, registry) == "ghcr.io/beeper/bridge/telegram"
    assert format_image(BridgeType.TELEGRAM, "telegram", "abc123") == "telegram:abc123-amd64"

    notifications = notification_targets(BridgeType.TELEGRAM)
    assert [n.environment for n in notifications] == [
        Environment.DEVELOPMENT,
        Environment.STAGING,
        Environment.PRODUCTION,
    ]
    assert [n.deploy_next for n in notifications] == [False, False, True]


def test_signal_v2_release():
    """The v2 image is tagged separately but pushed and announced as the signal bridge."""
    registry = "ghcr.io/beeper"

    assert target_repo(BridgeType.SIGNAL_V2, registry) == "ghcr.io/beeper/bridge/signal"
    assert format_image(BridgeType.SIGNAL_V2, "signal", "abc123") == "signal:v2-abc123-amd64"
    assert [n.to_payload()["bridge"] for n in notification_targets(BridgeType.SIGNAL_V2)] == ["signal"] * 3


def test_lookups_write_nothing_to_stdout(capsys):
    """Release scripts capture these values from stdout, so successful lookups must stay silent."""
    target_repo(BridgeType.SIGNAL_V2, "ghcr.io/beeper")
    target_repo(BridgeType.TELEGRAM, "ghcr.io/beeper")
    format_image(BridgeType.TELEGRAM_V2, "telegram", "abc123")
    notification_targets(BridgeType.META)
    notification_targets(BridgeType.TELEGRAM)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
