from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Environment(StrEnum):
    """Deployment tiers a published build can be rolled out to."""

    DEVELOPMENT = "DEV"
    STAGING = "STAGING"
    PRODUCTION = "PROD"


class Channel(StrEnum):
    """Release tracks governing which audience receives a build."""

    STABLE = "STABLE"
    NIGHTLY = "NIGHTLY"
    INTERNAL = "INTERNAL"


class BridgeType(StrEnum):
    """
    Deployable bridge variants.

    The string value is the identifier used in repository paths and
    notification payloads. Adding a member means adding its table entries in
    bridge_registry.registry as well.
    """

    TELEGRAM = "telegram"
    TELEGRAM_V2 = "telegramv2"
    WHATSAPP = "whatsapp"
    FACEBOOK = "facebook"
    FACEBOOK_GO = "facebookgo"
    GOOGLE_CHAT = "googlechat"
    GROUPME = "groupme"
    TWITTER = "twitter"
    SIGNAL = "signal"
    SIGNAL_V2 = "signalv2"
    INSTAGRAM = "instagram"
    INSTAGRAM_GO = "instagramgo"
    META = "meta"
    DISCORD = "discordgo"
    SLACK = "slackgo"
    SLACK_V2 = "slackgov2"
    GOOGLE_MESSAGES = "gmessages"
    LINKEDIN = "linkedin"
    IMESSAGE_CLOUD = "imessagecloud"
    IMESSAGE_GO = "imessagego"
    HUNGRYSERV = "hungryserv"
    DUMMY = "dummybridge"
    DUMMY_WEBSOCKET = "dummybridgews"


class BridgeUpdateNotification(BaseModel):
    """
    One environment/channel pair to notify when a bridge image is published.

    `bridge` overrides the bridge identifier the notification is filed under;
    when unset the notification belongs to the table key it is listed under.
    `deploy_next` is passed through to the release pipeline untouched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    environment: Environment
    channel: Channel
    bridge: BridgeType | None = None
    deploy_next: bool = Field(default=False, alias="deployNext")

    def for_bridge(self, bridge_type: BridgeType) -> "BridgeUpdateNotification":
        """Return this notification with `bridge` resolved against its table key."""
        if self.bridge is not None:
            return self
        return self.model_copy(update={"bridge": bridge_type})

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using the pipeline's field names."""
        return self.model_dump(mode="json", by_alias=True)
