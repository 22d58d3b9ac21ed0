"""
Image tag templates per bridge type.

Templates are `str.format` strings using only the `{image}` and `{commit}`
fields.
"""

from string import Formatter
from types import MappingProxyType

import structlog

from bridge_registry.core.constants import COMMIT_FIELD, DEFAULT_IMAGE_TEMPLATE, IMAGE_FIELD
from bridge_registry.core.errors import MalformedTemplateError
from bridge_registry.core.models import BridgeType
from bridge_registry.core.utils.logging import log_structured

logger = structlog.get_logger(__name__)

TEMPLATE_FIELDS = frozenset({IMAGE_FIELD, COMMIT_FIELD})

IMAGE_TEMPLATE_OVERRIDES: MappingProxyType[BridgeType, str] = MappingProxyType(
    {
        BridgeType.DUMMY: "{image}:{commit}",
        BridgeType.GROUPME: "{image}:{commit}",
        BridgeType.HUNGRYSERV: "{image}:{commit}",
        BridgeType.LINKEDIN: "{image}:{commit}",
        BridgeType.IMESSAGE_CLOUD: "{commit}",
        BridgeType.IMESSAGE_GO: "{image}:{commit}",
        BridgeType.SIGNAL_V2: "{image}:v2-{commit}-amd64",
        BridgeType.SLACK_V2: "{image}:v2-{commit}-amd64",
        BridgeType.TELEGRAM_V2: "{image}:v2-{commit}-amd64",
    }
)


def template_fields(template: str) -> list[str]:
    """
    Replacement field names in `template`, in order of appearance.

    Raises ValueError for unbalanced braces.
    """
    return [field_name for _, field_name, _, _ in Formatter().parse(template) if field_name is not None]


def image_template(bridge_type: BridgeType) -> str:
    """Template used for `bridge_type`, falling back to the default."""
    return IMAGE_TEMPLATE_OVERRIDES.get(bridge_type, DEFAULT_IMAGE_TEMPLATE)


def render_template(bridge_type: BridgeType, template: str, image: str, commit: str) -> str:
    """
    Substitute `image` and `commit` into `template` in a single pass.

    Raises:
        MalformedTemplateError: if the template does not parse or references
            anything other than the two named fields.
    """
    try:
        unknown = [name for name in template_fields(template) if name not in TEMPLATE_FIELDS]
        if unknown:
            raise KeyError(", ".join(unknown))
        return template.format_map({IMAGE_FIELD: image, COMMIT_FIELD: commit})
    except (KeyError, IndexError, TypeError, ValueError) as e:
        log_structured(
            logger,
            "image_template_malformed",
            level="critical",
            bridge_type=str(bridge_type),
            template=template,
            error=repr(e),
        )
        raise MalformedTemplateError(bridge_type, template, repr(e)) from e


def format_image(bridge_type: BridgeType, image: str, commit: str) -> str:
    """
    Format the image reference for a build of `bridge_type`.

    Example:
        format_image(BridgeType.TELEGRAM, "telegram", "abc123") -> "telegram:abc123-amd64"
    """
    return render_template(bridge_type, image_template(bridge_type), image, commit)
