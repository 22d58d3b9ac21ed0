from bridge_registry.registry.images import format_image, image_template
from bridge_registry.registry.notifications import notification_targets
from bridge_registry.registry.repos import target_repo
from bridge_registry.registry.validation import primary_bridge_types, validate_tables

__all__ = [
    "format_image",
    "image_template",
    "notification_targets",
    "primary_bridge_types",
    "target_repo",
    "validate_tables",
]
