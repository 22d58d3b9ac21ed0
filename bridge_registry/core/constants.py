"""
Package-wide constants.
"""

# Fields available to image templates
IMAGE_FIELD = "image"
COMMIT_FIELD = "commit"

DEFAULT_IMAGE_TEMPLATE = "{image}:{commit}-amd64"

DEFAULT_TARGET_REPO_TEMPLATE = "{registry}/bridge/{bridge_type}"

DEFAULT_REGISTRY = "ghcr.io/beeper"
