"""
Main configuration class that composes all configs.
"""

import logging
import os

from dotenv import load_dotenv

from bridge_registry.core.config.logging_config import LoggingConfig
from bridge_registry.core.config.registry_config import RegistryConfig
from bridge_registry.core.constants import DEFAULT_REGISTRY

# Load environment variables from a .env file
load_dotenv()

LOG_FORMATS = ("json", "console")


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.registry = RegistryConfig(
            default_registry=os.getenv("BRIDGE_REGISTRY_HOST", DEFAULT_REGISTRY),
            validate_on_import=os.getenv("BRIDGE_VALIDATE_ON_IMPORT", "false").lower() == "true",
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "json"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not self.registry.default_registry:
            errors.append("BRIDGE_REGISTRY_HOST must not be empty")

        if not isinstance(logging.getLevelName(self.logging.level.upper()), int):
            errors.append(f"LOG_LEVEL {self.logging.level!r} is not a valid logging level")

        if self.logging.format not in LOG_FORMATS:
            errors.append(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
