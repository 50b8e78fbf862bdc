#!/usr/bin/env python3
"""
Environment Configuration for bankcli

Handles environment-based configuration: where the local store files live and
how logging is set up. User-facing settings (output format, caching, transfer
limits) are not configured here; they live in the config.json document managed
by ``bankcli.settings.store.ConfigStore``.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

CONFIG_DIR_NAME = ".bankcli"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Runtime configuration for one CLI invocation.

    Built from environment variables by ``load_config()`` and passed explicitly
    to the command layer; nothing in the package reads it from a global.
    """

    environment: Environment
    config_dir: Path
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("BANKCLI_ENV", "development"))

        if env == Environment.TEST:
            default_dir = Path(tempfile.gettempdir()) / "test_bankcli"
        else:
            default_dir = Path.home() / CONFIG_DIR_NAME

        config_dir = Path(os.getenv("BANKCLI_CONFIG_DIR", str(default_dir))).expanduser().resolve()
        debug = os.getenv("DEBUG", "false").lower() == "true"

        return cls(
            environment=env,
            config_dir=config_dir,
            debug=debug,
            log_level="DEBUG" if debug else os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.config_dir.exists() and not self.config_dir.is_dir():
            errors.append(f"config_dir is not a directory: {self.config_dir}")

        if self.log_level not in _VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_VALID_LOG_LEVELS)}, got {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.WARNING)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")
        logging.getLogger("bankcli").setLevel(level)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        return {
            "environment": self.environment.value,
            "config_dir": str(self.config_dir),
            "debug": self.debug,
            "log_level": self.log_level,
        }


def load_config() -> Config:
    """
    Build and validate the configuration from the environment.

    Raises:
        ValueError: If validation fails
    """
    config = Config.from_environment()

    errors = config.validate()
    if errors:
        raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    return config
