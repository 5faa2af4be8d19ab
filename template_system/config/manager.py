"""
Configuration Manager

Loads assembly settings from YAML and literal option values from .env files
and the process environment.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from ..error_handling import ConfigurationError, ErrorCodes, ErrorContext
from ..options import providers
from .assembly_config import AssemblyConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "assembly-config.yaml"

# Keys read by resolved options providers
RESOLVED_VALUE_KEYS = (
    providers.APP_LABEL,
    providers.ZYNC_AUTHENTICATION_TOKEN,
    providers.ZYNC_DATABASE_PASSWORD,
    providers.ZYNC_SECRET_KEY_BASE,
    providers.ZYNC_DATABASE_URL,
    providers.ZYNC_REDIS_URL,
    providers.ZYNC_QUEUES_URL,
)


class ConfigurationManager:
    """Main configuration manager for template assembly."""

    def __init__(self, config_dir: str = "config", environment: Optional[str] = None):
        self.config_dir = Path(config_dir)
        self.environment = environment or os.getenv("ASSEMBLY_ENVIRONMENT", "development")
        self.config_file = self.config_dir / CONFIG_FILE_NAME
        self._assembly_config = self._load_configuration()

    def _load_configuration(self) -> AssemblyConfig:
        """Load assembly settings, falling back to defaults without a file."""
        if not self.config_file.exists():
            logger.debug(f"No {CONFIG_FILE_NAME} in {self.config_dir}, using defaults")
            return AssemblyConfig()

        try:
            with open(self.config_file, encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self.config_file}: {e}",
                error_code=ErrorCodes.CONFIG_INVALID_FORMAT,
                context=ErrorContext(file_path=str(self.config_file), operation="load"),
                cause=e,
            ) from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Expected a mapping in {self.config_file}",
                error_code=ErrorCodes.CONFIG_INVALID_FORMAT,
                context=ErrorContext(file_path=str(self.config_file), operation="load"),
            )

        try:
            config = AssemblyConfig.from_dict(config_data)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid assembly configuration: {e}",
                error_code=ErrorCodes.CONFIG_INVALID_FORMAT,
                context=ErrorContext(file_path=str(self.config_file), operation="load"),
                cause=e,
            ) from e

        logger.info(f"Loaded assembly configuration from {self.config_file}")
        return config

    def get_assembly_config(self) -> AssemblyConfig:
        return self._assembly_config

    def load_env_files(self) -> list[Path]:
        """Load .env files in hierarchical order.

        ``.env`` is loaded first without overriding the process environment,
        then ``.env.<environment>`` overrides it.
        """
        loaded = []
        global_env_file = self.config_dir / ".env"
        if global_env_file.exists():
            load_dotenv(global_env_file)
            loaded.append(global_env_file)
            logger.info(f"Loaded global env file: {global_env_file}")

        env_file = self.config_dir / f".env.{self.environment}"
        if env_file.exists():
            load_dotenv(env_file, override=True)
            loaded.append(env_file)
            logger.info(f"Loaded environment env file: {env_file}")

        return loaded

    def get_resolved_values(self) -> dict[str, str]:
        """Literal option values for resolved providers.

        Only keys that are set are returned; missing required values surface
        later as missing-configuration errors when options are built.
        """
        self.load_env_files()
        values = {}
        for key in RESOLVED_VALUE_KEYS:
            value = os.getenv(key)
            if value is not None:
                values[key] = value
        return values
