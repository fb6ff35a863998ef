#!/usr/bin/env python3
"""
utils/config.py

Simple configuration management utilities.
Provides centralized configuration loading.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
from image_ops.core.constants import (
    CONFIG_DIR_ENV_VAR,
    DEFAULT_CONFIG_DIR,
    DEFAULT_LOG_DIR,
    DEFAULT_POLL_INTERVAL,
)
from image_ops.utils.logger import setup_logger

logger = setup_logger(__name__)


class ConfigManager:
    """
    Simple configuration manager.

    Features:
    - YAML configuration loading
    - Environment variable override support
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize ConfigManager.

        Args:
            config_dir: Custom config directory path (defaults to
                $IMAGE_OPS_CONFIG_DIR, then ./configs)
        """
        if config_dir is None:
            config_dir = os.environ.get(CONFIG_DIR_ENV_VAR, DEFAULT_CONFIG_DIR)
        self.config_dir = Path(config_dir)

        # Try both .yml and .yaml extensions
        yml_file = self.config_dir / "settings.yml"
        yaml_file = self.config_dir / "settings.yaml"

        if yml_file.exists():
            self.settings_file = yml_file
        else:
            self.settings_file = yaml_file  # Default to .yaml for error messages

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a YAML file safely.
        """
        if not file_path.exists():
            logger.debug(f"Config file not found: {file_path}")
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
                return content or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading {file_path}: {e}")
            return {}

    def load_settings(self) -> Dict[str, Any]:
        """
        Load application settings.
        """
        return self._load_yaml_file(self.settings_file)

    def get_value(
        self, key_path: str, default: Any = None, env_var: Optional[str] = None
    ) -> Any:
        """
        Get configuration value with dot notation support and environment variable override.
        """
        # Check environment variable first
        if env_var and env_var in os.environ:
            return os.environ[env_var]

        # Navigate through nested dictionary
        keys = key_path.split(".")
        current = self.config

        try:
            for key in keys:
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def get_aws_region(self) -> Optional[str]:
        """Get AWS region; None leaves it to the boto3 credential chain."""
        return self.get_value("aws.region", None, env_var="AWS_REGION")

    def get_aws_profile(self) -> Optional[str]:
        """Get named AWS profile."""
        return self.get_value("aws.profile", None, env_var="AWS_PROFILE")

    def get_role_arn(self) -> Optional[str]:
        """Get ARN of a role to assume before calling EC2."""
        return self.get_value("aws.role_arn", None)

    def get_poll_interval(self) -> float:
        """Get seconds between status checks."""
        return float(self.get_value("polling.interval", DEFAULT_POLL_INTERVAL))

    def get_poll_timeout(self) -> Optional[float]:
        """Get overall polling deadline in seconds, None for no deadline."""
        timeout = self.get_value("polling.timeout", None)
        return float(timeout) if timeout is not None else None

    def get_logging_level(self) -> str:
        """Get logging level."""
        return self.get_value("logging.level", "INFO", env_var="LOG_LEVEL")

    def get_logging_path(self) -> str:
        """Get logging file path."""
        return self.get_value("logging.path", DEFAULT_LOG_DIR, env_var="LOG_PATH")

    def is_file_logging_enabled(self) -> bool:
        """Whether log records are also written to rotating files."""
        return bool(self.get_value("logging.file", True))

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration as a cached property."""
        if not hasattr(self, "_cached_config"):
            self._cached_config = self.load_settings()
        return self._cached_config

    def reload_config(self) -> None:
        """Force reload of configuration from file."""
        if hasattr(self, "_cached_config"):
            delattr(self, "_cached_config")
