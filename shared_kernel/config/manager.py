"""Configuration management for the shared kernel."""
from __future__ import annotations
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from shared_kernel.config.schemas import (
    EventSourcingConfig,
    KernelConfig,
    LoggingConfig,
    validate_config,
)
from shared_kernel.config.utils.env_expansion import expand_config_env_vars
from shared_kernel.domain.base.exceptions import ConfigurationError

CONFIG_FILE_ENV_VAR = "SHARED_KERNEL_CONFIG"

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for kernel configuration.

    Configuration is read from a JSON file (explicit path, or the path in
    SHARED_KERNEL_CONFIG), environment variables in values are expanded,
    and the result is validated into a KernelConfig. Loading is lazy and
    happens once until reload() is called.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        self._lock = threading.RLock()
        self._config: Optional[KernelConfig] = None

    def get_config(self) -> KernelConfig:
        """Get the validated configuration, loading it on first use."""
        with self._lock:
            if self._config is None:
                self._config = validate_config(self._load_raw_config())
            return self._config

    def get_logging_config(self) -> LoggingConfig:
        return self.get_config().logging

    def get_event_sourcing_config(self) -> EventSourcingConfig:
        return self.get_config().event_sourcing

    def reload(self) -> KernelConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._config = None
            return self.get_config()

    def _load_raw_config(self) -> Dict[str, Any]:
        if not self._config_file:
            logger.debug("No configuration file given, using defaults")
            return {}

        try:
            with open(self._config_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Configuration file not found: {self._config_file}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file {self._config_file}: {e}"
            ) from e

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Configuration file {self._config_file} must contain a JSON object"
            )

        logger.debug(f"Loaded configuration from {self._config_file}")
        return expand_config_env_vars(raw)
