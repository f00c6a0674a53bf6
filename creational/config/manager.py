"""Unified configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from pydantic import ValidationError as PydanticValidationError

from creational.config.schemas import AppConfig, FactoryConfig, LoggingConfig, RegistryConfig
from creational.config.utils.env_expansion import expand_config_env_vars
from creational.domain.core.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "CREATIONAL_CONFIG_FILE"
LOG_LEVEL_ENV = "CREATIONAL_LOG_LEVEL"

_SECTIONS: Dict[Type, str] = {
    LoggingConfig: "logging",
    FactoryConfig: "factory",
    RegistryConfig: "registry",
}


class ConfigurationManager:
    """
    Single source of truth for configuration.

    Configuration is read lazily on first access from, in order of precedence:
    - environment variable overrides (``CREATIONAL_LOG_LEVEL``)
    - the JSON file given to the constructor or named by ``CREATIONAL_CONFIG_FILE``
    - schema defaults

    ``$VAR`` and ``${VAR}`` references in file values are expanded before
    validation.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file or os.environ.get(CONFIG_FILE_ENV) or None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        data = self._read_config_file()
        data = expand_config_env_vars(data)
        self._apply_env_overrides(data)
        try:
            return AppConfig.model_validate(data)
        except PydanticValidationError as e:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e

    def _read_config_file(self) -> Dict[str, Any]:
        path = self.config_file
        if path is None:
            logger.debug("No configuration file given, using defaults")
            return {}
        if not os.path.isfile(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        logger.debug("Loaded configuration from %s", path)
        return data

    def _apply_env_overrides(self, data: Dict[str, Any]) -> None:
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            logging_section = data.setdefault("logging", {})
            if not isinstance(logging_section, dict):
                raise ConfigurationError("Configuration section 'logging' must be an object")
            logging_section["level"] = level

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key, e.g. ``"logging.level"``.

        Args:
            key: Dotted path into the configuration
            default: Value returned when the key is absent

        Returns:
            Configuration value or ``default``
        """
        value: Any = self.app_config.model_dump()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration object (``AppConfig`` or one of its sections)."""
        if config_type is AppConfig:
            return cast(T, self.app_config)
        section = _SECTIONS.get(config_type)
        if section is None:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return cast(T, getattr(self.app_config, section))

    def reload(self) -> AppConfig:
        """Discard the loaded configuration and read it again."""
        with self._lock:
            self._app_config = None
        return self.app_config


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Return the process-wide configuration manager, creating it on first use."""
    global _config_manager
    with _config_manager_lock:
        if _config_manager is None or (
            config_file is not None and config_file != _config_manager._config_file
        ):
            _config_manager = ConfigurationManager(config_file)
        return _config_manager


def reset_config_manager() -> None:
    """Forget the process-wide configuration manager."""
    global _config_manager
    with _config_manager_lock:
        _config_manager = None
