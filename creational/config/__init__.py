"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager, reset_config_manager
from .schemas import AppConfig, FactoryConfig, LoggingConfig, RegistryConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "FactoryConfig",
    "RegistryConfig",
    "ConfigurationManager",
    "get_config_manager",
    "reset_config_manager",
]
