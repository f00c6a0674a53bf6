"""Configuration schemas."""

from .app_schema import AppConfig
from .factory_schema import FactoryConfig, RegistryConfig
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "LoggingConfig", "FactoryConfig", "RegistryConfig"]
