"""Application bootstrap - wires configuration, logging and providers."""

from __future__ import annotations

from typing import Optional

from creational.config import AppConfig
from creational.config.manager import ConfigurationManager, get_config_manager
from creational.domain.student.value_objects import AdmissionYear
from creational.infrastructure.logging.logger import get_logger, setup_logging
from creational.infrastructure.registry.provider_registry import get_provider_registry
from creational.infrastructure.renderers.registration import register_builtin_renderers


class Application:
    """Application context with lazy configuration loading."""

    def __init__(self, config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._config_manager = config_manager
        self._initialized = False
        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> bool:
        """
        Load configuration, set up logging, apply factory settings and
        register the renderer providers. Calling it again is a no-op.

        Returns:
            True once the application is initialized

        Raises:
            ConfigurationError: If configuration cannot be loaded or applied
        """
        if self._initialized:
            return True

        app_config = self.config_manager.get_typed(AppConfig)
        setup_logging(app_config.logging)
        self.logger.info("Initializing application", environment=app_config.environment)

        factory_config = app_config.factory
        AdmissionYear.configure_cache(
            factory_config.admission_year_cache_low,
            factory_config.admission_year_cache_high,
        )

        registry = get_provider_registry()
        if app_config.registry.register_builtin_renderers:
            register_builtin_renderers(registry)
        registry.set_default_provider(app_config.registry.default_renderer)

        self._initialized = True
        self.logger.info(
            "Application initialized",
            providers=registry.get_registered_providers(),
            default_provider=registry.default_provider,
        )
        return True
