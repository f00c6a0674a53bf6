"""Provider Registry - deferred binding of service implementations.

Client code asks the registry for a new service instance by provider name
(or for the default provider) and receives whatever the registered factory
creates. Providers can be registered at any time, so implementations that
did not exist when the client was written are picked up without changing
it.
"""

import threading
from typing import Any, Callable, Dict, List, Optional

from creational.domain.core.exceptions import ConfigurationError, UnknownVariantError
from creational.infrastructure.logging.logger import get_logger


class ProviderRegistration:
    """Container for provider registration information."""

    def __init__(self, name: str, factory: Callable[[], Any], description: str = ""):
        """
        Initialize provider registration.

        Args:
            name: Name the provider is registered under (e.g., 'plain', 'json')
            factory: Zero-argument callable creating a new service instance
            description: Optional human-readable description
        """
        self.name = name
        self.factory = factory
        self.description = description

    def __repr__(self) -> str:
        return f"ProviderRegistration(name='{self.name}')"


class ProviderRegistry:
    """
    Registry for service providers.

    Thread-safe singleton: ``ProviderRegistry()`` and
    ``ProviderRegistry.get_instance()`` return the same object.
    """

    _instance: Optional["ProviderRegistry"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "ProviderRegistry":
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize provider registry."""
        if hasattr(self, "_initialized"):
            return

        self._registrations: Dict[str, ProviderRegistration] = {}
        self._default_provider: Optional[str] = None
        self._registry_lock = threading.RLock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Provider registry initialized")

    @classmethod
    def get_instance(cls) -> "ProviderRegistry":
        """Return the shared registry."""
        return cls()

    def register_provider(self,
                          name: str,
                          factory: Callable[[], Any],
                          description: str = "",
                          replace: bool = False) -> None:
        """
        Register a provider under ``name``.

        Args:
            name: Provider name
            factory: Zero-argument callable creating a new service instance
            description: Optional human-readable description
            replace: Allow replacing an existing registration

        Raises:
            ConfigurationError: If the name is invalid, the factory is not
                callable, or the name is taken and ``replace`` is False
        """
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Provider name must be a non-empty string")
        if not callable(factory):
            raise ConfigurationError(f"Factory for provider '{name}' is not callable")

        with self._registry_lock:
            if name in self._registrations and not replace:
                raise ConfigurationError(f"Provider '{name}' is already registered")

            registration = ProviderRegistration(name, factory, description)
            self._registrations[name] = registration

            self.logger.info("Registered provider", provider=name, replaced=replace)
            self.logger.debug("Provider registration", registration=repr(registration))

    def unregister_provider(self, name: str) -> None:
        """
        Remove a provider.

        Raises:
            UnknownVariantError: If no provider has that name
        """
        with self._registry_lock:
            if name not in self._registrations:
                raise UnknownVariantError("provider", name, self._registrations.keys())
            del self._registrations[name]
            if self._default_provider == name:
                self._default_provider = None
            self.logger.info("Unregistered provider", provider=name)

    def set_default_provider(self, name: str) -> None:
        """
        Make ``name`` the provider used when none is requested explicitly.

        Raises:
            UnknownVariantError: If no provider has that name
        """
        with self._registry_lock:
            self._get_registration(name)
            self._default_provider = name
            self.logger.debug("Default provider set", provider=name)

    @property
    def default_provider(self) -> Optional[str]:
        return self._default_provider

    def new_instance(self, name: Optional[str] = None) -> Any:
        """
        Create a new service instance.

        Args:
            name: Provider name; the default provider when omitted

        Returns:
            A fresh instance created by the provider's factory

        Raises:
            ConfigurationError: If no name is given and no default is set,
                or the factory fails
            UnknownVariantError: If no provider has that name
        """
        if name is None:
            name = self._default_provider
            if name is None:
                raise ConfigurationError("No provider requested and no default provider set")

        registration = self._get_registration(name)

        try:
            instance = registration.factory()
        except Exception as e:
            error_msg = f"Failed to create instance from provider '{name}': {str(e)}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        self.logger.debug("Created service instance", provider=name,
                          instance_type=type(instance).__name__)
        return instance

    def is_registered(self, name: str) -> bool:
        with self._registry_lock:
            return name in self._registrations

    def get_registered_providers(self) -> List[str]:
        """Names of all registered providers, sorted."""
        with self._registry_lock:
            return sorted(self._registrations)

    def get_registration(self, name: str) -> ProviderRegistration:
        return self._get_registration(name)

    def clear_registrations(self) -> None:
        """Remove every provider and the default; mainly for tests."""
        with self._registry_lock:
            self._registrations.clear()
            self._default_provider = None
            self.logger.debug("Cleared all provider registrations")

    def _get_registration(self, name: str) -> ProviderRegistration:
        with self._registry_lock:
            registration = self._registrations.get(name)
            if registration is None:
                raise UnknownVariantError("provider", name, self._registrations.keys())
            return registration


def get_provider_registry() -> ProviderRegistry:
    """Get the global provider registry instance."""
    return ProviderRegistry.get_instance()
