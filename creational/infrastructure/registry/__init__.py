"""Registry pattern implementations."""

from .provider_registry import ProviderRegistration, ProviderRegistry, get_provider_registry

__all__ = ["ProviderRegistry", "ProviderRegistration", "get_provider_registry"]
