"""Registration of the built-in label renderers and the renderer factory."""
from typing import Optional

from creational.domain.base.ports.label_renderer_port import LabelRendererPort
from creational.domain.core.exceptions import ConfigurationError
from creational.infrastructure.logging.logger import get_logger
from creational.infrastructure.registry.provider_registry import (
    ProviderRegistry,
    get_provider_registry,
)
from creational.infrastructure.renderers.json_renderer import JsonLabelRenderer
from creational.infrastructure.renderers.plain_renderer import PlainLabelRenderer

logger = get_logger(__name__)

BUILTIN_RENDERERS = {
    PlainLabelRenderer.name: (PlainLabelRenderer, "Fixed-width text label"),
    JsonLabelRenderer.name: (JsonLabelRenderer, "JSON object"),
}


def register_builtin_renderers(registry: Optional[ProviderRegistry] = None) -> None:
    """Register the built-in renderers; names already taken are left alone."""
    registry = registry or get_provider_registry()
    for name, (renderer_class, description) in BUILTIN_RENDERERS.items():
        if registry.is_registered(name):
            logger.debug("Renderer already registered, skipping", provider=name)
            continue
        registry.register_provider(name, renderer_class, description=description)


def new_label_renderer(name: Optional[str] = None,
                       registry: Optional[ProviderRegistry] = None) -> LabelRendererPort:
    """
    Create a label renderer from the registry.

    The concrete class depends on what was registered under ``name`` (or the
    default provider); callers only rely on ``LabelRendererPort``.

    Raises:
        UnknownVariantError: If no provider has that name
        ConfigurationError: If the provider does not create a label renderer
    """
    registry = registry or get_provider_registry()
    renderer = registry.new_instance(name)
    if not isinstance(renderer, LabelRendererPort):
        raise ConfigurationError(
            f"Provider '{name or registry.default_provider}' created "
            f"{type(renderer).__name__}, not a label renderer"
        )
    return renderer
