"""Infrastructure layer - logging, provider registry and renderer providers."""
