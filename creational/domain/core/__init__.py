"""Core domain primitives shared by every example."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    UnknownVariantError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "UnknownVariantError",
    "ConfigurationError",
]
