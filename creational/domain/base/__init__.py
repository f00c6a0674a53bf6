"""Base domain layer - shared building blocks for all examples."""

from .answer import Answer
from .builder import Builder
from .value_object import ValueObject

__all__ = ["Answer", "Builder", "ValueObject"]
