"""Creational Patterns - Root Package.

Executable examples of two object-creation idioms:

    - Builders: required values up front, optional values through chained
      setters, an immutable value produced by an explicit ``build()``.
    - Static factory methods: named creation operations that can reuse
      instances, return any implementation of a declared interface, and bind
      to implementations registered after the caller was written.

Key Components:
    - domain: Value records, builders and factories
    - infrastructure: Provider registry, label renderers, logging
    - config: Configuration schemas and manager

Usage:
    >>> from creational.domain.nutrition import NutritionFacts
    >>> cola = NutritionFacts.builder(240, 8).calories(100).sodium(35).build()
"""

from ._version import __version__

PACKAGE_NAME = "creational-patterns"

__package_name__ = PACKAGE_NAME
