# creational/domain/core/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class UnknownVariantError(DomainException):
    """Raised when a creation operation is asked for a variant it does not know."""
    def __init__(self, variant_type: str, name: str, known: Optional[Iterable[str]] = None):
        self.variant_type = variant_type
        self.name = name
        self.known = sorted(known) if known is not None else []
        message = f"Unknown {variant_type}: '{name}'"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
