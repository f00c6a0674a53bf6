"""Student bounded context - static factory methods and instance control."""

from .student import Student
from .value_objects import DEFAULT_CACHE_WINDOW, AdmissionYear

__all__ = ["Student", "AdmissionYear", "DEFAULT_CACHE_WINDOW"]
