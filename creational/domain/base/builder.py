"""Builder base - staged construction of immutable values.

A builder collects required values when it is created, accepts optional
values through setters that return the builder itself, and produces the
target only when ``build()`` is called. The target is constructed in one
step inside ``build()``, so callers never see a half-initialized value.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Builder(ABC, Generic[T]):
    """Base class for builders of immutable values."""

    @abstractmethod
    def build(self) -> T:
        """Finalize the collected values into a new immutable instance."""

    def __repr__(self) -> str:
        fields = ", ".join(f"{k.lstrip('_')}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"
