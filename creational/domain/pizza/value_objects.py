# creational/domain/pizza/value_objects.py
from enum import Enum
from typing import Union

from creational.domain.core.exceptions import UnknownVariantError


class _NamedVariant(str, Enum):
    """String enum with a lenient by-name factory."""

    @classmethod
    def from_name(cls, name: Union[str, "_NamedVariant"]):
        """Return the member called ``name`` (case-insensitive).

        Raises:
            UnknownVariantError: If no member has that name
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = name.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
        raise UnknownVariantError(cls.variant_type(), str(name), cls.__members__.keys())

    @classmethod
    def variant_type(cls) -> str:
        return cls.__name__.lower()


class Topping(_NamedVariant):
    """Pizza toppings."""
    HAM = "ham"
    MUSHROOM = "mushroom"
    ONION = "onion"
    PEPPER = "pepper"
    SAUSAGE = "sausage"

    @property
    def ordinal(self) -> int:
        return _TOPPING_ORDER.index(self)


_TOPPING_ORDER = tuple(Topping)


class Size(_NamedVariant):
    """New York pizza sizes."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
