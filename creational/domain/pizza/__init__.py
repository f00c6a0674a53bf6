"""Pizza bounded context - hierarchical builders and covariant factories."""

from .pizza import Calzone, CalzoneBuilder, NyPizza, NyPizzaBuilder, Pizza, PizzaBuilder
from .topping_set import ToppingSet
from .value_objects import Size, Topping

__all__ = [
    "Pizza",
    "PizzaBuilder",
    "NyPizza",
    "NyPizzaBuilder",
    "Calzone",
    "CalzoneBuilder",
    "ToppingSet",
    "Size",
    "Topping",
]
