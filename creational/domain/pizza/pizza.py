"""Pizza hierarchy with parallel builders.

Every concrete pizza has its own builder. The shared ``add_topping`` setter
lives on the abstract ``PizzaBuilder`` and is typed to return the concrete
builder, so chains keep access to the subclass setters; each concrete
``build()`` returns its own pizza type.
"""
from abc import ABC, abstractmethod
from typing import FrozenSet, TypeVar, Union

from pydantic import Field

from creational.domain.base.builder import Builder
from creational.domain.base.value_object import ValueObject
from creational.domain.pizza.topping_set import ToppingSet
from creational.domain.pizza.value_objects import Size, Topping

P = TypeVar("P", bound="Pizza")
B = TypeVar("B", bound="PizzaBuilder")


class Pizza(ValueObject, ABC):
    """Base class for all pizzas."""
    toppings: FrozenSet[Topping] = Field(default_factory=frozenset)

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description of the pizza."""

    def _topping_text(self) -> str:
        if not self.toppings:
            return "no toppings"
        return ", ".join(t.value for t in Topping if t in self.toppings)


class PizzaBuilder(Builder[P]):
    """Builder state shared by every pizza builder."""

    def __init__(self):
        self._toppings: ToppingSet = ToppingSet.none_of()

    def add_topping(self: B, topping: Union[Topping, str]) -> B:
        """Add a topping; adding the same topping twice has no effect.

        Raises:
            UnknownVariantError: If ``topping`` names no known topping
        """
        self._toppings = self._toppings | ToppingSet.of(topping)
        return self

    def add_toppings(self: B, *toppings: Union[Topping, str]) -> B:
        self._toppings = self._toppings | ToppingSet.copy_of(toppings)
        return self

    def _collected_toppings(self) -> FrozenSet[Topping]:
        return frozenset(self._toppings)


class NyPizza(Pizza):
    """New York style pizza; the size is required."""
    size: Size

    @classmethod
    def builder(cls, size: Union[Size, str]) -> "NyPizzaBuilder":
        return NyPizzaBuilder(size)

    def describe(self) -> str:
        return f"New York pizza ({self.size.value}) with {self._topping_text()}"


class NyPizzaBuilder(PizzaBuilder[NyPizza]):
    def __init__(self, size: Union[Size, str]):
        super().__init__()
        self._size = Size.from_name(size)

    def build(self) -> NyPizza:
        return NyPizza(size=self._size, toppings=self._collected_toppings())


class Calzone(Pizza):
    """Calzone; sauce goes outside unless requested otherwise."""
    sauce_inside: bool = False

    @classmethod
    def builder(cls) -> "CalzoneBuilder":
        return CalzoneBuilder()

    def describe(self) -> str:
        where = "inside" if self.sauce_inside else "outside"
        return f"Calzone with {self._topping_text()}, sauce {where}"


class CalzoneBuilder(PizzaBuilder[Calzone]):
    def __init__(self):
        super().__init__()
        self._sauce_inside = False

    def sauce_inside(self) -> "CalzoneBuilder":
        self._sauce_inside = True
        return self

    def build(self) -> Calzone:
        return Calzone(sauce_inside=self._sauce_inside, toppings=self._collected_toppings())
