"""Topping sets - static factories with covariant return types.

``ToppingSet`` is the only public type. Its factories decide which private
implementation to hand back: the empty set is a shared singleton, anything
else is a bit-mask set. Callers rely on the ``collections.abc.Set``
capability only, so implementations can change without touching them.
"""
from abc import abstractmethod
from collections.abc import Set
from typing import AbstractSet, Iterable, Iterator, Union

from creational.domain.pizza.value_objects import Topping


class ToppingSet(Set):
    """Immutable set of toppings. Obtain instances through the factories."""

    __slots__ = ()

    @staticmethod
    def none_of() -> "ToppingSet":
        """Return the shared empty set."""
        return _EMPTY

    @staticmethod
    def of(*toppings: Union[Topping, str]) -> "ToppingSet":
        """Return a set holding ``toppings``; names are accepted too."""
        return ToppingSet.copy_of(toppings)

    @staticmethod
    def all_of() -> "ToppingSet":
        """Return a set holding every topping."""
        return ToppingSet.copy_of(Topping)

    @staticmethod
    def copy_of(toppings: Iterable[Union[Topping, str]]) -> "ToppingSet":
        mask = 0
        for topping in toppings:
            mask |= 1 << Topping.from_name(topping).ordinal
        if not mask:
            return _EMPTY
        return _BitToppingSet(mask)

    @classmethod
    def _from_iterable(cls, it: Iterable[object]) -> AbstractSet:
        # Set operators (&, |, -, ^) build their results through here; mixed
        # results fall back to a plain frozenset.
        items = list(it)
        if all(isinstance(item, Topping) for item in items):
            return ToppingSet.copy_of(items)
        return frozenset(items)

    @abstractmethod
    def __contains__(self, topping: object) -> bool: ...

    @abstractmethod
    def __iter__(self) -> Iterator[Topping]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"ToppingSet.of({', '.join(t.name for t in self)})"


class _EmptyToppingSet(ToppingSet):
    __slots__ = ()

    def __contains__(self, topping: object) -> bool:
        return False

    def __iter__(self) -> Iterator[Topping]:
        return iter(())

    def __len__(self) -> int:
        return 0


class _BitToppingSet(ToppingSet):
    __slots__ = ("_mask",)

    def __init__(self, mask: int):
        self._mask = mask

    def __contains__(self, topping: object) -> bool:
        return isinstance(topping, Topping) and bool(self._mask & (1 << topping.ordinal))

    def __iter__(self) -> Iterator[Topping]:
        return (t for t in Topping if self._mask & (1 << t.ordinal))

    def __len__(self) -> int:
        return bin(self._mask).count("1")


_EMPTY = _EmptyToppingSet()
