"""Tests for ToppingSet static factories."""

from collections.abc import Set

import pytest

from creational.domain.core.exceptions import UnknownVariantError
from creational.domain.pizza import Topping, ToppingSet


@pytest.mark.unit
class TestToppingSetFactories:
    """Test cases for the covariant ToppingSet factories."""

    def test_empty_set_is_shared(self):
        assert ToppingSet.none_of() is ToppingSet.none_of()
        assert ToppingSet.of() is ToppingSet.none_of()
        assert ToppingSet.copy_of([]) is ToppingSet.none_of()

    def test_factories_return_private_implementations(self):
        empty = ToppingSet.none_of()
        some = ToppingSet.of(Topping.HAM)

        assert type(empty) is not ToppingSet
        assert type(some) is not ToppingSet
        assert type(empty) is not type(some)
        assert isinstance(empty, ToppingSet)
        assert isinstance(some, Set)

    def test_non_empty_sets_are_fresh(self):
        assert ToppingSet.of(Topping.HAM) is not ToppingSet.of(Topping.HAM)
        assert ToppingSet.of(Topping.HAM) == ToppingSet.of(Topping.HAM)

    def test_membership_and_length(self):
        toppings = ToppingSet.of(Topping.HAM, "onion", Topping.HAM)

        assert len(toppings) == 2
        assert Topping.HAM in toppings
        assert Topping.ONION in toppings
        assert Topping.PEPPER not in toppings
        assert "ham" not in toppings

    def test_iterates_in_declaration_order(self):
        toppings = ToppingSet.of(Topping.SAUSAGE, Topping.HAM)

        assert list(toppings) == [Topping.HAM, Topping.SAUSAGE]

    def test_all_of(self):
        assert set(ToppingSet.all_of()) == set(Topping)

    def test_set_operations_stay_topping_sets(self):
        union = ToppingSet.of(Topping.HAM) | ToppingSet.of(Topping.ONION)
        nothing = ToppingSet.of(Topping.HAM) & ToppingSet.of(Topping.ONION)

        assert isinstance(union, ToppingSet)
        assert union == {Topping.HAM, Topping.ONION}
        assert nothing is ToppingSet.none_of()

    def test_equal_sets_hash_equal(self):
        assert hash(ToppingSet.of(Topping.HAM, Topping.ONION)) == hash(
            ToppingSet.of(Topping.ONION, Topping.HAM)
        )

    def test_unknown_topping_name(self):
        with pytest.raises(UnknownVariantError):
            ToppingSet.of("anchovy")

    def test_base_type_is_abstract(self):
        with pytest.raises(TypeError):
            ToppingSet()

    def test_set_operations_with_other_items_give_frozenset(self):
        mixed = ToppingSet.of(Topping.HAM) | {1}
        reflected = {"ham"} | ToppingSet.of(Topping.ONION)

        assert mixed == frozenset({Topping.HAM, 1})
        assert isinstance(mixed, frozenset)
        assert isinstance(reflected, frozenset)
        assert len(reflected) == 2

    def test_difference_with_other_items_stays_topping_set(self):
        result = ToppingSet.of(Topping.HAM, Topping.ONION) - {1, Topping.HAM}

        assert isinstance(result, ToppingSet)
        assert result == {Topping.ONION}
