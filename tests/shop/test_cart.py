"""
Tests for the cart reducer.
"""

import pytest

from app.shop.cart import Cart
from tests.utils.factories import product_factory


@pytest.fixture
def sword():
    return product_factory(product_id="sword", name="Espada", price=150, category="weapon")


@pytest.fixture
def potion():
    return product_factory(product_id="potion", name="Poção", price=45, category="potion")


class TestCart:
    def test_empty_cart(self):
        cart = Cart()

        assert cart.is_empty
        assert cart.total == 0
        assert cart.item_count == 0

    def test_adding_same_product_merges_lines(self, sword):
        cart = Cart().add(sword).add(sword)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.total == 300

    def test_add_keeps_insertion_order(self, sword, potion):
        cart = Cart().add(sword).add(potion).add(sword)

        assert [item.product.id for item in cart.items] == ["sword", "potion"]

    def test_operations_do_not_mutate_previous_cart(self, sword):
        before = Cart().add(sword)
        after = before.add(sword)

        assert before.items[0].quantity == 1
        assert after.items[0].quantity == 2

    def test_add_rejects_non_positive_quantity(self, sword):
        with pytest.raises(ValueError):
            Cart().add(sword, quantity=0)

    def test_remove(self, sword, potion):
        cart = Cart().add(sword).add(potion).remove("sword")

        assert [item.product.id for item in cart.items] == ["potion"]

    def test_remove_unknown_product_is_noop(self, sword):
        cart = Cart().add(sword)

        assert cart.remove("ghost") == cart

    def test_update_quantity_never_drops_below_one(self, potion):
        cart = Cart().add(potion, quantity=3)

        assert cart.update_quantity("potion", -1).items[0].quantity == 2
        assert cart.update_quantity("potion", -10).items[0].quantity == 1
        assert cart.update_quantity("potion", 2).items[0].quantity == 5

    def test_totals_and_item_count(self, sword, potion):
        cart = Cart().add(sword).add(potion, quantity=2)

        assert cart.total == 150 + 2 * 45
        assert cart.item_count == 3

    def test_can_afford(self, sword):
        cart = Cart().add(sword)

        assert cart.can_afford(150)
        assert not cart.can_afford(149)

    def test_clear(self, sword):
        assert Cart().add(sword).clear().is_empty
