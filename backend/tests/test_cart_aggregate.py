"""Cart aggregate behaviour: merge, quantity updates, removal and totals."""

from datetime import datetime, timezone

import pytest

from app.model.cart import Cart, CartItem

OLD = datetime(2020, 1, 1, tzinfo=timezone.utc)


def _item(product_id="p1", quantity=1, unit_price=500, **kw):
    return CartItem(product_id=product_id, name=f"Product {product_id}", unit_price=unit_price,
                    quantity=quantity, **kw)


@pytest.fixture
def cart():
    return Cart(id="c1", owner_key="s1", created_at=OLD, updated_at=OLD)


class TestTotals:
    def test_empty_cart(self, cart):
        assert cart.is_empty()
        assert cart.total_item_count() == 0
        assert cart.subtotal() == 0

    def test_totals_follow_items(self, cart):
        cart.add_item(_item("p1", quantity=2, unit_price=500))
        cart.add_item(_item("p2", quantity=3, unit_price=1250))
        cart.add_item(_item("p3", quantity=1, unit_price=0))

        assert cart.subtotal() == 2 * 500 + 3 * 1250
        assert cart.total_item_count() == 6
        assert cart.subtotal() == sum(i.line_total for i in cart.items)


class TestAddItem:
    def test_adding_same_product_merges_quantity(self, cart):
        cart.add_item(_item("p1", quantity=2, unit_price=500))
        cart.add_item(_item("p1", quantity=3, unit_price=500))

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5
        assert cart.subtotal() == 2500

    def test_merge_keeps_first_snapshot(self, cart):
        cart.add_item(_item("p1", quantity=1, image_url="a.jpg", specs={"color": "red"}))
        cart.add_item(CartItem(product_id="p1", name="Renamed", unit_price=999, quantity=2,
                               image_url="b.jpg", specs={"color": "blue"}))

        item = cart.items[0]
        assert item.quantity == 3
        assert item.name == "Product p1"
        assert item.unit_price == 500
        assert item.image_url == "a.jpg"
        assert item.specs == {"color": "red"}

    def test_distinct_products_keep_insertion_order(self, cart):
        for pid in ("p3", "p1", "p2"):
            cart.add_item(_item(pid))
        assert [i.product_id for i in cart.items] == ["p3", "p1", "p2"]

    def test_add_refreshes_updated_at(self, cart):
        cart.add_item(_item())
        assert cart.updated_at > OLD
        assert cart.created_at == OLD


class TestSetItemQuantity:
    def test_replaces_quantity(self, cart):
        cart.add_item(_item("p1", quantity=2))
        cart.set_item_quantity("p1", 7)
        assert cart.get_item("p1").quantity == 7

    def test_zero_removes_line(self, cart):
        cart.add_item(_item("p1"))
        cart.add_item(_item("p2"))

        cart.set_item_quantity("p1", 0)

        assert [i.product_id for i in cart.items] == ["p2"]

    def test_zero_is_same_as_remove(self):
        a = Cart(id="c", owner_key="o", items=[_item("p1"), _item("p2", quantity=4)])
        b = Cart(id="c", owner_key="o", items=[_item("p1"), _item("p2", quantity=4)])

        a.set_item_quantity("p2", 0)
        b.remove_item("p2")

        assert a.items == b.items

    def test_unknown_product_is_noop(self, cart):
        cart.add_item(_item("p1", quantity=2))
        before = list(cart.items)
        stamp = cart.updated_at

        cart.set_item_quantity("missing", 5)

        assert cart.items == before
        assert cart.updated_at == stamp


class TestRemoveAndClear:
    def test_remove_missing_product_leaves_items_unchanged(self, cart):
        cart.add_item(_item("p1", quantity=2))
        cart.add_item(_item("p2", quantity=1))
        snapshot = [CartItem(**vars(i)) for i in cart.items]

        cart.remove_item("nope")

        assert cart.items == snapshot

    def test_remove_existing(self, cart):
        cart.add_item(_item("p1"))
        cart.remove_item("p1")
        assert cart.is_empty()

    def test_clear_on_empty_cart_still_touches(self, cart):
        cart.clear()
        assert cart.items == []
        assert cart.updated_at > OLD

    def test_clear_empties_cart(self, cart):
        cart.add_item(_item("p1"))
        cart.add_item(_item("p2"))
        cart.clear()
        assert cart.is_empty()
        assert cart.subtotal() == 0
