"""Cart use cases against the in-memory repositories."""

import pytest

from app.core.exceptions import (
    CartItemNotFound,
    CartNotFound,
    ProductNotFound,
    ProductUnavailable,
    StockInsufficient,
)
from app.model.product import ProductStatus
from app.schemas.cart import CartItemIn
from app.services.cart_service import CartService

from conftest import make_product, seed_product


@pytest.mark.asyncio
async def test_create_cart_starts_empty(cart_service, cart_repo):
    cart = await cart_service.create_cart("s1")

    assert cart.owner_key == "s1"
    assert cart.items == []
    assert cart.total_item_count == 0
    assert cart.subtotal == 0
    assert cart.id in cart_repo.documents


@pytest.mark.asyncio
async def test_create_cart_with_initial_items(cart_service):
    cart = await cart_service.create_cart(
        "s1", [CartItemIn(product_id="p1", name="Shelf", unit_price=700, quantity=2)]
    )
    assert cart.subtotal == 1400
    assert cart.items[0].name == "Shelf"


@pytest.mark.asyncio
async def test_create_cart_merges_repeated_initial_items(cart_service, cart_repo):
    cart = await cart_service.create_cart("s1", [
        CartItemIn(product_id="p1", name="Shelf", unit_price=700, quantity=2),
        CartItemIn(product_id="p2", name="Bin", unit_price=100, quantity=1),
        CartItemIn(product_id="p1", name="Shelf v2", unit_price=999, quantity=3),
    ])

    assert [(i.product_id, i.quantity) for i in cart.items] == [("p1", 5), ("p2", 1)]
    assert cart.items[0].name == "Shelf"
    assert cart.items[0].unit_price == 700
    assert len(cart_repo.documents[cart.id]["items"]) == 2


@pytest.mark.asyncio
async def test_unknown_cart_returns_none(cart_service):
    assert await cart_service.get_cart_by_id("missing") is None
    assert await cart_service.get_cart_by_owner("nobody") is None


@pytest.mark.asyncio
async def test_get_or_create_returns_same_cart(cart_service, cart_repo):
    first = await cart_service.get_or_create_cart("s1")
    second = await cart_service.get_or_create_cart("s1")

    assert first.id == second.id
    assert len(cart_repo.documents) == 1


@pytest.mark.asyncio
async def test_add_item_snapshots_product(cart_service, product):
    cart = await cart_service.create_cart("s1")

    result = await cart_service.add_item(cart.id, product.id, 2)

    item = result.items[0]
    assert item.product_id == product.id
    assert item.name == product.name
    assert item.unit_price == product.unit_price
    assert item.image_url == product.images[0]
    assert item.specs == product.specs
    assert result.subtotal == 2 * product.unit_price


@pytest.mark.asyncio
async def test_add_item_twice_merges(cart_service, product):
    cart = await cart_service.create_cart("s1")
    await cart_service.add_item(cart.id, product.id, 2)
    result = await cart_service.add_item(cart.id, product.id, 3)

    assert len(result.items) == 1
    assert result.items[0].quantity == 5


@pytest.mark.asyncio
async def test_add_item_keeps_price_at_add_time(cart_service, product_repo, product):
    cart = await cart_service.create_cart("s1")
    await cart_service.add_item(cart.id, product.id, 1)
    seed_product(product_repo, make_product(product.id, unit_price=9999))

    result = await cart_service.add_item(cart.id, product.id, 1)

    assert result.items[0].unit_price == product.unit_price


@pytest.mark.asyncio
async def test_insufficient_stock_leaves_cart_untouched(cart_service, cart_repo, product_repo):
    seed_product(product_repo, make_product("p-low", stock=1))
    cart = await cart_service.create_cart("s1")
    stored = dict(cart_repo.documents[cart.id])

    with pytest.raises(StockInsufficient) as exc:
        await cart_service.add_item(cart.id, "p-low", 5)

    assert exc.value.status_code == 400
    assert exc.value.details == {"product_id": "p-low", "requested": 5, "available": 1}
    assert cart_repo.documents[cart.id] == stored


@pytest.mark.asyncio
async def test_add_unknown_product(cart_service):
    cart = await cart_service.create_cart("s1")
    with pytest.raises(ProductNotFound):
        await cart_service.add_item(cart.id, "ghost", 1)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [{"active": False}, {"status": ProductStatus.DISCONTINUED}, {"status": ProductStatus.OUT_OF_STOCK}, {"stock": 0}],
)
async def test_add_unavailable_product(cart_service, product_repo, overrides):
    seed_product(product_repo, make_product("p-off", **overrides))
    cart = await cart_service.create_cart("s1")

    with pytest.raises(ProductUnavailable):
        await cart_service.add_item(cart.id, "p-off", 1)


@pytest.mark.asyncio
async def test_product_is_checked_before_cart(cart_service):
    with pytest.raises(ProductNotFound):
        await cart_service.add_item("no-cart", "no-product", 1)


@pytest.mark.asyncio
async def test_add_to_unknown_cart(cart_service, product):
    with pytest.raises(CartNotFound):
        await cart_service.add_item("no-cart", product.id, 1)


@pytest.mark.asyncio
async def test_update_quantity(cart_service, product):
    cart = await cart_service.create_cart("s1")
    await cart_service.add_item(cart.id, product.id, 1)

    result = await cart_service.update_quantity(cart.id, product.id, 4)

    assert result.items[0].quantity == 4


@pytest.mark.asyncio
async def test_update_quantity_zero_removes(cart_service, product):
    cart = await cart_service.create_cart("s1")
    await cart_service.add_item(cart.id, product.id, 1)

    result = await cart_service.update_quantity(cart.id, product.id, 0)

    assert result.items == []


@pytest.mark.asyncio
async def test_update_quantity_checks_stock(cart_service, product):
    cart = await cart_service.create_cart("s1")
    await cart_service.add_item(cart.id, product.id, 1)

    with pytest.raises(StockInsufficient):
        await cart_service.update_quantity(cart.id, product.id, product.stock + 1)


@pytest.mark.asyncio
async def test_update_quantity_skips_stock_check_for_removed_product(cart_service, product_repo, product):
    cart = await cart_service.create_cart("s1")
    await cart_service.add_item(cart.id, product.id, 1)
    product_repo.documents.clear()

    result = await cart_service.update_quantity(cart.id, product.id, 50)

    assert result.items[0].quantity == 50


@pytest.mark.asyncio
async def test_update_quantity_unknown_item_is_noop_by_default(cart_service, product):
    cart = await cart_service.create_cart("s1")

    result = await cart_service.update_quantity(cart.id, product.id, 2)

    assert result.items == []


@pytest.mark.asyncio
async def test_update_quantity_unknown_item_strict(cart_repo, product_repo, product):
    service = CartService(cart_repo, product_repo, strict_items=True)
    cart = await service.create_cart("s1")

    with pytest.raises(CartItemNotFound):
        await service.update_quantity(cart.id, product.id, 2)


@pytest.mark.asyncio
async def test_update_quantity_unknown_cart(cart_service, product):
    with pytest.raises(CartNotFound):
        await cart_service.update_quantity("missing", product.id, 1)


@pytest.mark.asyncio
async def test_remove_and_clear(cart_service, product_repo, product):
    seed_product(product_repo, make_product("p2", name="Bin"))
    cart = await cart_service.create_cart("s1")
    await cart_service.add_item(cart.id, product.id, 1)
    await cart_service.add_item(cart.id, "p2", 2)

    after_remove = await cart_service.remove_item(cart.id, product.id)
    assert [i.product_id for i in after_remove.items] == ["p2"]

    again = await cart_service.remove_item(cart.id, product.id)
    assert [i.product_id for i in again.items] == ["p2"]

    cleared = await cart_service.clear_cart(cart.id)
    assert cleared.items == []
    assert (await cart_service.clear_cart(cart.id)).items == []


@pytest.mark.asyncio
async def test_delete_cart(cart_service, cart_repo):
    cart = await cart_service.create_cart("s1")

    await cart_service.delete_cart(cart.id)
    await cart_service.delete_cart(cart.id)

    assert cart.id not in cart_repo.documents
