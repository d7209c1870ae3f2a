"""Application tests for cart commands and cart lookups."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.catalogue.product.product import Product
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import AddToCart, ClearCart, RemoveCartItem, UpdateCartItemQuantity


def _add(cart, product, quantity=1):
    return current_domain.process(
        AddToCart(cart_id=cart.id, product_id=product.id, quantity=quantity),
        asynchronous=False,
    )


class TestGetOrCreate:
    def test_cart_is_created_on_first_use(self, user):
        repo = current_domain.repository_for(Cart)
        assert repo.find_by_user(user.id) is None

        cart = repo.get_or_create(user.id)

        assert cart.user_id == user.id
        assert repo.find_by_user(user.id).id == cart.id

    def test_one_cart_per_user(self, user):
        repo = current_domain.repository_for(Cart)
        first = repo.get_or_create(user.id)
        second = repo.get_or_create(user.id)

        assert first.id == second.id
        assert repo.count() == 1


class TestAddToCart:
    def test_add_item(self, cart, make_product):
        product = make_product(name="Sun Hat", price=24.99)

        item_id = _add(cart, product, 2)

        items = current_domain.repository_for(Cart).cart_items(cart.id)
        assert [(i.id, i.quantity) for i in items] == [(item_id, 2)]

    def test_adding_same_product_twice_keeps_one_row(self, cart, make_product):
        product = make_product()

        first = _add(cart, product, 1)
        second = _add(cart, product, 2)

        items = current_domain.repository_for(Cart).cart_items(cart.id)
        assert first == second
        assert len(items) == 1
        assert items[0].quantity == 3

    def test_unknown_product(self, cart):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(AddToCart(cart_id=cart.id, product_id="missing", quantity=1), asynchronous=False)

    def test_zero_quantity_is_rejected(self, cart, make_product):
        product = make_product()
        with pytest.raises(ValidationError):
            current_domain.process(AddToCart(cart_id=cart.id, product_id=product.id, quantity=0), asynchronous=False)

    def test_unknown_cart(self, make_product):
        product = make_product()
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(AddToCart(cart_id="missing", product_id=product.id, quantity=1), asynchronous=False)


class TestChangeItems:
    def test_update_quantity(self, cart, make_product):
        item_id = _add(cart, make_product())

        current_domain.process(
            UpdateCartItemQuantity(cart_id=cart.id, item_id=item_id, quantity=4),
            asynchronous=False,
        )

        assert current_domain.repository_for(Cart).cart_items(cart.id)[0].quantity == 4

    def test_zero_quantity_removes_item(self, cart, make_product):
        item_id = _add(cart, make_product())

        current_domain.process(
            UpdateCartItemQuantity(cart_id=cart.id, item_id=item_id, quantity=0),
            asynchronous=False,
        )

        assert current_domain.repository_for(Cart).cart_items(cart.id) == []

    def test_remove_item(self, cart, make_product):
        keep = make_product(name="Keep")
        drop = make_product(name="Drop")
        _add(cart, keep)
        drop_item = _add(cart, drop)

        current_domain.process(RemoveCartItem(cart_id=cart.id, item_id=drop_item), asynchronous=False)

        items = current_domain.repository_for(Cart).cart_items(cart.id)
        assert [i.product_id for i in items] == [keep.id]

    def test_clear_cart(self, cart, make_product):
        _add(cart, make_product(name="A"))
        _add(cart, make_product(name="B"))

        current_domain.process(ClearCart(cart_id=cart.id), asynchronous=False)

        repo = current_domain.repository_for(Cart)
        assert repo.cart_items(cart.id) == []
        assert repo.find_by_id(cart.id) is not None


class TestItemsWithProducts:
    def test_lines_carry_current_product_data(self, cart, make_product):
        product = make_product(name="Coffee Maker", price=69.99, stock=60, image_url="/img/coffee.jpg")
        _add(cart, product, 2)

        [line] = current_domain.repository_for(Cart).items_with_products(cart.id)

        assert line.name == "Coffee Maker"
        assert line.price == 69.99
        assert line.stock == 60
        assert line.image_url == "/img/coffee.jpg"
        assert line.quantity == 2
        assert str(line.line_total) == "139.98"

    def test_lines_follow_live_price(self, cart, make_product):
        product = make_product(price=10.0)
        _add(cart, product)

        current_domain.repository_for(Product).update(product.id, price=12.0)

        [line] = current_domain.repository_for(Cart).items_with_products(cart.id)
        assert line.price == 12.0

    def test_items_for_deleted_products_are_dropped(self, cart, make_product):
        keep = make_product(name="Keep")
        gone = make_product(name="Gone")
        _add(cart, keep)
        _add(cart, gone)

        current_domain.repository_for(Product).delete(gone.id)

        lines = current_domain.repository_for(Cart).items_with_products(cart.id)
        assert [line.name for line in lines] == ["Keep"]

    def test_unknown_cart_has_no_lines(self):
        assert current_domain.repository_for(Cart).items_with_products("missing") == []
