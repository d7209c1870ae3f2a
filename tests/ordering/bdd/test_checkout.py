"""BDD tests for checking out a cart."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

from storefront.catalogue.product.management import UpdateProduct
from storefront.catalogue.product.product import Product
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.management import AddToCart
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder

scenarios("features/checkout.feature")


@pytest.fixture()
def products():
    return {}


@pytest.fixture()
def error():
    return {}


@pytest.fixture()
def outcome():
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a customer "{username}"'), target_fixture="customer")
def _(make_user, username):
    return make_user(username=username)


@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'))
def _(make_product, products, name, price, stock):
    products[name] = make_product(name=name, price=price, stock=stock)


@given(parsers.cfparse('the cart holds {qty:d} of "{name}"'))
def _(customer, products, qty, name):
    cart = current_domain.repository_for(Cart).get_or_create(customer.id)
    current_domain.process(
        AddToCart(cart_id=cart.id, product_id=products[name].id, quantity=qty),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the customer checks out to "{address}"'))
def _(customer, address, outcome, error):
    cart = current_domain.repository_for(Cart).get_or_create(customer.id)
    try:
        outcome["order_id"] = current_domain.process(
            PlaceOrder(user_id=customer.id, cart_id=cart.id, shipping_address=address),
            asynchronous=False,
        )
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse('the price of "{name}" changes to {price:f}'))
def _(products, name, price):
    current_domain.process(UpdateProduct(product_id=products[name].id, price=price), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("an order is placed with total {total:f}"))
def _(outcome, total):
    order = current_domain.repository_for(Order).get(outcome["order_id"])
    assert order.total_amount == total


@then(parsers.cfparse('the order status is "{status}"'))
def _(outcome, status):
    assert current_domain.repository_for(Order).get(outcome["order_id"]).status == status


@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def _(products, name, stock):
    assert current_domain.repository_for(Product).get(products[name].id).stock == stock


@then("the cart is empty")
def _(customer):
    cart = current_domain.repository_for(Cart).find_by_user(customer.id)
    assert current_domain.repository_for(Cart).cart_items(cart.id) == []


@then(parsers.cfparse("the cart still has {count:d} items"))
def _(customer, count):
    cart = current_domain.repository_for(Cart).find_by_user(customer.id)
    assert len(current_domain.repository_for(Cart).cart_items(cart.id)) == count


@then("no order is placed")
def _(outcome):
    assert outcome.get("order_id") is None
    assert current_domain.repository_for(Order).count() == 0


@then("the checkout is rejected for insufficient stock")
def _(error):
    assert "stock" in error["exc"].messages


@then(parsers.cfparse("the order total is still {total:f}"))
def _(outcome, total):
    assert current_domain.repository_for(Order).get(outcome["order_id"]).total_amount == total


@then(parsers.cfparse('the order line for "{name}" shows a price change'))
def _(outcome, name):
    lines = current_domain.repository_for(Order).items_with_products(outcome["order_id"])
    [line] = [line for line in lines if line.name == name]
    assert line.price_changed
