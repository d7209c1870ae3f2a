"""Tests for the Product aggregate root."""

import pytest
from protean.exceptions import ValidationError

from storefront.catalogue.product.events import (
    ProductCreated,
    ProductDetailsUpdated,
    ProductPriceChanged,
    StockAdjusted,
)
from storefront.catalogue.product.product import Product


def _product(**overrides):
    data = {"name": "Smartphone X", "price": 699.99, "category_id": "cat-001", "stock": 10}
    data.update(overrides)
    return Product.create(**data)


class TestProductCreation:
    def test_create_product(self):
        product = _product(description="Latest smartphone", image_url="/images/products/smartphone.jpg")
        assert product.name == "Smartphone X"
        assert product.price == 699.99
        assert product.stock == 10
        assert product.image_url == "/images/products/smartphone.jpg"
        assert product.category_id == "cat-001"

    def test_stock_defaults_to_zero(self):
        product = Product.create(name="Blender", price=49.99, category_id="cat-001")
        assert product.stock == 0

    def test_price_is_rounded_to_cents(self):
        assert _product(price=19.999).price == 20.0

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            _product(price=-1)

    def test_negative_stock_is_rejected(self):
        with pytest.raises(ValidationError):
            _product(stock=-1)

    def test_category_is_required(self):
        with pytest.raises(ValidationError):
            _product(category_id=None)

    def test_create_raises_event(self):
        product = _product()
        assert isinstance(product._events[0], ProductCreated)
        assert product._events[0].price == 699.99


class TestProductUpdate:
    def test_partial_update(self):
        product = _product(description="Original")
        product.update_details(name="Smartphone X2")

        assert product.name == "Smartphone X2"
        assert product.description == "Original"
        assert product.price == 699.99

    def test_price_change_raises_price_event(self):
        product = _product()
        product._events.clear()

        product.update_details(price=649.99)

        price_events = [e for e in product._events if isinstance(e, ProductPriceChanged)]
        assert len(price_events) == 1
        assert price_events[0].previous_price == 699.99
        assert price_events[0].new_price == 649.99

    def test_unchanged_price_raises_no_price_event(self):
        product = _product()
        product._events.clear()

        product.update_details(description="New copy")

        assert any(isinstance(e, ProductDetailsUpdated) for e in product._events)
        assert not any(isinstance(e, ProductPriceChanged) for e in product._events)

    def test_unknown_field_is_rejected(self):
        with pytest.raises(ValidationError):
            _product().update_details(sku="ABC")


class TestStockDecrement:
    def test_decrement_stock(self):
        product = _product(stock=5)
        product.decrement_stock(2)
        assert product.stock == 3

    def test_decrement_to_zero(self):
        product = _product(stock=2)
        product.decrement_stock(2)
        assert product.stock == 0

    def test_decrement_beyond_stock_is_rejected(self):
        product = _product(stock=2)
        with pytest.raises(ValidationError) as exc:
            product.decrement_stock(3)
        assert "stock" in exc.value.messages
        assert product.stock == 2

    def test_non_positive_quantity_is_rejected(self):
        with pytest.raises(ValidationError):
            _product().decrement_stock(0)

    def test_decrement_raises_stock_event(self):
        product = _product(stock=5)
        product._events.clear()

        product.decrement_stock(2)

        event = product._events[-1]
        assert isinstance(event, StockAdjusted)
        assert event.previous_stock == 5
        assert event.new_stock == 3
        assert event.reason == "order_placed"
