"""Tests for the Category aggregate root."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields

from storefront.catalogue.category.category import Category
from storefront.catalogue.category.events import CategoryCreated, CategoryUpdated


class TestCategoryConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Category.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Category)
        for name in ("name", "description", "created_at", "updated_at"):
            assert name in fields

    def test_create_category(self):
        category = Category.create(name="Electronics", description="Electronic devices and gadgets")
        assert category.name == "Electronics"
        assert category.description == "Electronic devices and gadgets"
        assert category.created_at is not None
        assert category.updated_at == category.created_at

    def test_name_is_required(self):
        with pytest.raises(ValidationError) as exc:
            Category.create(name=None)
        assert "name" in exc.value.messages

    def test_name_length_is_limited(self):
        with pytest.raises(ValidationError):
            Category.create(name="x" * 101)

    def test_create_raises_event(self):
        category = Category.create(name="Electronics")
        assert len(category._events) == 1
        event = category._events[0]
        assert isinstance(event, CategoryCreated)
        assert event.name == "Electronics"


class TestCategoryUpdate:
    def test_update_details(self):
        category = Category.create(name="Electronics")
        category._events.clear()

        category.update_details(description="Gadgets")

        assert category.name == "Electronics"
        assert category.description == "Gadgets"
        assert isinstance(category._events[-1], CategoryUpdated)

    def test_unknown_field_is_rejected(self):
        category = Category.create(name="Electronics")
        with pytest.raises(ValidationError) as exc:
            category.update_details(colour="blue")
        assert "colour" in exc.value.messages
