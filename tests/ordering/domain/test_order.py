"""Tests for the Order aggregate and its status transitions."""

from types import SimpleNamespace

import pytest
from protean.exceptions import ValidationError

from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.ordering.order.order import Order, OrderStatus


def _line(product_id, quantity, price):
    return SimpleNamespace(product_id=product_id, quantity=quantity, price=price)


def _order(**overrides):
    data = {
        "user_id": "user-001",
        "lines": [_line("prod-a", 2, 10.0), _line("prod-b", 1, 5.0)],
        "shipping_address": "123 Main St, Anytown",
    }
    data.update(overrides)
    return Order.create(**data)


class TestOrderCreation:
    def test_total_is_sum_of_lines(self):
        order = _order()
        assert order.total_amount == 25.0
        assert len(order.items) == 2

    def test_item_prices_are_copied(self):
        order = _order()
        prices = {i.product_id: i.price for i in order.items}
        assert prices == {"prod-a": 10.0, "prod-b": 5.0}

    def test_total_uses_fixed_point(self):
        order = _order(lines=[_line("prod-a", 3, 0.1)])
        assert order.total_amount == 0.3

    def test_new_order_is_pending(self):
        order = _order()
        assert order.status == OrderStatus.PENDING.value
        assert order.order_date is not None
        assert order.shipping_address == "123 Main St, Anytown"

    def test_order_needs_items(self):
        with pytest.raises(ValidationError):
            _order(lines=[])

    def test_create_raises_event(self):
        event = _order()._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.total_amount == 25.0
        assert event.item_count == 2


class TestStatusTransitions:
    @pytest.mark.parametrize(
        "path",
        [
            ["processing", "shipped", "delivered"],
            ["cancelled"],
            ["processing", "cancelled"],
        ],
    )
    def test_allowed_paths(self, path):
        order = _order()
        for status in path:
            order.transition_to(status)
        assert order.status == path[-1]

    @pytest.mark.parametrize(
        "path,rejected",
        [
            ([], "shipped"),
            ([], "delivered"),
            (["processing", "shipped"], "cancelled"),
            (["processing", "shipped", "delivered"], "pending"),
            (["cancelled"], "processing"),
        ],
    )
    def test_rejected_transitions(self, path, rejected):
        order = _order()
        for status in path:
            order.transition_to(status)

        with pytest.raises(ValidationError) as exc:
            order.transition_to(rejected)
        assert "status" in exc.value.messages

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            _order().transition_to("lost")

    def test_transition_raises_event(self):
        order = _order()
        order._events.clear()

        order.transition_to("processing")

        event = order._events[-1]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "pending"
        assert event.new_status == "processing"

    def test_can_transition_to(self):
        order = _order()
        assert order.can_transition_to("processing")
        assert not order.can_transition_to("delivered")


class TestImmutability:
    def test_only_status_can_be_updated(self):
        with pytest.raises(ValidationError):
            _order().update_details(total_amount=1.0)

    def test_status_update_goes_through_state_machine(self):
        order = _order()
        order.update_details(status="processing")
        assert order.status == "processing"

    def test_contains_product(self):
        order = _order()
        assert order.contains_product("prod-a")
        assert not order.contains_product("prod-z")
