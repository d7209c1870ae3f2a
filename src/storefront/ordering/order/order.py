"""Order aggregate: an immutable record of a purchase.

Line prices are copied from the products when the order is placed and the
total is computed once from those copies. After that only the status moves,
along the transitions in ``_TRANSITIONS``.
"""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.shared.money import as_decimal, line_total, sum_amounts, to_amount


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


@storefront.entity(part_of="Order", schema_name="order_item")
class OrderItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)


@storefront.aggregate(schema_name="order_table")
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total_amount = Float(required=True, min_value=0.0)
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    shipping_address = Text(sanitize=False)
    order_date = DateTime(default=datetime.now)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @invariant.post
    def total_must_match_items(self):
        if not self.items:
            return
        expected = sum_amounts(line_total(i.price, i.quantity) for i in self.items)
        if as_decimal(self.total_amount) != expected:
            raise ValidationError({"total_amount": ["Total must equal the sum of item price × quantity"]})

    @classmethod
    def create(cls, user_id, lines, shipping_address=None):
        """Build an order from purchase lines.

        Each line exposes ``product_id``, ``quantity`` and ``price``; the
        price becomes the item's frozen purchase price.
        """
        lines = list(lines)
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now()
        items = [
            OrderItem(
                product_id=line.product_id,
                quantity=line.quantity,
                price=to_amount(line.price),
                created_at=now,
                updated_at=now,
            )
            for line in lines
        ]
        total = sum_amounts(line_total(item.price, item.quantity) for item in items)

        order = cls(
            user_id=user_id,
            items=items,
            total_amount=float(total),
            status=OrderStatus.PENDING.value,
            shipping_address=shipping_address,
            order_date=now,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                total_amount=order.total_amount,
                item_count=len(items),
                order_date=now,
            )
        )
        return order

    def can_transition_to(self, status) -> bool:
        return OrderStatus(status) in _TRANSITIONS[OrderStatus(self.status)]

    def transition_to(self, status):
        try:
            target = OrderStatus(status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {status!r}"]}) from None

        current = OrderStatus(self.status)
        if target not in _TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot move an order from {current.value} to {target.value}"]})

        now = datetime.now()
        self.status = target.value
        self.updated_at = now
        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=current.value,
                new_status=target.value,
                changed_at=now,
            )
        )

    def update_details(self, **changes):
        """Only the status of a placed order may change."""
        unknown = sorted(set(changes) - {"status"})
        if unknown:
            raise ValidationError({field: ["Placed orders cannot be modified"] for field in unknown})
        if "status" in changes:
            self.transition_to(changes["status"])

    def contains_product(self, product_id) -> bool:
        return any(str(item.product_id) == str(product_id) for item in self.items)
