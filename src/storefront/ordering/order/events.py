"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was converted into an order; prices are now frozen."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    total_amount: Float(required=True)
    item_count: Integer(required=True)
    order_date: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True, max_length=20, sanitize=False)
    new_status: String(required=True, max_length=20, sanitize=False)
    changed_at: DateTime(required=True)
