"""Cart aggregate: one per user, created on first use and never deleted.

A cart holds at most one item per product. Adding a product that is already
in the cart tops up the existing item, and setting a quantity of zero or
less removes the item instead of storing it.
"""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.domain import storefront
from storefront.ordering.cart.events import (
    CartCleared,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)


@storefront.entity(part_of="Cart", schema_name="cart_item")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)


@storefront.aggregate(schema_name="cart")
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def create(cls, user_id):
        now = datetime.now()
        cart = cls(user_id=user_id, created_at=now, updated_at=now)
        cart.raise_(CartCreated(cart_id=cart.id, user_id=user_id))
        return cart

    def item_for_product(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def _find_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})
        return item

    def add_item(self, product_id, quantity=1):
        """Add ``quantity`` of a product, merging with an existing line."""
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now()
        existing = self.item_for_product(product_id)
        if existing:
            existing.quantity += quantity
            existing.updated_at = now
            item = existing
        else:
            item = CartItem(product_id=product_id, quantity=quantity, created_at=now, updated_at=now)
            self.add_items(item)

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=self.id,
                item_id=item.id,
                product_id=product_id,
                quantity=quantity,
                new_quantity=item.quantity,
            )
        )
        return item

    def update_item_quantity(self, item_id, quantity):
        """Set an item's quantity; zero or less removes the item."""
        item = self._find_item(item_id)
        if quantity is None or quantity <= 0:
            self.remove_item(item_id)
            return

        previous_quantity = item.quantity
        now = datetime.now()
        item.quantity = quantity
        item.updated_at = now
        self.updated_at = now

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=self.id,
                item_id=item.id,
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_item(self, item_id):
        item = self._find_item(item_id)
        self.remove_items(item)
        self.updated_at = datetime.now()

        self.raise_(CartItemRemoved(cart_id=self.id, item_id=item.id, product_id=item.product_id))

    def clear(self):
        removed = list(self.items)
        for item in removed:
            self.remove_items(item)
        self.updated_at = datetime.now()

        self.raise_(CartCleared(cart_id=self.id, items_removed=len(removed)))

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)
