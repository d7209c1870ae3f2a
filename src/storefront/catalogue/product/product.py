"""Product aggregate root."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.catalogue.product.events import (
    ProductCreated,
    ProductDetailsUpdated,
    ProductPriceChanged,
    StockAdjusted,
)
from storefront.domain import storefront
from storefront.shared.money import to_amount

_EDITABLE_FIELDS = ("name", "description", "price", "stock", "image_url", "category_id")


@storefront.aggregate(schema_name="product")
class Product:
    """A sellable item with a live price and an on-hand stock count."""

    name: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(required=True, min_value=0.0)
    stock: Integer(default=0, min_value=0)
    image_url: String(max_length=500, sanitize=False)
    category_id: Identifier(required=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, price, category_id, description=None, stock=0, image_url=None):
        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=to_amount(price),
            stock=stock,
            image_url=image_url,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                category_id=product.category_id,
                name=product.name,
                price=product.price,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        unknown = sorted(set(changes) - set(_EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in unknown})

        previous_price = self.price
        previous_stock = self.stock
        if "price" in changes:
            changes["price"] = to_amount(changes["price"])

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now()

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                description=self.description,
                image_url=self.image_url,
                category_id=self.category_id,
            )
        )
        if self.price != previous_price:
            self.raise_(
                ProductPriceChanged(
                    product_id=self.id,
                    previous_price=previous_price,
                    new_price=self.price,
                    changed_at=self.updated_at,
                )
            )
        if self.stock != previous_stock:
            self.raise_(
                StockAdjusted(
                    product_id=self.id,
                    previous_stock=previous_stock,
                    new_stock=self.stock,
                    reason="manual",
                )
            )

    def decrement_stock(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock, refusing to go below zero."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.stock:
            raise ValidationError(
                {"stock": [f"Insufficient stock for {self.name}: requested {quantity}, available {self.stock}"]}
            )

        previous_stock = self.stock
        self.stock = previous_stock - quantity
        self.updated_at = datetime.now()

        self.raise_(
            StockAdjusted(
                product_id=self.id,
                previous_stock=previous_stock,
                new_stock=self.stock,
                reason="order_placed",
            )
        )
