"""Read-side join types pairing cart and order items with their products."""

from dataclasses import dataclass
from decimal import Decimal

from storefront.shared.money import as_decimal, line_total


@dataclass(frozen=True)
class CartLine:
    """A cart item together with the product it points at.

    ``price`` is the product's live price, so a cart line always reflects
    what the customer would pay right now.
    """

    item_id: str
    product_id: str
    quantity: int
    name: str
    price: float
    stock: int
    image_url: str | None = None

    @property
    def line_total(self) -> Decimal:
        return line_total(self.price, self.quantity)

    @classmethod
    def from_item(cls, item, product):
        return cls(
            item_id=str(item.id),
            product_id=str(product.id),
            quantity=item.quantity,
            name=product.name,
            price=product.price,
            stock=product.stock,
            image_url=product.image_url,
        )


@dataclass(frozen=True)
class OrderLine:
    """An order item with the purchased product's current details.

    ``price`` is the frozen purchase price; ``current_price`` is today's.
    """

    item_id: str
    product_id: str
    quantity: int
    price: float
    name: str
    current_price: float
    image_url: str | None = None

    @property
    def line_total(self) -> Decimal:
        return line_total(self.price, self.quantity)

    @property
    def price_changed(self) -> bool:
        return as_decimal(self.price) != as_decimal(self.current_price)

    @classmethod
    def from_item(cls, item, product):
        return cls(
            item_id=str(item.id),
            product_id=str(product.id),
            quantity=item.quantity,
            price=item.price,
            name=product.name,
            current_price=product.price,
            image_url=product.image_url,
        )
