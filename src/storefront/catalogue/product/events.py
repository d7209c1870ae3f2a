"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    __version__ = 1

    product_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True, max_length=255, sanitize=False)
    price: Float(required=True)
    stock: Integer(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True, max_length=255, sanitize=False)
    description: String(sanitize=False)
    image_url: String(max_length=500, sanitize=False)
    category_id: Identifier(required=True)


@storefront.event(part_of="Product")
class ProductPriceChanged:
    """Emitted whenever the live price moves; order lines keep their old price."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_price: Float(required=True)
    new_price: Float(required=True)
    changed_at: DateTime(required=True)


@storefront.event(part_of="Product")
class StockAdjusted:
    __version__ = 1

    product_id: Identifier(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
    reason: String(max_length=50, sanitize=False)
