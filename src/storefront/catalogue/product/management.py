"""Product management: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart
from storefront.ordering.order.order import Order


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(required=True, min_value=0.0)
    stock: Integer(default=0, min_value=0)
    image_url: String(max_length=500, sanitize=False)
    category_id: Identifier(required=True)


@storefront.command(part_of="Product")
class UpdateProduct:
    """Partial update: fields left unset keep their stored values."""

    product_id: Identifier(required=True)
    name: String(max_length=255, sanitize=False)
    description: Text(sanitize=False)
    price: Float(min_value=0.0)
    stock: Integer(min_value=0)
    image_url: String(max_length=500, sanitize=False)
    category_id: Identifier()


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = current_domain.repository_for(Product).create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
            image_url=command.image_url,
            category_id=command.category_id,
        )
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = {
            field: getattr(command, field)
            for field in ("name", "description", "price", "stock", "image_url", "category_id")
            if getattr(command, field) is not None
        }
        repo.update(product.id, **changes)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if current_domain.repository_for(Order).orders_containing(product.id):
            raise ValidationError({"product_id": ["Product appears in orders and cannot be deleted"]})
        if current_domain.repository_for(Cart).carts_holding(product.id):
            raise ValidationError({"product_id": ["Product is in a cart and cannot be deleted"]})

        repo.delete(product.id)
