"""Cart management: commands and handlers."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart


@storefront.command(part_of="Cart")
class AddToCart:
    cart_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(default=1, min_value=1)


@storefront.command(part_of="Cart")
class UpdateCartItemQuantity:
    """Zero or a negative quantity removes the item."""

    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)
    quantity: Integer(required=True)


@storefront.command(part_of="Cart")
class RemoveCartItem:
    cart_id: Identifier(required=True)
    item_id: Identifier(required=True)


@storefront.command(part_of="Cart")
class ClearCart:
    cart_id: Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        cart = current_domain.repository_for(Cart).add_item(command.cart_id, command.product_id, command.quantity)
        item = cart.item_for_product(command.product_id)
        return str(item.id)

    @handle(UpdateCartItemQuantity)
    def update_quantity(self, command):
        current_domain.repository_for(Cart).update_item_quantity(command.cart_id, command.item_id, command.quantity)

    @handle(RemoveCartItem)
    def remove_item(self, command):
        current_domain.repository_for(Cart).remove_item(command.cart_id, command.item_id)

    @handle(ClearCart)
    def clear_cart(self, command):
        current_domain.repository_for(Cart).clear_cart(command.cart_id)
