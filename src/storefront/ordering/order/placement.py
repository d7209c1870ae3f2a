"""Order placement: converting a user's cart into an order.

Every line is checked against stock before anything is written. The handler
runs inside a single unit of work, so stock decrements, the new order and the
cart clear are committed together or not at all; if any step raises, the unit
of work rolls everything back and the cart is left as it was.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart
from storefront.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier(required=True)
    cart_id: Identifier(required=True)
    shipping_address: Text(sanitize=False)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        """Returns the new order's id, or ``None`` when the cart is empty."""
        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.get(command.cart_id)
        if str(cart.user_id) != str(command.user_id):
            raise ValidationError({"cart_id": ["Cart does not belong to this user"]})

        lines = cart_repo.items_with_products(cart.id)
        if not lines:
            logger.info("order_not_placed_empty_cart", cart_id=str(cart.id), user_id=str(command.user_id))
            return None

        try:
            product_repo = current_domain.repository_for(Product)
            products = []
            for line in lines:
                product = product_repo.get(line.product_id)
                product.decrement_stock(line.quantity)
                products.append(product)

            order = Order.create(
                user_id=command.user_id,
                lines=lines,
                shipping_address=command.shipping_address,
            )
            current_domain.repository_for(Order).add(order)
            for product in products:
                product_repo.add(product)

            cart.clear()
            cart_repo.add(cart)
        except Exception:
            logger.exception("order_placement_failed", cart_id=str(cart.id), user_id=str(command.user_id))
            raise

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total_amount=order.total_amount,
            item_count=len(lines),
        )
        return str(order.id)
