"""Repository for the Cart aggregate and its items."""

from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart
from storefront.ordering.lines import CartLine
from storefront.shared.repository import CrudRepository


@storefront.repository(part_of=Cart)
class CartRepository(CrudRepository):
    def find_by_user(self, user_id) -> Cart | None:
        if user_id is None:
            return None
        return self._dao.query.filter(user_id=user_id).all().first

    def get_or_create(self, user_id) -> Cart:
        cart = self.find_by_user(user_id)
        if cart is None:
            cart = self.create(user_id=user_id)
        return cart

    def cart_items(self, cart_id) -> list:
        cart = self.find_by_id(cart_id)
        return list(cart.items) if cart else []

    def items_with_products(self, cart_id) -> list[CartLine]:
        """Cart items joined with current product data.

        Items whose product has since been deleted are left out.
        """
        product_repo = current_domain.repository_for(Product)
        lines = []
        for item in sorted(self.cart_items(cart_id), key=lambda i: i.created_at):
            product = product_repo.find_by_id(item.product_id)
            if product is not None:
                lines.append(CartLine.from_item(item, product))
        return lines

    def add_item(self, cart_id, product_id, quantity=1) -> Cart:
        cart = self.get(cart_id)
        product = current_domain.repository_for(Product).get(product_id)
        cart.add_item(product.id, quantity)
        self.add(cart)
        return self.get(cart_id)

    def update_item_quantity(self, cart_id, item_id, quantity) -> Cart:
        cart = self.get(cart_id)
        cart.update_item_quantity(item_id, quantity)
        self.add(cart)
        return self.get(cart_id)

    def remove_item(self, cart_id, item_id) -> Cart:
        cart = self.get(cart_id)
        cart.remove_item(item_id)
        self.add(cart)
        return self.get(cart_id)

    def clear_cart(self, cart_id) -> Cart:
        cart = self.get(cart_id)
        cart.clear()
        self.add(cart)
        return self.get(cart_id)

    def carts_holding(self, product_id) -> list:
        """Carts with an item for ``product_id``."""
        return [cart for cart in self._dao.query.all().items if cart.item_for_product(product_id)]
