"""Repository for the Order aggregate and its items."""

from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.lines import OrderLine
from storefront.ordering.order.order import Order, OrderStatus
from storefront.shared.repository import CrudRepository


@storefront.repository(part_of=Order)
class OrderRepository(CrudRepository):
    default_ordering = "-created_at"

    def find_by_user(self, user_id) -> list:
        if user_id is None:
            return []
        return self._dao.query.filter(user_id=user_id).order_by("-created_at").all().items

    def order_items(self, order_id) -> list:
        order = self.find_by_id(order_id)
        return list(order.items) if order else []

    def items_with_products(self, order_id) -> list[OrderLine]:
        product_repo = current_domain.repository_for(Product)
        lines = []
        for item in sorted(self.order_items(order_id), key=lambda i: i.created_at):
            product = product_repo.find_by_id(item.product_id)
            if product is not None:
                lines.append(OrderLine.from_item(item, product))
        return lines

    def update_status(self, order_id, status) -> Order | None:
        return self.update(order_id, status=status)

    def has_purchased(self, user_id, product_id) -> bool:
        """True when any of the user's non-cancelled orders includes the product."""
        return any(
            order.contains_product(product_id)
            for order in self.find_by_user(user_id)
            if order.status != OrderStatus.CANCELLED.value
        )

    def orders_containing(self, product_id) -> list:
        return [order for order in self.find_all() if order.contains_product(product_id)]
