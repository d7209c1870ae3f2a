"""Repository for the Category aggregate."""

from storefront.catalogue.category.category import Category
from storefront.domain import storefront
from storefront.shared.repository import CrudRepository


@storefront.repository(part_of=Category)
class CategoryRepository(CrudRepository):
    default_ordering = "name"

    def find_by_name(self, name: str) -> Category | None:
        return self._dao.query.filter(name=name).all().first

    def products_in(self, category_id) -> list:
        """Products filed under the category, ordered by name."""
        from protean.utils.globals import current_domain

        from storefront.catalogue.product.product import Product

        return current_domain.repository_for(Product).find_by_category(category_id)
