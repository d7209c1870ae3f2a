"""Repository for the Product aggregate."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.shared.repository import CrudRepository


@storefront.repository(part_of=Product)
class ProductRepository(CrudRepository):
    default_ordering = "name"

    def create(self, **data):
        self._ensure_category(data.get("category_id"))
        return super().create(**data)

    def update(self, identifier, **changes):
        if "category_id" in changes:
            self._ensure_category(changes["category_id"])
        return super().update(identifier, **changes)

    def find_by_category(self, category_id) -> list:
        return self._dao.query.filter(category_id=category_id).order_by("name").all().items

    def search(self, query: str) -> list:
        """Case-insensitive substring match over name and description."""
        needle = (query or "").strip().lower()
        if not needle:
            return self.find_all()

        return [
            product
            for product in self.find_all()
            if needle in product.name.lower() or needle in (product.description or "").lower()
        ]

    def _ensure_category(self, category_id) -> None:
        if category_id is None:
            raise ValidationError({"category_id": ["is required"]})
        if current_domain.repository_for(Category).find_by_id(category_id) is None:
            raise ValidationError({"category_id": [f"Category {category_id} does not exist"]})
