"""Category management: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100, sanitize=False)
    description: Text(sanitize=False)


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100, sanitize=False)
    description: Text(sanitize=False)


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = current_domain.repository_for(Category).create(
            name=command.name,
            description=command.description,
        )
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        changes = {
            field: getattr(command, field)
            for field in ("name", "description")
            if getattr(command, field) is not None
        }
        if changes:
            category.update_details(**changes)
            repo.add(category)

    @handle(DeleteCategory)
    def delete_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        if repo.products_in(category.id):
            raise ValidationError({"category_id": ["Category still has products and cannot be deleted"]})

        repo.delete(category.id)
