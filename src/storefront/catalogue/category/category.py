"""Category aggregate root for grouping products."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from storefront.catalogue.category.events import CategoryCreated, CategoryUpdated
from storefront.domain import storefront

_EDITABLE_FIELDS = ("name", "description")


@storefront.aggregate(schema_name="category")
class Category:
    """A named grouping of products shown in the storefront navigation."""

    name: String(required=True, max_length=100, sanitize=False)
    description: Text(sanitize=False)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, description=None):
        now = datetime.now()
        category = cls(
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                created_at=now,
            )
        )
        return category

    def update_details(self, **changes):
        unknown = sorted(set(changes) - set(_EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in unknown})

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now()

        self.raise_(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
            )
        )
