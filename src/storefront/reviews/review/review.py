"""Review aggregate: a customer's rating and comments on a product.

Reviews snapshot the reviewer's username at submission so listings do not
need a join, and carry a verified-purchase flag computed from the
reviewer's order history.
"""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.reviews.review.events import ReviewEdited, ReviewSubmitted

_EDITABLE_FIELDS = ("rating", "title", "comment")


@storefront.aggregate(schema_name="review")
class Review:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    username = String(required=True, max_length=50, sanitize=False)
    rating = Integer(required=True, min_value=1, max_value=5)
    title = String(max_length=200, sanitize=False)
    comment = Text(sanitize=False)
    verified_purchase = Boolean(default=False)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @invariant.post
    def title_must_not_be_blank(self):
        if self.title is not None and not self.title.strip():
            raise ValidationError({"title": ["Review title cannot be empty"]})

    @classmethod
    def create(cls, product_id, user_id, username, rating, title=None, comment=None, verified_purchase=False):
        now = datetime.now()
        review = cls(
            product_id=product_id,
            user_id=user_id,
            username=username,
            rating=rating,
            title=title,
            comment=comment,
            verified_purchase=verified_purchase,
            created_at=now,
            updated_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=review.id,
                product_id=product_id,
                user_id=user_id,
                rating=review.rating,
                title=title,
                verified_purchase=verified_purchase,
                submitted_at=now,
            )
        )
        return review

    def update_details(self, **changes):
        unknown = sorted(set(changes) - set(_EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in unknown})

        for field, value in changes.items():
            setattr(self, field, value)
        self.updated_at = datetime.now()

        self.raise_(
            ReviewEdited(
                review_id=self.id,
                rating=self.rating,
                title=self.title,
                edited_at=self.updated_at,
            )
        )
