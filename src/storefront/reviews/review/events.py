"""Domain events for the Review aggregate."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Review")
class ReviewSubmitted:
    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    user_id: Identifier(required=True)
    rating: Integer(required=True)
    title: String(max_length=200, sanitize=False)
    verified_purchase: Boolean(default=False)
    submitted_at: DateTime(required=True)


@storefront.event(part_of="Review")
class ReviewEdited:
    __version__ = 1

    review_id: Identifier(required=True)
    rating: Integer(required=True)
    title: String(max_length=200, sanitize=False)
    edited_at: DateTime(required=True)
