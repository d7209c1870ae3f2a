"""SubmitReview: post a review for a product.

A user may review a given product once. The review is flagged as a verified
purchase when one of the user's orders contains the product.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.identity.user.user import User
from storefront.reviews.review.review import Review


@storefront.command(part_of="Review")
class SubmitReview:
    product_id = Identifier(required=True)
    user_id = Identifier(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)
    title = String(max_length=200, sanitize=False)
    comment = Text(sanitize=False)


@storefront.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        user = current_domain.repository_for(User).get(command.user_id)

        repo = current_domain.repository_for(Review)
        if repo.has_user_reviewed(user.id, product.id):
            raise ValidationError({"review": ["You have already reviewed this product"]})

        review = repo.create(
            product_id=product.id,
            user_id=user.id,
            username=user.username,
            rating=command.rating,
            title=command.title,
            comment=command.comment,
            verified_purchase=repo.is_verified_purchase(user.id, product.id),
        )
        return str(review.id)
