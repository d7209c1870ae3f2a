"""Repository for the Review aggregate, including rating aggregates."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.reviews.review.review import Review
from storefront.shared.repository import CrudRepository

RATING_LEVELS = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class ReviewSummary:
    average_rating: float
    total_reviews: int
    rating_distribution: dict[int, int] = field(default_factory=dict)


@storefront.repository(part_of=Review)
class ReviewRepository(CrudRepository):
    default_ordering = "-created_at"

    def find_by_product(self, product_id) -> list:
        return self._dao.query.filter(product_id=product_id).order_by("-created_at").all().items

    def find_by_user(self, user_id) -> list:
        return self._dao.query.filter(user_id=user_id).order_by("-created_at").all().items

    def average_rating(self, product_id) -> float:
        """Mean rating rounded to two places; 0 when the product has no reviews."""
        ratings = [review.rating for review in self.find_by_product(product_id)]
        if not ratings:
            return 0.0
        mean = Decimal(sum(ratings)) / Decimal(len(ratings))
        return float(mean.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    def rating_distribution(self, product_id) -> dict[int, int]:
        distribution = dict.fromkeys(RATING_LEVELS, 0)
        for review in self.find_by_product(product_id):
            distribution[review.rating] += 1
        return distribution

    def summary(self, product_id) -> ReviewSummary:
        distribution = self.rating_distribution(product_id)
        return ReviewSummary(
            average_rating=self.average_rating(product_id),
            total_reviews=sum(distribution.values()),
            rating_distribution=distribution,
        )

    def has_user_reviewed(self, user_id, product_id) -> bool:
        return self._dao.query.filter(user_id=user_id, product_id=product_id).all().total > 0

    def is_verified_purchase(self, user_id, product_id) -> bool:
        return current_domain.repository_for(Order).has_purchased(user_id, product_id)

    def recent(self, limit: int = 10) -> list:
        return self._dao.query.order_by("-created_at").limit(limit).all().items
