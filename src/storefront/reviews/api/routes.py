"""FastAPI endpoints for product reviews."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.reviews.api.schemas import (
    ReviewIdResponse,
    ReviewResponse,
    ReviewSummaryResponse,
    SubmitReviewRequest,
)
from storefront.reviews.review.repository import RATING_LEVELS
from storefront.reviews.review.review import Review
from storefront.reviews.review.submission import SubmitReview

review_router = APIRouter(prefix="/products", tags=["reviews"])


def _review(review) -> ReviewResponse:
    return ReviewResponse(
        review_id=str(review.id),
        product_id=str(review.product_id),
        user_id=str(review.user_id),
        username=review.username,
        rating=review.rating,
        title=review.title,
        comment=review.comment,
        verified_purchase=review.verified_purchase,
        created_at=review.created_at,
    )


@review_router.get("/{product_id}/reviews", response_model=list[ReviewResponse])
async def list_product_reviews(product_id: str) -> list[ReviewResponse]:
    product = current_domain.repository_for(Product).get(product_id)
    return [_review(r) for r in current_domain.repository_for(Review).find_by_product(product.id)]


@review_router.get("/{product_id}/reviews/summary", response_model=ReviewSummaryResponse)
async def get_review_summary(product_id: str) -> ReviewSummaryResponse:
    product = current_domain.repository_for(Product).get(product_id)
    summary = current_domain.repository_for(Review).summary(product.id)
    return ReviewSummaryResponse(
        average_rating=summary.average_rating,
        total_reviews=summary.total_reviews,
        rating_distribution={level: summary.rating_distribution.get(level, 0) for level in RATING_LEVELS},
    )


@review_router.post("/{product_id}/reviews", status_code=201, response_model=ReviewIdResponse)
async def submit_review(product_id: str, body: SubmitReviewRequest) -> ReviewIdResponse:
    command = SubmitReview(
        product_id=product_id,
        user_id=body.user_id,
        rating=body.rating,
        title=body.title,
        comment=body.comment,
    )
    result = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=result)
