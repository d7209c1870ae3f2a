"""Pydantic request/response schemas for the Reviews API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class SubmitReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1c2e3f4-0000-4000-8000-000000000001",
                    "rating": 5,
                    "title": "Does exactly what it says",
                    "comment": "Battery easily lasts two days.",
                }
            ]
        }
    }

    user_id: str
    rating: int = Field(..., ge=1, le=5)
    title: str | None = Field(None, max_length=200)
    comment: str | None = None


class ReviewResponse(BaseModel):
    review_id: str
    product_id: str
    user_id: str
    username: str
    rating: int
    title: str | None = None
    comment: str | None = None
    verified_purchase: bool = False
    created_at: datetime | None = None


class ReviewSummaryResponse(BaseModel):
    average_rating: float
    total_reviews: int
    rating_distribution: dict[int, int]


class ReviewIdResponse(BaseModel):
    review_id: str
