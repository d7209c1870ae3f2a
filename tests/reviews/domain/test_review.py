"""Tests for the Review aggregate."""

import pytest
from protean.exceptions import ValidationError

from storefront.reviews.review.events import ReviewEdited, ReviewSubmitted
from storefront.reviews.review.review import Review


def _review(**overrides):
    data = {
        "product_id": "prod-001",
        "user_id": "user-001",
        "username": "johndoe",
        "rating": 4,
        "title": "Solid",
        "comment": "Works as described.",
    }
    data.update(overrides)
    return Review.create(**data)


class TestReviewCreation:
    def test_create_review(self):
        review = _review()
        assert review.rating == 4
        assert review.username == "johndoe"
        assert review.verified_purchase is False
        assert review.created_at is not None

    def test_create_raises_event(self):
        event = _review(verified_purchase=True)._events[0]
        assert isinstance(event, ReviewSubmitted)
        assert event.rating == 4
        assert event.verified_purchase is True

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError) as exc:
            _review(rating=rating)
        assert "rating" in exc.value.messages

    def test_rating_is_required(self):
        with pytest.raises(ValidationError):
            _review(rating=None)

    def test_title_and_comment_are_optional(self):
        review = _review(title=None, comment=None)
        assert review.title is None
        assert review.comment is None

    def test_blank_title_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _review(title="   ")
        assert "title" in exc.value.messages

    def test_long_title_is_rejected(self):
        with pytest.raises(ValidationError):
            _review(title="x" * 201)


class TestReviewEditing:
    def test_edit_rating_and_title(self):
        review = _review()
        review._events.clear()

        review.update_details(rating=2, title="Changed my mind")

        assert review.rating == 2
        assert review.title == "Changed my mind"
        assert isinstance(review._events[-1], ReviewEdited)

    def test_reviewer_cannot_be_changed(self):
        with pytest.raises(ValidationError):
            _review().update_details(user_id="someone-else")
