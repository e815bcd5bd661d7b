"""Tests for review statistics aggregation."""

from datetime import datetime, timedelta, timezone

import pytest

from src.models import Review
from src.utils.review_stats import calculate_review_stats, round_half_up

BASE_TIME = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def make_review(review_id: str, rating: int, days_ago: int = 0, helpful: int = 0) -> Review:
    return Review(
        id=review_id,
        name=f"User {review_id}",
        email=f"{review_id}@example.com",
        rating=rating,
        title=f"Title {review_id}",
        comment=f"Comment {review_id}",
        timestamp=BASE_TIME - timedelta(days=days_ago),
        helpful=helpful,
    )


class TestReviewStats:
    def test_empty_collection(self):
        """Test stats for no reviews."""
        stats = calculate_review_stats([])

        assert stats.total_reviews == 0
        assert stats.average_rating == 0
        assert stats.rating_distribution == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
        assert stats.recent_reviews == []

    def test_average_and_distribution(self):
        """Test average rating and per-star counts."""
        reviews = [make_review("a", 5), make_review("b", 4), make_review("c", 4), make_review("d", 2)]

        stats = calculate_review_stats(reviews)

        assert stats.total_reviews == 4
        assert stats.average_rating == 3.8
        assert stats.rating_distribution == {1: 0, 2: 1, 3: 0, 4: 2, 5: 1}
        assert sum(stats.rating_distribution.values()) == stats.total_reviews

    def test_average_rounds_half_up(self):
        """Test that a mean of x.x5 rounds up."""
        reviews = [make_review("a", 5), make_review("b", 4), make_review("c", 4), make_review("d", 4)]

        stats = calculate_review_stats(reviews)

        assert stats.average_rating == 4.3

    def test_out_of_range_rating_not_bucketed(self):
        """Test that out-of-range ratings are counted but not bucketed."""
        reviews = [make_review("a", 5), make_review("b", 7)]

        stats = calculate_review_stats(reviews)

        assert stats.total_reviews == 2
        assert sum(stats.rating_distribution.values()) == 1
        assert 7 not in stats.rating_distribution

    def test_recent_reviews_newest_first(self):
        """Test the five most recent reviews are returned newest first."""
        reviews = [make_review(str(i), 3, days_ago=i) for i in (4, 0, 6, 2, 1, 5, 3)]

        stats = calculate_review_stats(reviews)

        assert [r.id for r in stats.recent_reviews] == ["0", "1", "2", "3", "4"]

    def test_recent_reviews_fewer_than_limit(self):
        """Test recent reviews when there are fewer than five."""
        reviews = [make_review("old", 3, days_ago=3), make_review("new", 3, days_ago=1)]

        stats = calculate_review_stats(reviews)

        assert [r.id for r in stats.recent_reviews] == ["new", "old"]

    def test_input_order_preserved(self):
        """Test that computing stats does not reorder the caller's list."""
        reviews = [make_review("old", 3, days_ago=5), make_review("new", 4, days_ago=1)]

        calculate_review_stats(reviews)

        assert [r.id for r in reviews] == ["old", "new"]

    def test_stats_serialize_with_camel_case_keys(self):
        """Test the wire format of stats."""
        stats = calculate_review_stats([make_review("a", 5)]).to_json_dict()

        assert set(stats) == {"totalReviews", "averageRating", "ratingDistribution", "recentReviews"}
        assert stats["recentReviews"][0]["id"] == "a"

    @pytest.mark.parametrize(
        "value,expected",
        [(4.25, 4.3), (4.24, 4.2), (3.0, 3.0), (4.75, 4.8)],
    )
    def test_round_half_up(self, value, expected):
        """Test half-up rounding to one decimal."""
        assert round_half_up(value) == expected
