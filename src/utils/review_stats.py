"""Aggregate statistics over a review collection."""

import math
from collections.abc import Sequence

from src.models import Review, ReviewStats

RATING_VALUES = range(1, 6)
RECENT_REVIEWS_LIMIT = 5


def round_half_up(value: float, digits: int = 1) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def calculate_review_stats(reviews: Sequence[Review]) -> ReviewStats:
    """
    Compute summary statistics for a list of reviews.

    Ratings outside 1..5 count towards the total and the average but land in
    no distribution bucket. The input sequence is not reordered.
    """
    total_reviews = len(reviews)
    average_rating = sum(review.rating for review in reviews) / total_reviews if total_reviews else 0

    rating_distribution = {rating: 0 for rating in RATING_VALUES}
    for review in reviews:
        if review.rating in rating_distribution:
            rating_distribution[review.rating] += 1

    recent_reviews = sorted(reviews, key=lambda review: review.timestamp, reverse=True)[:RECENT_REVIEWS_LIMIT]

    return ReviewStats(
        total_reviews=total_reviews,
        average_rating=round_half_up(average_rating),
        rating_distribution=rating_distribution,
        recent_reviews=recent_reviews,
    )
