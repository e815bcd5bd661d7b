"""Client for browsing, searching and submitting reviews through the reviews API."""

import logging
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel

from src.models import Review, ReviewStats

logger = logging.getLogger(__name__)

REVIEWS_PATH = "/api/reviews"


class SortOrder(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    RATING = "rating"
    HELPFUL = "helpful"


class ReviewSubmitError(Exception):
    """The API rejected or failed to store a request."""


class ReviewPage(BaseModel):
    reviews: list[Review]
    stats: ReviewStats | None
    demo: bool = False
    error: str | None = None
    options: dict[str, list[str]] = {}


def filter_and_sort(
    reviews: list[Review], search: str = "", rating: int = 0, sort_by: SortOrder = SortOrder.NEWEST
) -> list[Review]:
    """
    Apply the list view's search box, star filter and sort selector.

    Args:
        reviews: Reviews as fetched from the API
        search: Case-insensitive text matched against title, comment and name
        rating: Exact star rating to keep, 0 for all
        sort_by: Sort order

    Returns:
        New filtered and sorted list
    """
    term = search.lower()
    matches = [
        review
        for review in reviews
        if (term in review.title.lower() or term in review.comment.lower() or term in review.name.lower())
        and (rating == 0 or review.rating == rating)
    ]

    if sort_by == SortOrder.NEWEST:
        return sorted(matches, key=lambda r: r.timestamp, reverse=True)
    if sort_by == SortOrder.OLDEST:
        return sorted(matches, key=lambda r: r.timestamp)
    if sort_by == SortOrder.RATING:
        return sorted(matches, key=lambda r: r.rating, reverse=True)
    if sort_by == SortOrder.HELPFUL:
        return sorted(matches, key=lambda r: r.helpful, reverse=True)
    return matches


class ReviewBrowser:
    def __init__(self, client: httpx.Client):
        self.client = client
        self.page = ReviewPage(reviews=[], stats=None)

    def fetch(self) -> ReviewPage:
        """Fetch all reviews and stats. A failed request leaves the previous page in place."""
        try:
            response = self.client.get(REVIEWS_PATH)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching reviews: {e}")
            return self.page

        stats = data.get("stats")
        self.page = ReviewPage(
            reviews=[Review.model_validate(r) for r in data.get("reviews") or []],
            stats=ReviewStats.model_validate(stats) if stats else None,
            demo=data.get("demo", False),
            error=data.get("error"),
            options=self.page.options,
        )
        return self.page

    def fetch_options(self) -> dict[str, list[str]]:
        response = self.client.get(f"{REVIEWS_PATH}/options")
        response.raise_for_status()
        self.page.options = response.json()
        return self.page.options

    def submit(self, form: dict[str, Any]) -> dict[str, Any]:
        """Submit a new review. Raises ReviewSubmitError if the API rejects it."""
        response = self.client.post(REVIEWS_PATH, json=form)
        body = response.json()
        if not response.is_success:
            raise ReviewSubmitError(body.get("error", f"HTTP {response.status_code}"))
        return body

    def mark_helpful(self, review_id: str) -> ReviewPage:
        """Upvote a review, then refresh to pick up the new count."""
        response = self.client.put(REVIEWS_PATH, json={"reviewId": review_id, "helpful": 1})
        if not response.is_success:
            raise ReviewSubmitError(response.json().get("error", f"HTTP {response.status_code}"))
        return self.fetch()

    def browse(self, search: str = "", rating: int = 0, sort_by: SortOrder = SortOrder.NEWEST) -> list[Review]:
        return filter_and_sort(self.page.reviews, search, rating, sort_by)
