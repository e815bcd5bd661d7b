"""Review collection service backed by the JSONBin document store."""

import logging
import threading
from typing import Any

from pydantic import ValidationError

from src.db.exceptions import StoreError
from src.db.review_store import InMemoryReviewStore, create_review_store
from src.models import INTERVIEW_ROLES, INTERVIEW_TYPES, Review, ReviewCreate
from src.utils.review_stats import calculate_review_stats

logger = logging.getLogger(__name__)

LIST_FALLBACK_MESSAGE = "Using demo data due to connection error"
CREATE_FALLBACK_MESSAGE = "Saved locally due to connection error"
INVALID_REVIEW_MESSAGE = "Failed to process review data"
UPDATE_FAILED_MESSAGE = "Failed to update review"


class ReviewService:
    """
    List, create and upvote reviews.

    Store failures on list and create degrade to the in-memory fallback and
    are reported through the "demo" and "error" keys. Failures while updating
    helpful counts are returned as unsuccessful results.
    """

    def __init__(self, store=None, fallback: InMemoryReviewStore | None = None):
        self.store = create_review_store() if store is None else store
        if fallback is None:
            fallback = self.store if isinstance(self.store, InMemoryReviewStore) else InMemoryReviewStore()
        self.fallback = fallback
        # Serialises read-modify-write sequences within this process
        self._lock = threading.Lock()

    @property
    def demo(self) -> bool:
        return self.store.demo

    def _build_response(self, reviews: list[Review], demo: bool, **extra: Any) -> dict[str, Any]:
        stats = calculate_review_stats(reviews)
        return {**extra, "stats": stats.to_json_dict(), "demo": demo}

    def list_reviews(self) -> dict[str, Any]:
        """
        Get all reviews with their statistics.

        Returns:
            Dict with reviews, stats, demo flag and, when degraded, an error note
        """
        try:
            reviews = self.store.load_all()
        except StoreError as e:
            logger.error(f"Error fetching reviews: {e}")
            reviews = self.fallback.load_all()
            return {
                "reviews": [review.to_json_dict() for review in reviews],
                **self._build_response(reviews, demo=True),
                "error": LIST_FALLBACK_MESSAGE,
            }

        logger.info(f"Fetched {len(reviews)} reviews")
        return {
            "reviews": [review.to_json_dict() for review in reviews],
            **self._build_response(reviews, demo=self.demo),
        }

    def create_review(self, payload: Any) -> dict[str, Any]:
        """
        Validate and store a new review, newest first.

        Args:
            payload: Decoded JSON body submitted by the client

        Returns:
            Dict with operation result, the stored review and refreshed stats
        """
        try:
            submission = ReviewCreate.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Rejected review payload: {e.error_count()} validation error(s)")
            return {"success": False, "error": INVALID_REVIEW_MESSAGE}

        review = Review.from_submission(submission)

        with self._lock:
            try:
                reviews = [review, *self.store.load_all()]
                self.store.replace_all(reviews)
            except StoreError as e:
                logger.error(f"Error saving review: {e}")
                reviews = self.fallback.prepend(review)
                return {
                    **self._build_response(reviews, demo=True, success=True, review=review.to_json_dict()),
                    "error": CREATE_FALLBACK_MESSAGE,
                }

        logger.info(f"Created review {review.id} with rating {review.rating}")
        return self._build_response(reviews, demo=self.demo, success=True, review=review.to_json_dict())

    def mark_helpful(self, review_id: str, delta: int = 1) -> dict[str, Any]:
        """
        Add delta to a review's helpful counter. Unknown ids are left alone.

        Args:
            review_id: Review ID to update
            delta: Amount to add

        Returns:
            Dict with operation result and refreshed stats
        """
        with self._lock:
            try:
                reviews = self.store.load_all()
                review = next((r for r in reviews if r.id == review_id), None)
                if review is not None:
                    review.helpful += delta
                else:
                    logger.warning(f"Helpful update for unknown review {review_id}")
                self.store.replace_all(reviews)
            except StoreError as e:
                logger.error(f"Error updating review {review_id}: {e}")
                return {"success": False, "error": UPDATE_FAILED_MESSAGE}

        return self._build_response(reviews, demo=self.demo, success=True)

    def get_options(self) -> dict[str, list[str]]:
        """Get the interview types and roles offered on the review form."""
        return {"interviewTypes": list(INTERVIEW_TYPES), "interviewRoles": list(INTERVIEW_ROLES)}


# Singleton instance
review_service = ReviewService()
