"""Review collection storage: the remote JSON document or an in-memory list."""

import logging
import threading
from datetime import datetime, timedelta, timezone

from pydantic import TypeAdapter, ValidationError

from src.config import DEMO_MODE, JSONBIN_CONFIG
from src.db.exceptions import StoreUnavailableError
from src.db.jsonbin_client import JsonBinClient
from src.models import Review

logger = logging.getLogger(__name__)

_review_list = TypeAdapter(list[Review])


def demo_reviews(now: datetime | None = None) -> list[Review]:
    """Example reviews shown when no store is configured."""
    now = now or datetime.now(timezone.utc)
    return [
        Review(
            id="1",
            name="Sarah Johnson",
            email="sarah.j@email.com",
            rating=5,
            title="Amazing AI Interview Experience!",
            comment=(
                "This AI assistant helped me prepare for my software engineering interview. "
                "The feedback was incredibly detailed and the voice interaction felt natural. I landed the job!"
            ),
            interview_type="Technical",
            interview_role="Software Engineer",
            timestamp=now - timedelta(days=2),
            helpful=12,
            verified=True,
        ),
        Review(
            id="2",
            name="Michael Chen",
            email="m.chen@email.com",
            rating=4,
            title="Great Practice Tool",
            comment=(
                "The AI provided realistic interview questions and good feedback. "
                "The voice recognition worked well most of the time. Would recommend for interview prep."
            ),
            interview_type="Behavioral",
            interview_role="Product Manager",
            timestamp=now - timedelta(days=5),
            helpful=8,
            verified=True,
        ),
        Review(
            id="3",
            name="Emily Rodriguez",
            email="emily.r@email.com",
            rating=5,
            title="Perfect for Remote Interview Prep",
            comment=(
                "As someone preparing for remote interviews, this tool was perfect. "
                "The AI understood my responses well and provided constructive feedback. Highly recommended!"
            ),
            interview_type="Technical",
            interview_role="Data Scientist",
            timestamp=now - timedelta(days=7),
            helpful=15,
            verified=True,
        ),
    ]


class InMemoryReviewStore:
    """Process-local review list. Contents are lost on restart."""

    demo = True

    def __init__(self, reviews: list[Review] | None = None):
        self._reviews = demo_reviews() if reviews is None else list(reviews)
        self._lock = threading.Lock()

    def load_all(self) -> list[Review]:
        with self._lock:
            return [review.model_copy() for review in self._reviews]

    def replace_all(self, reviews: list[Review]) -> None:
        with self._lock:
            self._reviews = [review.model_copy() for review in reviews]

    def prepend(self, review: Review) -> list[Review]:
        """Insert a review at the front and return the updated contents."""
        with self._lock:
            self._reviews.insert(0, review.model_copy())
            return [r.model_copy() for r in self._reviews]


class RemoteReviewStore:
    """
    Reviews kept in a single hosted JSON document of shape {"reviews": [...]}.

    Every write replaces the whole document. There is no version check, so
    concurrent writers built from stale reads overwrite each other (last write wins).
    """

    demo = False

    def __init__(self, client: JsonBinClient):
        self.client = client

    def load_all(self) -> list[Review]:
        record = self.client.get_json()
        if not record:
            return []

        try:
            return _review_list.validate_python(record.get("reviews") or [])
        except (ValidationError, AttributeError) as e:
            logger.error(f"Stored review document is malformed: {e}")
            raise StoreUnavailableError("Stored review document is malformed") from e

    def replace_all(self, reviews: list[Review]) -> None:
        self.client.set_json({"reviews": [review.to_json_dict() for review in reviews]})
        logger.info(f"Saved {len(reviews)} reviews to document store")


def create_review_store(demo_mode: bool = DEMO_MODE, config: dict = JSONBIN_CONFIG):
    """Pick the review store for this process. Decided once at startup."""
    if demo_mode:
        logger.warning("No JSONBIN_API_KEY configured, running in demo mode with in-memory reviews")
        return InMemoryReviewStore()

    logger.info(f"Using JSONBin document store at {config['api_url']}/{config['bin_id']}")
    return RemoteReviewStore(JsonBinClient(config))
