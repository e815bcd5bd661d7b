"""
Pydantic models for the interview review document.
"""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

INTERVIEW_TYPES = [
    "Technical",
    "Behavioral",
    "System Design",
    "Coding Challenge",
    "HR Screening",
]

INTERVIEW_ROLES = [
    "Software Engineer",
    "Frontend Developer",
    "Backend Developer",
    "Full Stack Developer",
    "Data Scientist",
    "Product Manager",
    "DevOps Engineer",
    "UI/UX Designer",
]


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ReviewCreate(CamelModel):
    """Fields a client may submit. Server-assigned fields are ignored."""

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)
    title: str = Field(min_length=1)
    comment: str = Field(min_length=1)
    interview_type: str = ""
    interview_role: str = ""


class Review(CamelModel):
    id: str
    name: str
    email: str
    rating: int
    title: str
    comment: str
    interview_type: str = ""
    interview_role: str = ""
    timestamp: datetime
    helpful: int = Field(0, ge=0)
    verified: bool = False

    @field_validator("timestamp")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Timestamps stored without an offset are read as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_submission(cls, data: ReviewCreate) -> "Review":
        """Build a new review, stamping the server-owned fields."""
        return cls(
            **data.model_dump(),
            id=uuid.uuid4().hex,
            timestamp=datetime.now(timezone.utc),
            helpful=0,
            verified=False,
        )


class ReviewStats(CamelModel):
    total_reviews: int
    average_rating: float
    rating_distribution: dict[int, int]
    recent_reviews: list[Review] = []


class HelpfulUpdate(CamelModel):
    review_id: str
    helpful: int = Field(1, ge=1)
