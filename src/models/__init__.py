"""
Init file for the review models.
"""

from .reviews import (
    INTERVIEW_ROLES,
    INTERVIEW_TYPES,
    HelpfulUpdate,
    Review,
    ReviewCreate,
    ReviewStats,
)

__all__ = [
    "INTERVIEW_ROLES",
    "INTERVIEW_TYPES",
    "HelpfulUpdate",
    "Review",
    "ReviewCreate",
    "ReviewStats",
]
