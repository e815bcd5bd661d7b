"""FastAPI application for the interview reviews backend."""

import logging
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.config import CORS_ORIGINS, LOG_LEVEL
from src.models import HelpfulUpdate
from src.services.review_service import ReviewService, review_service

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Interview Reviews API",
    description="Collects and aggregates user reviews of the AI interview practice assistant",
    version="1.0.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_review_service() -> ReviewService:
    """Dependency returning the process-wide review service."""
    return review_service


def failure_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when the body is not valid JSON."""
    try:
        return await request.json()
    except ValueError:
        logger.warning(f"Received unparseable payload on {request.method} {request.url.path}")
        return None


# Health check endpoint
@app.get("/health")
async def health_check(service: ReviewService = Depends(get_review_service)):
    """Health check endpoint."""
    return {"status": "healthy", "service": "Interview Reviews API", "demo": service.demo}


# Review Endpoints. Synchronous so they run in the threadpool; the store client blocks.
@app.get("/api/reviews")
def list_reviews(service: ReviewService = Depends(get_review_service)):
    """Get all reviews with aggregate statistics."""
    try:
        return service.list_reviews()
    except Exception as e:
        logger.error(f"Error listing reviews: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.post("/api/reviews")
def create_review(payload: Any = Depends(read_json_body), service: ReviewService = Depends(get_review_service)):
    """Submit a new review."""
    try:
        result = service.create_review(payload)
        if not result["success"]:
            return failure_response(status.HTTP_400_BAD_REQUEST, result["error"])
        return result
    except Exception as e:
        logger.error(f"Error creating review: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.put("/api/reviews")
def mark_review_helpful(payload: Any = Depends(read_json_body), service: ReviewService = Depends(get_review_service)):
    """Increment a review's helpful count."""
    try:
        update = HelpfulUpdate.model_validate(payload)
    except ValidationError:
        logger.warning("Received invalid helpful update payload")
        return failure_response(status.HTTP_400_BAD_REQUEST, "Invalid helpful update")

    try:
        result = service.mark_helpful(update.review_id, update.helpful)
        if not result["success"]:
            return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, result["error"])
        return result
    except Exception as e:
        logger.error(f"Error updating review: {e}")
        return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update review")


@app.get("/api/reviews/options")
async def get_review_options(service: ReviewService = Depends(get_review_service)):
    """Get the interview types and roles offered on the review form."""
    return service.get_options()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
