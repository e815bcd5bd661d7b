#!/usr/bin/env python3
"""
Interview Reviews Backend Startup Script
This script starts the FastAPI server for the reviews API.
"""

import logging

import uvicorn

from src.config import DEMO_MODE

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info("Starting Interview Reviews Backend...")
    logger.info(f"Storage: {'in-memory demo reviews' if DEMO_MODE else 'JSONBin document store'}")
    logger.info("Available endpoints:")
    logger.info("  - Health Check: GET /health")
    logger.info("  - Reviews: GET/POST/PUT /api/reviews")
    logger.info("  - Review Form Options: GET /api/reviews/options")
    logger.info("  - API Docs: http://localhost:8000/docs")

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
