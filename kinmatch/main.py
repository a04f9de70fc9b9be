"""Main FastAPI application for family relationship matching"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from kinmatch.api.endpoints import match, people
from kinmatch.config import get_settings
from kinmatch.dependencies import get_matcher
import logging

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Invalid thresholds fail here, at startup
matcher = get_matcher()
logger.info(f"Matcher configured: {matcher.config}")

# Create FastAPI app
app = FastAPI(
    title="Family Matching API",
    description="Rule-based scoring of likely sibling and parent/child relationships between people",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /api prefix
app.include_router(people.router, prefix="/api", tags=["People"])
app.include_router(match.router, prefix="/api", tags=["Matching"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
