"""Main FastAPI application for the CSV QA Service"""
import logging
from fastapi import FastAPI

from .config import settings
from .routes import qa

# Set up logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.SERVICE_NAME,
    description="Quality assurance for clinical CSV uploads",
    version="1.0.0"
)

app.include_router(qa.router)


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancer"""
    return {"status": "healthy", "service": settings.SERVICE_NAME}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "clinical_qa.main:app",
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT
    )
