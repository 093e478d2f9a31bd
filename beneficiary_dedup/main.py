"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from beneficiary_dedup.api.router import api_router
from beneficiary_dedup.config import settings
from beneficiary_dedup.detection.detector import DuplicateDetector

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Create the shared duplicate detector

    Shutdown:
    - Release app state
    """
    logger.info(f"Starting {settings.app_name}...")

    app.state.duplicate_detector = DuplicateDetector(
        batch_size=settings.detection_batch_size
    )
    logger.info(
        f"Duplicate detector initialized (batch size {settings.detection_batch_size})"
    )

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    del app.state.duplicate_detector


app = FastAPI(
    title=settings.app_name,
    description="Fuzzy duplicate screening for beneficiary uploads",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "beneficiary_dedup.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
