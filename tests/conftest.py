"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from beneficiary_dedup.detection.detector import DuplicateDetector
from beneficiary_dedup.main import app


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Create async test client for the FastAPI app with a detector."""
    app.state.duplicate_detector = DuplicateDetector(batch_size=2)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up app state
    del app.state.duplicate_detector
