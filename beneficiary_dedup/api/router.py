"""API router aggregation."""

from fastapi import APIRouter

from beneficiary_dedup.api.duplicates import router as duplicates_router
from beneficiary_dedup.api.health import router as health_router

api_router = APIRouter()
api_router.include_router(health_router)
# Duplicate screening endpoints
api_router.include_router(duplicates_router)
