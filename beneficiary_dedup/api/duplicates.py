"""Duplicate screening API endpoints.

Screens uploaded roster rows against existing beneficiary rows and
scores individual name pairs for the review screens.
"""

from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from beneficiary_dedup.detection.detector import DuplicateDetector
from beneficiary_dedup.detection.reporting import match_type_stats, summarize_scan
from beneficiary_dedup.detection.schemas import MatchTypeStats, ScanSummary
from beneficiary_dedup.detection.strategy import DetectionStrategy
from beneficiary_dedup.exceptions import InvalidInputError
from beneficiary_dedup.matching.classifier import MatchType, classify, in_review_zone
from beneficiary_dedup.matching.schemas import (
    FieldMapping,
    MatchRecord,
    RowError,
    records_from_rows,
)
from beneficiary_dedup.matching.scorer import similarity_breakdown

logger = structlog.get_logger()

router = APIRouter(prefix="/duplicates", tags=["duplicates"])


class DetectRequest(BaseModel):
    """Request to screen incoming rows against existing rows."""

    incoming_rows: list[Any] = Field(description="Uploaded rows (column -> value)")
    candidate_rows: list[Any] = Field(description="Existing rows (column -> value)")
    threshold: float = Field(description="Minimum similarity score (0-100)")
    incoming_mapping: FieldMapping = Field(
        default_factory=FieldMapping.excel,
        description="Columns of the incoming rows (defaults to Excel headers)",
    )
    candidate_mapping: FieldMapping = Field(
        default_factory=FieldMapping.database,
        description="Columns of the existing rows (defaults to database columns)",
    )
    strategy: DetectionStrategy | None = Field(
        default=None, description="Force a strategy instead of sizing by input"
    )


class DetectResponse(BaseModel):
    """Detection result for the review screens."""

    strategy: DetectionStrategy = Field(description="Strategy used")
    matches: list[MatchRecord] = Field(description="Matches, highest score first")
    stats: MatchTypeStats = Field(description="Match counts per tier")
    summary: ScanSummary = Field(description="Flagged rows vs. new records")
    errors: list[RowError] = Field(
        default_factory=list, description="Rows skipped during detection"
    )


class SimilarityRequest(BaseModel):
    """Request to score one pair of names."""

    name_a: str = Field(description="First name string")
    name_b: str = Field(description="Second name string")


class SimilarityResponse(BaseModel):
    """Composite score with the signals behind it."""

    score: int = Field(ge=0, le=100, description="Composite similarity")
    match_type: MatchType = Field(description="Tier for this score")
    in_review_zone: bool = Field(description="True if score is in 60-79")
    dice: float = Field(description="Bigram Dice x 100")
    edit_distance: float = Field(description="Levenshtein similarity")
    partial: float = Field(description="Fuzzy partial match")
    bonus: int = Field(description="Misspelling heuristics bonus")


def get_duplicate_detector(request: Request) -> DuplicateDetector:
    """Dependency to get DuplicateDetector from app state."""
    return request.app.state.duplicate_detector


@router.post("/detect", response_model=DetectResponse)
async def detect_duplicates(
    body: DetectRequest,
    detector: DuplicateDetector = Depends(get_duplicate_detector),
) -> DetectResponse:
    """Screen uploaded rows against existing rows.

    Rows are mapped to name records with the request's field mappings;
    rows without a usable name are skipped and listed in `errors`.
    """
    incoming = records_from_rows(body.incoming_rows, body.incoming_mapping)
    candidates = records_from_rows(body.candidate_rows, body.candidate_mapping)

    try:
        result = await detector.run_async(
            incoming, candidates, body.threshold, strategy=body.strategy
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    logger.info(
        "Screened upload",
        rows=len(incoming),
        matches=len(result.matches),
        strategy=result.strategy.value,
    )
    return DetectResponse(
        strategy=result.strategy,
        matches=result.matches,
        stats=match_type_stats(result.matches),
        summary=summarize_scan(result),
        errors=result.errors,
    )


@router.post("/similarity", response_model=SimilarityResponse)
async def score_names(body: SimilarityRequest) -> SimilarityResponse:
    """Score a single pair of names."""
    breakdown = similarity_breakdown(body.name_a, body.name_b)
    return SimilarityResponse(
        score=breakdown.score,
        match_type=classify(breakdown.score),
        in_review_zone=in_review_zone(breakdown.score),
        dice=breakdown.dice,
        edit_distance=breakdown.edit_distance,
        partial=breakdown.partial,
        bonus=breakdown.bonus,
    )
