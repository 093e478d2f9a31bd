"""Duplicate detection for beneficiary uploads.

Provides the DuplicateDetector engine, its strategy selection, result
schemas, and reporting helpers for the review screens.
"""

from beneficiary_dedup.detection.detector import (
    CancellationToken,
    DuplicateDetector,
    detect,
)
from beneficiary_dedup.detection.reporting import (
    filter_by_match_type,
    filter_by_score,
    match_type_stats,
    review_zone_items,
    summarize_scan,
)
from beneficiary_dedup.detection.schemas import (
    DetectionResult,
    MatchTypeStats,
    ScanSummary,
)
from beneficiary_dedup.detection.strategy import DetectionStrategy, select_strategy

__all__ = [
    "CancellationToken",
    "DetectionResult",
    "DetectionStrategy",
    "DuplicateDetector",
    "MatchTypeStats",
    "ScanSummary",
    "detect",
    "filter_by_match_type",
    "filter_by_score",
    "match_type_stats",
    "review_zone_items",
    "select_strategy",
    "summarize_scan",
]
