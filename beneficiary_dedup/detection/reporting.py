"""Filtering and summary helpers over detection results.

Used by the review screens: score filters, tier filters, per-tier
counts, and the split of an upload into flagged rows and new records.
"""

from beneficiary_dedup.detection.schemas import (
    DetectionResult,
    MatchTypeStats,
    ScanSummary,
)
from beneficiary_dedup.matching.classifier import MatchType
from beneficiary_dedup.matching.schemas import MatchRecord


def filter_by_score(matches: list[MatchRecord], min_score: float) -> list[MatchRecord]:
    """Keep matches scoring at least min_score, preserving order."""
    return [m for m in matches if m.similarity_score >= min_score]


def review_zone_items(matches: list[MatchRecord]) -> list[MatchRecord]:
    """Matches that need manual review (score 60-79)."""
    return [m for m in matches if m.in_review_zone]


def filter_by_match_type(
    matches: list[MatchRecord], match_type: MatchType
) -> list[MatchRecord]:
    """Keep matches of one tier.

    REVIEW_ZONE is not stored on any record; asking for it selects the
    matches in the review band instead.
    """
    if match_type is MatchType.REVIEW_ZONE:
        return review_zone_items(matches)
    return [m for m in matches if m.match_type is match_type]


def match_type_stats(matches: list[MatchRecord]) -> MatchTypeStats:
    """Count matches per tier, plus the review band."""
    stats = MatchTypeStats()
    for match in matches:
        name = match.match_type.value
        setattr(stats, name, getattr(stats, name) + 1)
        if match.in_review_zone:
            stats.REVIEW_ZONE += 1
    return stats


def summarize_scan(result: DetectionResult) -> ScanSummary:
    """Split incoming rows into flagged duplicates and new records.

    A row counts as a duplicate if any match references it. Every other
    row, including rows skipped for having no usable name, is a new
    record; skipped rows are also listed separately.
    """
    flagged = {m.incoming_row_index for m in result.matches}
    skipped = sorted(e.index for e in result.errors if e.side == "incoming")

    return ScanSummary(
        total_rows=result.incoming_count,
        duplicate_row_indices=sorted(flagged),
        new_row_indices=[i for i in range(result.incoming_count) if i not in flagged],
        skipped_row_indices=skipped,
    )
