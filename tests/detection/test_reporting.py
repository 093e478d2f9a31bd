"""Tests for detection reporting helpers."""

import pytest

from beneficiary_dedup.detection.reporting import (
    filter_by_match_type,
    filter_by_score,
    match_type_stats,
    review_zone_items,
    summarize_scan,
)
from beneficiary_dedup.detection.schemas import DetectionResult
from beneficiary_dedup.detection.strategy import DetectionStrategy
from beneficiary_dedup.matching.classifier import MatchType, classify
from beneficiary_dedup.matching.schemas import (
    ComponentScoreSet,
    MatchRecord,
    NameRecord,
    RowError,
)


def make_match(score: int, row: int = 0, candidate: int = 0) -> MatchRecord:
    """Build a match record with the given score."""
    return MatchRecord(
        incoming_record=NameRecord(full_name=f"INCOMING {row}"),
        incoming_row_index=row,
        candidate_record=NameRecord(full_name=f"CANDIDATE {candidate}"),
        candidate_index=candidate,
        similarity_score=score,
        component_scores=ComponentScoreSet(),
        match_type=classify(score),
    )


@pytest.fixture
def matches() -> list[MatchRecord]:
    """Matches spread across every band."""
    return [
        make_match(95, row=0),
        make_match(85, row=0, candidate=1),
        make_match(75, row=2),
        make_match(65, row=2, candidate=1),
        make_match(50, row=2, candidate=2),
    ]


class TestFilters:
    """Tests for score and tier filters."""

    def test_filter_by_score(self, matches: list[MatchRecord]):
        result = filter_by_score(matches, 70)

        assert [m.similarity_score for m in result] == [95, 85, 75]

    def test_filter_by_match_type(self, matches: list[MatchRecord]):
        result = filter_by_match_type(matches, MatchType.POSSIBLE_MISMATCH)

        assert [m.similarity_score for m in result] == [75, 65]

    def test_filter_review_zone(self, matches: list[MatchRecord]):
        """REVIEW_ZONE selects the 60-79 band."""
        result = filter_by_match_type(matches, MatchType.REVIEW_ZONE)

        assert result == review_zone_items(matches)
        assert [m.similarity_score for m in result] == [75, 65]


class TestMatchTypeStats:
    """Tests for match_type_stats function."""

    def test_counts_per_tier(self, matches: list[MatchRecord]):
        stats = match_type_stats(matches)

        assert stats.DUPLICATE == 2
        assert stats.POSSIBLE_MISMATCH == 2
        assert stats.NO_MATCH == 1
        assert stats.REVIEW_ZONE == 2

    def test_empty(self):
        stats = match_type_stats([])

        assert stats.model_dump() == {
            "DUPLICATE": 0,
            "POSSIBLE_MISMATCH": 0,
            "NO_MATCH": 0,
            "REVIEW_ZONE": 0,
        }


class TestSummarizeScan:
    """Tests for summarize_scan function."""

    def test_splits_flagged_and_new_rows(self, matches: list[MatchRecord]):
        result = DetectionResult(
            strategy=DetectionStrategy.EXHAUSTIVE,
            matches=matches,
            errors=[
                RowError(side="incoming", index=3, reason="no name"),
                RowError(side="candidate", index=1, reason="not a name record"),
            ],
            incoming_count=4,
            candidate_count=3,
        )

        summary = summarize_scan(result)

        assert summary.total_rows == 4
        assert summary.duplicate_row_indices == [0, 2]
        assert summary.new_row_indices == [1, 3]
        assert summary.skipped_row_indices == [3]
        assert summary.total_duplicates == 2
        assert summary.total_new_records == 2

    def test_no_matches(self):
        result = DetectionResult(
            strategy=DetectionStrategy.BEST_MATCH, incoming_count=2, candidate_count=0
        )

        summary = summarize_scan(result)

        assert summary.duplicate_row_indices == []
        assert summary.new_row_indices == [0, 1]
