"""Tests for match tier classification."""

import pytest

from beneficiary_dedup.matching.classifier import MatchType, classify, in_review_zone


class TestClassify:
    """Tests for classify function."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (100, MatchType.DUPLICATE),
            (80, MatchType.DUPLICATE),
            (79, MatchType.POSSIBLE_MISMATCH),
            (79.5, MatchType.POSSIBLE_MISMATCH),
            (60, MatchType.POSSIBLE_MISMATCH),
            (59, MatchType.NO_MATCH),
            (0, MatchType.NO_MATCH),
            (-5, MatchType.NO_MATCH),
            (150, MatchType.DUPLICATE),
        ],
    )
    def test_band_boundaries(self, score: float, expected: MatchType):
        assert classify(score) is expected

    def test_review_zone_is_never_computed(self):
        """REVIEW_ZONE relabels the 60-79 band; classify never returns it."""
        assert all(classify(s) is not MatchType.REVIEW_ZONE for s in range(-1, 102))

    def test_serializes_by_value(self):
        assert MatchType.POSSIBLE_MISMATCH.value == "POSSIBLE_MISMATCH"
        assert MatchType("DUPLICATE") is MatchType.DUPLICATE


class TestInReviewZone:
    """Tests for in_review_zone function."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(59, False), (60, True), (70, True), (79, True), (80, False)],
    )
    def test_review_band(self, score: int, expected: bool):
        assert in_review_zone(score) is expected

    def test_matches_possible_mismatch_band(self):
        """The review band and POSSIBLE_MISMATCH cover the same scores."""
        for score in range(0, 101):
            assert in_review_zone(score) == (
                classify(score) is MatchType.POSSIBLE_MISMATCH
            )
