"""Match tier classification by score band.

Bands:
- score >= 80: DUPLICATE
- 60 <= score < 80: POSSIBLE_MISMATCH
- otherwise: NO_MATCH

REVIEW_ZONE is never produced by classify(). It is the name the review
screens give to the POSSIBLE_MISMATCH band, exposed via in_review_zone().
"""

from enum import Enum


class MatchType(str, Enum):
    """Tier assigned to a detected match."""

    DUPLICATE = "DUPLICATE"
    POSSIBLE_MISMATCH = "POSSIBLE_MISMATCH"
    REVIEW_ZONE = "REVIEW_ZONE"
    NO_MATCH = "NO_MATCH"


DUPLICATE_MIN_SCORE = 80
REVIEW_ZONE_MIN_SCORE = 60


def classify(score: float) -> MatchType:
    """Bucket a similarity score into a match tier."""
    if score >= DUPLICATE_MIN_SCORE:
        return MatchType.DUPLICATE
    if score >= REVIEW_ZONE_MIN_SCORE:
        return MatchType.POSSIBLE_MISMATCH
    return MatchType.NO_MATCH


def in_review_zone(score: float) -> bool:
    """True when a score falls in the band that needs manual review."""
    return REVIEW_ZONE_MIN_SCORE <= score < DUPLICATE_MIN_SCORE
