"""Strategy selection for duplicate detection.

EXHAUSTIVE compares every incoming record with every candidate and may
flag several candidates per incoming record. BEST_MATCH keeps only the
single best Dice candidate per incoming record, trading recall for
speed on large uploads. Both are kept as named variants; the size limits
below decide which one runs when the caller does not choose.
"""

from enum import Enum

EXHAUSTIVE_MAX_INCOMING = 100
EXHAUSTIVE_MAX_CANDIDATES = 500


class DetectionStrategy(str, Enum):
    """How incoming records are compared against candidates."""

    EXHAUSTIVE = "exhaustive"
    BEST_MATCH = "best_match"


def select_strategy(incoming_count: int, candidate_count: int) -> DetectionStrategy:
    """Pick the strategy for the given input sizes.

    Args:
        incoming_count: Number of incoming records (as passed, valid or not)
        candidate_count: Number of candidate records (as passed)

    Returns:
        EXHAUSTIVE for up to 100 incoming and 500 candidates, else BEST_MATCH
    """
    if (
        incoming_count <= EXHAUSTIVE_MAX_INCOMING
        and candidate_count <= EXHAUSTIVE_MAX_CANDIDATES
    ):
        return DetectionStrategy.EXHAUSTIVE
    return DetectionStrategy.BEST_MATCH
