"""Composite name similarity scoring.

Blends three signals computed on normalized names, then adds bonuses
for patterns typical of misspelled names:

    score = 0.45 x dice + 0.35 x edit + 0.10 x partial + bonuses

Bonuses (cumulative):
- +5 same first character
- +5 lengths differ by at most one character
- +15 short name (max length <= SHORT_NAME_MAX_LENGTH) with
  max(dice, edit) >= 50
- +5 max(dice, edit) >= 80

The result is rounded half-up and capped at 100.
"""

import math

from pydantic import BaseModel, Field

from beneficiary_dedup.matching.normalizer import normalize
from beneficiary_dedup.matching.signals import (
    dice_coefficient,
    edit_similarity,
    partial_match_score,
)

DICE_WEIGHT = 0.45
EDIT_WEIGHT = 0.35
PARTIAL_WEIGHT = 0.10

SAME_INITIAL_BONUS = 5
SIMILAR_LENGTH_BONUS = 5
SHORT_NAME_BONUS = 15
HIGH_SIMILARITY_BONUS = 5

# FLORIAD vs FLORIDA (7 letters) must still earn the short-name bonus
SHORT_NAME_MAX_LENGTH = 8
SHORT_NAME_MIN_SIGNAL = 50.0
HIGH_SIMILARITY_MIN_SIGNAL = 80.0


class SimilarityBreakdown(BaseModel):
    """Individual signals behind a composite similarity score."""

    dice: float = Field(ge=0.0, le=100.0, description="Bigram Dice x 100")
    edit_distance: float = Field(
        ge=0.0, le=100.0, description="Levenshtein similarity"
    )
    partial: float = Field(ge=0.0, le=100.0, description="Fuzzy partial match")
    bonus: int = Field(ge=0, description="Misspelling heuristics bonus")
    score: int = Field(ge=0, le=100, description="Composite score")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def _bonus(a: str, b: str, dice: float, edit: float) -> int:
    bonus = 0
    if a[0] == b[0]:
        bonus += SAME_INITIAL_BONUS
    if abs(len(a) - len(b)) <= 1:
        bonus += SIMILAR_LENGTH_BONUS

    strongest = max(dice, edit)
    is_short = max(len(a), len(b)) <= SHORT_NAME_MAX_LENGTH
    if is_short and strongest >= SHORT_NAME_MIN_SIGNAL:
        bonus += SHORT_NAME_BONUS
    if strongest >= HIGH_SIMILARITY_MIN_SIGNAL:
        bonus += HIGH_SIMILARITY_BONUS
    return bonus


def similarity_breakdown(name_a: str | None, name_b: str | None) -> SimilarityBreakdown:
    """Score two names and report each signal.

    Args:
        name_a: First name string (raw or normalized)
        name_b: Second name string (raw or normalized)

    Returns:
        SimilarityBreakdown whose `score` equals similarity(name_a, name_b)
    """
    a = normalize(name_a)
    b = normalize(name_b)

    if not a or not b:
        return SimilarityBreakdown(
            dice=0.0, edit_distance=0.0, partial=0.0, bonus=0, score=0
        )
    if a == b:
        return SimilarityBreakdown(
            dice=100.0, edit_distance=100.0, partial=100.0, bonus=0, score=100
        )

    dice = dice_coefficient(a, b) * 100
    edit = edit_similarity(a, b)
    partial = partial_match_score(a, b)
    bonus = _bonus(a, b, dice, edit)

    combined = (
        DICE_WEIGHT * dice + EDIT_WEIGHT * edit + PARTIAL_WEIGHT * partial + bonus
    )
    return SimilarityBreakdown(
        dice=dice,
        edit_distance=edit,
        partial=partial,
        bonus=bonus,
        score=min(round_half_up(combined), 100),
    )


def similarity(name_a: str | None, name_b: str | None) -> int:
    """Composite similarity (0-100) between two names.

    Empty names (after normalization) score 0; identical names score 100.
    Symmetric in its arguments.
    """
    return similarity_breakdown(name_a, name_b).score
