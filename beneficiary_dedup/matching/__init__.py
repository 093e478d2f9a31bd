"""Name matching primitives for beneficiary duplicate detection.

This module provides:
- normalize: canonical upper-case form of a name
- Dice, edit-distance and fuzzy partial signals
- similarity: composite 0-100 score between two names
- component_similarity: weighted first/middle/last blend
- classify: DUPLICATE / POSSIBLE_MISMATCH / NO_MATCH tiers
- Schemas for name records, field mappings and match records
"""

from beneficiary_dedup.matching.classifier import MatchType, classify, in_review_zone
from beneficiary_dedup.matching.components import component_similarity
from beneficiary_dedup.matching.normalizer import normalize
from beneficiary_dedup.matching.schemas import (
    ComponentScoreSet,
    FieldMapping,
    MatchRecord,
    NameRecord,
    RowError,
    records_from_rows,
)
from beneficiary_dedup.matching.scorer import (
    SimilarityBreakdown,
    similarity,
    similarity_breakdown,
)
from beneficiary_dedup.matching.signals import (
    dice_coefficient,
    edit_similarity,
    partial_match_score,
)

__all__ = [
    "ComponentScoreSet",
    "FieldMapping",
    "MatchRecord",
    "MatchType",
    "NameRecord",
    "RowError",
    "SimilarityBreakdown",
    "classify",
    "component_similarity",
    "dice_coefficient",
    "edit_similarity",
    "in_review_zone",
    "normalize",
    "partial_match_score",
    "records_from_rows",
    "similarity",
    "similarity_breakdown",
]
