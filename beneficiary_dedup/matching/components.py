"""Component-wise name matching (first / middle / last).

Each component present on both sides is scored with the composite
scorer and blended by weight. Agreement across several components
earns a bonus.
"""

from beneficiary_dedup.matching.schemas import ComponentScoreSet, NameRecord
from beneficiary_dedup.matching.scorer import similarity

COMPONENT_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("first_name", 0.4),
    ("middle_name", 0.2),
    ("last_name", 0.4),
)

STRONG_COMPONENT_SCORE = 70
MULTI_COMPONENT_BONUS = 15
SINGLE_COMPONENT_BONUS = 5


def component_similarity(
    incoming: NameRecord, candidate: NameRecord
) -> ComponentScoreSet:
    """Blend per-component similarity between two records.

    Components missing on either side contribute neither score nor
    weight. Bonus: +15 when two or more components score >= 70, else +5
    when one does. The blended score is capped at 100.

    Args:
        incoming: Record being screened
        candidate: Existing record it is compared against

    Returns:
        ComponentScoreSet with per-component scores and `overall`
    """
    scores: dict[str, int] = {}
    total = 0.0
    weight_sum = 0.0
    strong_components = 0

    for field, weight in COMPONENT_WEIGHTS:
        left = (getattr(incoming, field) or "").strip()
        right = (getattr(candidate, field) or "").strip()
        if not left or not right:
            scores[field] = 0
            continue

        score = similarity(left, right)
        scores[field] = score
        total += score * weight
        weight_sum += weight
        if score >= STRONG_COMPONENT_SCORE:
            strong_components += 1

    base = total / weight_sum if weight_sum > 0 else 0.0
    if strong_components >= 2:
        base += MULTI_COMPONENT_BONUS
    elif strong_components == 1:
        base += SINGLE_COMPONENT_BONUS

    return ComponentScoreSet(**scores, overall=min(base, 100.0))
