"""Independent string-similarity signals used by the composite scorer.

Each signal works on already-normalized names:
- Dice coefficient over character bigrams (0-1)
- Edit-distance similarity from Levenshtein distance (0-100)
- Fuzzy partial-match score via RapidFuzz partial_ratio (0-100)
"""

from collections import Counter
from typing import NamedTuple

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

# partial_ratio results below this are reported as 0
PARTIAL_MATCH_CUTOFF = 60.0


class BigramProfile(NamedTuple):
    """Precomputed bigram multiset for one string.

    Whitespace is removed before bigrams are taken, so "ANA MARIA" and
    "ANAMARIA" share every bigram.
    """

    compact: str
    bigrams: Counter[str]

    @property
    def size(self) -> int:
        return max(len(self.compact) - 1, 0)


def bigram_profile(text: str) -> BigramProfile:
    """Build the bigram profile of a string."""
    compact = "".join(text.split())
    bigrams = Counter(compact[i : i + 2] for i in range(len(compact) - 1))
    return BigramProfile(compact=compact, bigrams=bigrams)


def profile_dice(first: BigramProfile, second: BigramProfile) -> float:
    """Dice coefficient between two precomputed profiles (0-1)."""
    if not first.compact or not second.compact:
        return 0.0
    if first.compact == second.compact:
        return 1.0
    if first.size == 0 or second.size == 0:
        return 0.0

    shared = sum((first.bigrams & second.bigrams).values())
    return 2.0 * shared / (first.size + second.size)


def dice_coefficient(a: str, b: str) -> float:
    """Dice coefficient: 2 x shared bigrams / total bigrams (0-1).

    Bigrams are counted as a multiset. Strings with fewer than two
    non-space characters have no bigrams and score 0 unless identical.
    """
    return profile_dice(bigram_profile(a), bigram_profile(b))


def edit_similarity(a: str, b: str) -> float:
    """Levenshtein similarity: (maxLen - distance) / maxLen x 100."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 100.0
    distance = Levenshtein.distance(a, b)
    return (max_len - distance) / max_len * 100


def partial_match_score(a: str, b: str) -> float:
    """Tolerant partial alignment of one name inside the other (0-100).

    Taken in both directions so the signal is symmetric. Scores under
    PARTIAL_MATCH_CUTOFF count as no match and return 0.
    """
    if not a or not b:
        return 0.0
    return max(
        fuzz.partial_ratio(a, b, score_cutoff=PARTIAL_MATCH_CUTOFF),
        fuzz.partial_ratio(b, a, score_cutoff=PARTIAL_MATCH_CUTOFF),
    )
