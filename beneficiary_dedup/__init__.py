"""Fuzzy duplicate detection for beneficiary records."""

from beneficiary_dedup.detection import DuplicateDetector, detect
from beneficiary_dedup.matching import classify, normalize, similarity

__all__ = ["DuplicateDetector", "classify", "detect", "normalize", "similarity"]
