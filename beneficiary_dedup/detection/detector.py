"""Duplicate detection engine for beneficiary uploads.

Screens incoming name records against existing candidate records and
emits a MatchRecord for every pair scoring at or above the caller's
threshold. Two strategies share the same scoring primitives:

- EXHAUSTIVE: all pairs; score = max(full-name similarity,
  component similarity, full-name Dice x 100)
- BEST_MATCH: per incoming record, the highest-Dice candidate only;
  score = max(Dice x 100, component similarity)

Incoming records are processed in batches. A CancellationToken is
checked between batches; batch size never changes the result.
"""

import asyncio
import threading
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real
from typing import Any, Literal

import structlog

from beneficiary_dedup.detection.schemas import DetectionResult
from beneficiary_dedup.detection.strategy import DetectionStrategy, select_strategy
from beneficiary_dedup.exceptions import DetectionCancelled, InvalidInputError
from beneficiary_dedup.matching.classifier import classify
from beneficiary_dedup.matching.components import component_similarity
from beneficiary_dedup.matching.normalizer import normalize
from beneficiary_dedup.matching.schemas import (
    ComponentScoreSet,
    MatchRecord,
    NameRecord,
    RowError,
)
from beneficiary_dedup.matching.scorer import round_half_up, similarity
from beneficiary_dedup.matching.signals import (
    BigramProfile,
    bigram_profile,
    profile_dice,
)

logger = structlog.get_logger()

DEFAULT_BATCH_SIZE = 250


class CancellationToken:
    """Cooperative cancellation flag, safe to set from another thread."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True)
class _PreparedRecord:
    index: int
    record: NameRecord
    normalized: str
    profile: BigramProfile


@dataclass
class _DetectionPlan:
    strategy: DetectionStrategy
    threshold: float
    incoming_count: int
    candidate_count: int
    incoming: list[_PreparedRecord] = field(default_factory=list)
    candidates: list[_PreparedRecord] = field(default_factory=list)
    errors: list[RowError] = field(default_factory=list)


def _ensure_record_list(value: Any, name: str) -> None:
    if not isinstance(value, (list, tuple)):
        raise InvalidInputError(
            f"{name} must be a list of NameRecord, got {type(value).__name__}"
        )


def _ensure_threshold(threshold: Any) -> float:
    """Accept int, float, Decimal or any other real number except bool."""
    if isinstance(threshold, bool) or not isinstance(threshold, (Real, Decimal)):
        raise InvalidInputError(
            f"threshold must be a number, got {type(threshold).__name__}"
        )
    return float(threshold)


def _prepare(
    records: Sequence[Any],
    side: Literal["incoming", "candidate"],
    errors: list[RowError],
) -> list[_PreparedRecord]:
    """Normalize records once, skipping anything that cannot be compared."""
    prepared: list[_PreparedRecord] = []
    for index, record in enumerate(records):
        if not isinstance(record, NameRecord):
            errors.append(RowError(side=side, index=index, reason="not a name record"))
            continue
        normalized = normalize(record.display_name)
        if not normalized:
            errors.append(
                RowError(side=side, index=index, reason="no name after normalization")
            )
            continue
        prepared.append(
            _PreparedRecord(
                index=index,
                record=record,
                normalized=normalized,
                profile=bigram_profile(normalized),
            )
        )
    return prepared


def _build_match(
    incoming: _PreparedRecord,
    candidate: _PreparedRecord,
    score: float,
    components: ComponentScoreSet,
) -> MatchRecord:
    rounded = round_half_up(score)
    return MatchRecord(
        incoming_record=incoming.record,
        incoming_row_index=incoming.index,
        candidate_record=candidate.record,
        candidate_index=candidate.index,
        similarity_score=rounded,
        component_scores=components,
        match_type=classify(rounded),
    )


def _match_exhaustive(
    incoming: _PreparedRecord,
    candidates: list[_PreparedRecord],
    threshold: float,
) -> Iterator[MatchRecord]:
    """Every candidate whose best signal reaches the threshold."""
    for candidate in candidates:
        components = component_similarity(incoming.record, candidate.record)
        full_name = similarity(incoming.normalized, candidate.normalized)
        dice = profile_dice(incoming.profile, candidate.profile) * 100

        score = max(full_name, components.overall, dice)
        if score >= threshold:
            yield _build_match(incoming, candidate, score, components)


def _match_best(
    incoming: _PreparedRecord,
    candidates: list[_PreparedRecord],
    threshold: float,
) -> MatchRecord | None:
    """Single highest-Dice candidate, if it reaches the threshold.

    The first candidate wins ties.
    """
    best: _PreparedRecord | None = None
    best_rating = 0.0
    for candidate in candidates:
        rating = profile_dice(incoming.profile, candidate.profile)
        if best is None or rating > best_rating:
            best, best_rating = candidate, rating

    if best is None or best_rating * 100 < threshold:
        return None

    components = component_similarity(incoming.record, best.record)
    score = max(best_rating * 100, components.overall)
    return _build_match(incoming, best, score, components)


class DuplicateDetector:
    """Detects near-duplicate person records by name.

    Stateless between runs: every call builds its own plan, so one
    detector can serve concurrent requests.
    """

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE):
        """Initialize detector.

        Args:
            batch_size: Incoming records scored between cancellation
                checks (one worker-thread call each in run_async)

        Raises:
            ValueError: If batch_size is less than 1
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self._batch_size = batch_size

    @property
    def batch_size(self) -> int:
        return self._batch_size

    def run(
        self,
        incoming: Sequence[NameRecord | None],
        candidates: Sequence[NameRecord | None],
        threshold: float,
        *,
        strategy: DetectionStrategy | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> DetectionResult:
        """Screen incoming records against candidates.

        Args:
            incoming: Records being uploaded
            candidates: Existing records to compare against
            threshold: Minimum score (0-100) for a match: int, float or
                Decimal. Not clamped: <= 0 matches every compared pair,
                > 100 matches nothing.
            strategy: Force a strategy instead of choosing by input size
            cancel_token: Checked between batches

        Returns:
            DetectionResult with matches sorted by score descending

        Raises:
            InvalidInputError: If a record list is not a list/tuple or
                threshold is not a number
            DetectionCancelled: If cancel_token fires between batches
        """
        plan = self._plan(incoming, candidates, threshold, strategy)
        matches: list[MatchRecord] = []
        for processed, batch in self._batches(plan):
            self._check_cancelled(cancel_token, processed, len(plan.incoming))
            matches.extend(self._match_batch(plan, batch))
        return self._finish(plan, matches)

    async def run_async(
        self,
        incoming: Sequence[NameRecord | None],
        candidates: Sequence[NameRecord | None],
        threshold: float,
        *,
        strategy: DetectionStrategy | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> DetectionResult:
        """Same as run(), scoring each batch in a worker thread.

        The event loop stays free to serve other requests while a batch is
        scored. Cancellation is still checked between batches.
        """
        plan = self._plan(incoming, candidates, threshold, strategy)
        matches: list[MatchRecord] = []
        for processed, batch in self._batches(plan):
            self._check_cancelled(cancel_token, processed, len(plan.incoming))
            matches.extend(await asyncio.to_thread(self._match_batch, plan, batch))
        return self._finish(plan, matches)

    def _plan(
        self,
        incoming: Sequence[NameRecord | None],
        candidates: Sequence[NameRecord | None],
        threshold: float,
        strategy: DetectionStrategy | None,
    ) -> _DetectionPlan:
        _ensure_record_list(incoming, "incoming")
        _ensure_record_list(candidates, "candidates")
        threshold = _ensure_threshold(threshold)

        chosen = strategy or select_strategy(len(incoming), len(candidates))
        plan = _DetectionPlan(
            strategy=chosen,
            threshold=threshold,
            incoming_count=len(incoming),
            candidate_count=len(candidates),
        )
        plan.incoming = _prepare(incoming, "incoming", plan.errors)
        plan.candidates = _prepare(candidates, "candidate", plan.errors)

        logger.debug(
            "Detection planned",
            strategy=chosen.value,
            incoming=plan.incoming_count,
            candidates=plan.candidate_count,
            threshold=threshold,
        )
        return plan

    def _batches(
        self, plan: _DetectionPlan
    ) -> Iterator[tuple[int, list[_PreparedRecord]]]:
        for start in range(0, len(plan.incoming), self._batch_size):
            yield start, plan.incoming[start : start + self._batch_size]

    def _match_batch(
        self, plan: _DetectionPlan, batch: list[_PreparedRecord]
    ) -> list[MatchRecord]:
        if not plan.candidates:
            return []

        matches: list[MatchRecord] = []
        for record in batch:
            if plan.strategy is DetectionStrategy.EXHAUSTIVE:
                matches.extend(
                    _match_exhaustive(record, plan.candidates, plan.threshold)
                )
            else:
                match = _match_best(record, plan.candidates, plan.threshold)
                if match is not None:
                    matches.append(match)
        return matches

    @staticmethod
    def _check_cancelled(
        token: CancellationToken | None, processed: int, total: int
    ) -> None:
        if token is not None and token.cancelled:
            logger.warning("Detection cancelled", processed=processed, total=total)
            raise DetectionCancelled(processed, total)

    @staticmethod
    def _finish(plan: _DetectionPlan, matches: list[MatchRecord]) -> DetectionResult:
        # sorted() is stable, so equal scores keep iteration order
        ordered = sorted(matches, key=lambda m: m.similarity_score, reverse=True)

        for error in plan.errors:
            logger.debug(
                "Skipped row", side=error.side, index=error.index, reason=error.reason
            )
        logger.info(
            "Duplicate detection completed",
            strategy=plan.strategy.value,
            incoming=plan.incoming_count,
            candidates=plan.candidate_count,
            matches=len(ordered),
            skipped=len(plan.errors),
        )
        return DetectionResult(
            strategy=plan.strategy,
            matches=ordered,
            errors=plan.errors,
            incoming_count=plan.incoming_count,
            candidate_count=plan.candidate_count,
        )


def detect(
    incoming: Sequence[NameRecord | None],
    candidates: Sequence[NameRecord | None],
    threshold: float,
    *,
    strategy: DetectionStrategy | None = None,
) -> list[MatchRecord]:
    """Detect duplicates and return only the sorted match records."""
    result = DuplicateDetector().run(
        incoming, candidates, threshold, strategy=strategy
    )
    return result.matches
