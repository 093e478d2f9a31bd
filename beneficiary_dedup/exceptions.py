"""Error hierarchy for duplicate detection.

Malformed rows are never raised; they are skipped and reported as
RowError entries. Only contract violations and cancellation raise.
"""


class DetectionError(Exception):
    """Base error for the duplicate detection engine."""


class InvalidInputError(DetectionError, TypeError):
    """Raised when detection is called with arguments of the wrong type."""


class DetectionCancelled(DetectionError):
    """Raised when a CancellationToken fires between batches."""

    def __init__(self, processed: int, total: int):
        self.processed = processed
        self.total = total
        super().__init__(
            f"Detection cancelled after {processed} of {total} incoming records"
        )
