"""Detection result schemas."""

from pydantic import BaseModel, Field, computed_field

from beneficiary_dedup.detection.strategy import DetectionStrategy
from beneficiary_dedup.matching.schemas import MatchRecord, RowError


class DetectionResult(BaseModel):
    """Outcome of one detection run, tagged with the strategy used."""

    strategy: DetectionStrategy = Field(description="Strategy that produced matches")
    matches: list[MatchRecord] = Field(
        default_factory=list, description="Matches sorted by score descending"
    )
    errors: list[RowError] = Field(
        default_factory=list, description="Rows skipped during detection"
    )
    incoming_count: int = Field(ge=0, description="Incoming records passed in")
    candidate_count: int = Field(ge=0, description="Candidate records passed in")


class MatchTypeStats(BaseModel):
    """Match counts per tier.

    REVIEW_ZONE counts records in the 60-79 band, so it overlaps
    POSSIBLE_MISMATCH rather than adding to the total.
    """

    DUPLICATE: int = 0
    POSSIBLE_MISMATCH: int = 0
    NO_MATCH: int = 0
    REVIEW_ZONE: int = 0


class ScanSummary(BaseModel):
    """Split of an upload into flagged rows and new records."""

    total_rows: int = Field(ge=0, description="Incoming rows screened")
    duplicate_row_indices: list[int] = Field(
        default_factory=list, description="Rows with at least one match"
    )
    new_row_indices: list[int] = Field(
        default_factory=list, description="Rows with no match"
    )
    skipped_row_indices: list[int] = Field(
        default_factory=list, description="Rows skipped as malformed or unnamed"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_duplicates(self) -> int:
        return len(self.duplicate_row_indices)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_new_records(self) -> int:
        return len(self.new_row_indices)
