"""Name matching schemas.

Defines person name records, the field mapping used to read them from
upload rows or database rows, and the match records the detector emits.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from beneficiary_dedup.matching.classifier import MatchType, in_review_zone

# Placeholder strings the upload pipeline writes for empty cells
_MISSING_MARKERS = frozenset({"", "null", "undefined"})


class FieldMapping(BaseModel):
    """Column names to read a NameRecord from a row.

    Excel uploads and stored database rows name the same columns
    differently, so callers pick a mapping per source.
    """

    full_name_field: str | None = Field(default=None, description="Full name column")
    first_name_field: str | None = Field(default=None, description="First name column")
    middle_name_field: str | None = Field(
        default=None, description="Middle name column"
    )
    last_name_field: str | None = Field(default=None, description="Last name column")
    suffix_field: str | None = Field(
        default=None, description="Name extension column (JR, SR, III)"
    )

    @classmethod
    def excel(cls) -> "FieldMapping":
        """Header text used by beneficiary Excel rosters."""
        return cls(
            full_name_field="Name",
            first_name_field="First Name",
            middle_name_field="Middle Name",
            last_name_field="Last Name",
            suffix_field="Ext. Name",
        )

    @classmethod
    def database(cls) -> "FieldMapping":
        """Column names of stored beneficiary rows."""
        return cls(
            full_name_field="name",
            first_name_field="first_name",
            middle_name_field="middle_name",
            last_name_field="last_name",
            suffix_field="ext_name",
        )


class NameRecord(BaseModel):
    """Person name as read from an upload row or a database row.

    Blank values and the literal strings "null"/"undefined" are stored
    as None. Non-string cell values are converted with str().
    """

    model_config = ConfigDict(frozen=True)

    full_name: str | None = Field(default=None, description="Full display name")
    first_name: str | None = Field(default=None, description="First name")
    middle_name: str | None = Field(default=None, description="Middle name")
    last_name: str | None = Field(default=None, description="Last name")
    extension_name: str | None = Field(
        default=None, description="Name extension (JR, SR, III)"
    )
    source: dict[Any, Any] | None = Field(
        default=None, description="Original row the record was read from"
    )

    @field_validator(
        "full_name",
        "first_name",
        "middle_name",
        "last_name",
        "extension_name",
        mode="before",
    )
    @classmethod
    def _clean_name_value(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        if text in _MISSING_MARKERS:
            return None
        return text

    @property
    def display_name(self) -> str:
        """Full name if present, else the components joined by spaces."""
        if self.full_name:
            return self.full_name
        parts = [
            self.first_name,
            self.middle_name,
            self.last_name,
            self.extension_name,
        ]
        return " ".join(part for part in parts if part)

    @classmethod
    def from_row(cls, row: Mapping[Any, Any], mapping: FieldMapping) -> "NameRecord":
        """Read a record from a row using a field mapping.

        Args:
            row: Column -> value for one row. Keys may be header names or
                column positions; only the mapped keys are read.
            mapping: Which columns hold which name parts

        Returns:
            NameRecord referencing the original row via `source`
        """

        def pick(field: str | None) -> Any:
            return row.get(field) if field else None

        return cls(
            full_name=pick(mapping.full_name_field),
            first_name=pick(mapping.first_name_field),
            middle_name=pick(mapping.middle_name_field),
            last_name=pick(mapping.last_name_field),
            extension_name=pick(mapping.suffix_field),
            source=dict(row),
        )


def records_from_rows(
    rows: list[Any], mapping: FieldMapping
) -> list[NameRecord | None]:
    """Convert rows to NameRecords, keeping each row at its position.

    Rows that are not mappings become None so the detector reports them
    at their original index instead of shifting later rows.
    """
    return [
        NameRecord.from_row(row, mapping) if isinstance(row, Mapping) else None
        for row in rows
    ]


class ComponentScoreSet(BaseModel):
    """Per-component similarity scores plus their weighted blend.

    A component missing on either side scores 0 here and is left out of
    the blended `overall` score.
    """

    model_config = ConfigDict(frozen=True)

    first_name: int = Field(default=0, ge=0, le=100)
    middle_name: int = Field(default=0, ge=0, le=100)
    last_name: int = Field(default=0, ge=0, le=100)
    overall: float = Field(default=0.0, ge=0.0, le=100.0)


class MatchRecord(BaseModel):
    """One incoming record flagged against one existing record."""

    model_config = ConfigDict(frozen=True)

    incoming_record: NameRecord = Field(description="Incoming (uploaded) record")
    incoming_row_index: int = Field(
        ge=0, description="Position of the record in the incoming list"
    )
    candidate_record: NameRecord = Field(description="Existing record it matched")
    candidate_index: int = Field(
        ge=0, description="Position of the record in the candidate list"
    )
    similarity_score: int = Field(ge=0, le=100, description="Match score (0-100)")
    component_scores: ComponentScoreSet = Field(
        description="First/middle/last name scores"
    )
    match_type: MatchType = Field(description="Tier derived from similarity_score")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def incoming_name(self) -> str:
        return self.incoming_record.display_name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def candidate_name(self) -> str:
        return self.candidate_record.display_name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def in_review_zone(self) -> bool:
        """True if the score sits in the manual review band (60-79)."""
        return in_review_zone(self.similarity_score)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def requires_manual_review(self) -> bool:
        return self.in_review_zone


class RowError(BaseModel):
    """A row skipped during detection, for caller diagnostics."""

    side: Literal["incoming", "candidate"] = Field(description="Which list")
    index: int = Field(ge=0, description="Position of the row in its list")
    reason: str = Field(description="Why the row was skipped")
